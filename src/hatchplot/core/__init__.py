"""Core processing algorithms for hatchplot.

This module contains the core algorithms for:

- Brightness sampling (pixel and area-averaged luminance)
- Hatch path generation (brightness-modulated sawtooth scan lines)
- Curve fitting (Catmull-Rom to cubic Bezier)
- Geometry helpers (scan vectors, path length, Bezier evaluation)

All services are designed to be:
- Stateless
- Pure (no side effects)

The pipeline orchestrator lives in hatchplot.core.pipeline and is imported
from there, since it also depends on the I/O layer.

Key functions:
- brightness_at: Luminance of the pixel under a point
- area_brightness: Mean luminance over a square window
- generate_hatch_paths: Hatch polylines for a raster
- catmull_rom_to_bezier: Smooth a polyline into Bezier segments
- flatten_cubic: Fixed-step Bezier flattening

Key classes:
- HatchPathGenerator: Scan line walker
- CurveFitter: Fits polylines with a fixed tension
"""

from hatchplot.core.curves import CurveFitter, catmull_rom_to_bezier
from hatchplot.core.geometry import (
    cubic_bezier_point,
    flatten_cubic,
    path_length,
    scan_vectors,
)
from hatchplot.core.hatch import (
    HatchPathGenerator,
    Modulation,
    generate_hatch_paths,
    modulation_for,
)
from hatchplot.core.sampler import area_brightness, brightness_at

__all__ = [
    # Curve classes
    "CurveFitter",
    # Hatch classes
    "HatchPathGenerator",
    "Modulation",
    # Sampling functions
    "area_brightness",
    "brightness_at",
    # Curve functions
    "catmull_rom_to_bezier",
    # Geometry functions
    "cubic_bezier_point",
    "flatten_cubic",
    "generate_hatch_paths",
    "modulation_for",
    "path_length",
    "scan_vectors",
]
