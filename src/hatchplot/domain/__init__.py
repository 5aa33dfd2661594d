"""Domain models for hatchplot.

This module contains the value types passed between pipeline stages:
rasters, points, polylines, Bezier segments, fitted paths and parsed path
commands. All models are designed to be:

- Immutable (frozen dataclasses, read-only arrays)
- Independent of Pillow and SVG implementation details

Key classes:
- Raster: RGBA pixels with a precomputed luminance plane
- Point: A 2D point with an optional brightness sample
- BezierSegment: A cubic Bezier segment
- StraightPath / CurvedPath: Output of the curve fitter
- MoveCommand / LineCommand / CurveCommand: Output of the SVG parser
"""

from hatchplot.domain.commands import CurveCommand, LineCommand, MoveCommand, PathCommand
from hatchplot.domain.path import (
    BezierSegment,
    CurvedPath,
    FittedPath,
    Point,
    Polyline,
    StraightPath,
)
from hatchplot.domain.raster import Raster

__all__: list[str] = [
    # Geometry
    "Point",
    "Polyline",
    "BezierSegment",
    "StraightPath",
    "CurvedPath",
    "FittedPath",
    # Commands
    "MoveCommand",
    "LineCommand",
    "CurveCommand",
    "PathCommand",
    # Images
    "Raster",
]
