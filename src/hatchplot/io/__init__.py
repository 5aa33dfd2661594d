"""Document I/O layer for hatchplot.

This module handles everything that crosses the pipeline boundary as text
or files: decoding images with Pillow, writing and reading SVG path
documents, emitting G-code programs, and saving artifacts to disk.

Key classes:
- SvgWriter: Render fitted paths as an SVG document
- GcodeEmitter: Turn parsed path commands into a G-code program
- ArtifactWriter: Save documents to disk

Key functions:
- load_raster: Load an image file as a canvas-sized raster
- parse_path_data / parse_svg_document: Read SVG path data back
"""

from hatchplot.io.gcode import GcodeEmitter, emit_gcode
from hatchplot.io.image_loader import image_to_raster, load_raster
from hatchplot.io.svg_parser import parse_path_data, parse_svg_document, parse_svg_paths
from hatchplot.io.svg_writer import SvgWriter, build_path_data, render_svg
from hatchplot.io.writer import ArtifactWriter

__all__ = [
    "ArtifactWriter",
    "GcodeEmitter",
    "SvgWriter",
    "build_path_data",
    "emit_gcode",
    "image_to_raster",
    "load_raster",
    "parse_path_data",
    "parse_svg_document",
    "parse_svg_paths",
    "render_svg",
]
