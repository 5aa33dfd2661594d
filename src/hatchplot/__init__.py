"""Hatchplot - Convert raster images into pen-plotter paths.

Hatchplot is a CLI tool that turns an image into a single-pen drawing by
scanning rotated, oscillating hatch lines across it. Dark regions get wider,
faster oscillations; light regions stay nearly straight. The resulting
polylines are smoothed into Bezier curves and written as an SVG document and
a G-code program.

Example:
    $ hatchplot render portrait.png

This will create plotter-path.svg and plotter-path.gcode next to the image.
"""

__version__ = "0.1.0"
__author__ = "Dimosthenis Kaponis"

__all__ = ["__author__", "__version__"]
