"""Brightness sampling on a raster.

Positions may be fractional; they are floored to pixel indices. Anything
off the raster reads as white (255) so blank margins never attract ink.
"""

import math

from hatchplot.domain import Raster

BLANK_BRIGHTNESS = 255.0


def brightness_at(raster: Raster, x: float, y: float) -> float:
    """Return the luminance of the pixel containing (x, y).

    Args:
        raster: Source raster
        x: X position in pixels (floored)
        y: Y position in pixels (floored)

    Returns:
        Brightness in [0, 255]; 255 outside the raster

    Examples:
        >>> raster = Raster.filled(2, 2, (0, 0, 0, 255))
        >>> brightness_at(raster, 1.7, 0.2)
        0.0
        >>> brightness_at(raster, 2.0, 0.0)
        255.0
    """
    px = math.floor(x)
    py = math.floor(y)

    if px < 0 or px >= raster.width or py < 0 or py >= raster.height:
        return BLANK_BRIGHTNESS

    return float(raster.luminance[py, px])


def area_brightness(raster: Raster, cx: float, cy: float, cell_size: float) -> float:
    """Average brightness over a square window centered at (cx, cy).

    The window has side 2 * floor(cell_size / 2) + 1. Samples falling off
    the raster are left out of both the sum and the count.

    Args:
        raster: Source raster
        cx: Window center X
        cy: Window center Y
        cell_size: Nominal window size in pixels

    Returns:
        Mean brightness in [0, 255]; 255 if no sample lands on the raster
    """
    half = math.floor(cell_size / 2)
    width = raster.width
    height = raster.height
    luminance = raster.luminance

    total = 0.0
    count = 0

    for dy in range(-half, half + 1):
        y = math.floor(cy + dy)
        if y < 0 or y >= height:
            continue
        for dx in range(-half, half + 1):
            x = math.floor(cx + dx)
            if 0 <= x < width:
                total += float(luminance[y, x])
                count += 1

    if count == 0:
        return BLANK_BRIGHTNESS
    return total / count
