"""Image loading for hatchplot.

This module decodes image files with Pillow and places them on a white
canvas of the configured size. The image is scaled uniformly to fit, then
centered; transparent pixels end up white.
"""

from pathlib import Path

import numpy as np
from PIL import Image, UnidentifiedImageError

from hatchplot.domain import Raster
from hatchplot.exceptions import ImageLoadError, InvalidParameterError

CANVAS_BACKGROUND = (255, 255, 255, 255)


def fit_to_canvas(
    image_width: int, image_height: int, canvas_width: int, canvas_height: int
) -> tuple[int, int, int, int]:
    """Compute the letterboxed placement of an image on a canvas.

    Args:
        image_width: Source image width
        image_height: Source image height
        canvas_width: Canvas width
        canvas_height: Canvas height

    Returns:
        Tuple of (x, y, scaled_width, scaled_height)

    Examples:
        >>> fit_to_canvas(400, 400, 800, 600)
        (100, 0, 600, 600)
    """
    scale = min(canvas_width / image_width, canvas_height / image_height)
    scaled_width = max(1, round(image_width * scale))
    scaled_height = max(1, round(image_height * scale))
    x = (canvas_width - scaled_width) // 2
    y = (canvas_height - scaled_height) // 2
    return x, y, scaled_width, scaled_height


def image_to_raster(image: Image.Image, canvas_width: int, canvas_height: int) -> Raster:
    """Letterbox a decoded image onto a white canvas.

    Args:
        image: Decoded Pillow image (any mode)
        canvas_width: Canvas width in pixels
        canvas_height: Canvas height in pixels

    Returns:
        Raster of size canvas_width x canvas_height

    Raises:
        InvalidParameterError: If the canvas size is not positive
    """
    if canvas_width < 1 or canvas_height < 1:
        raise InvalidParameterError(
            "canvas", (canvas_width, canvas_height), "width and height must be positive"
        )

    x, y, scaled_width, scaled_height = fit_to_canvas(
        image.width, image.height, canvas_width, canvas_height
    )

    source = image.convert("RGBA").resize(
        (scaled_width, scaled_height), Image.Resampling.LANCZOS
    )
    canvas = Image.new("RGBA", (canvas_width, canvas_height), CANVAS_BACKGROUND)
    canvas.alpha_composite(source, dest=(x, y))

    return Raster.from_array(np.asarray(canvas, dtype=np.uint8))


def load_raster(path: Path, canvas_width: int = 800, canvas_height: int = 600) -> Raster:
    """Load an image file as a canvas-sized raster.

    Args:
        path: Path to an image file Pillow can decode
        canvas_width: Canvas width in pixels
        canvas_height: Canvas height in pixels

    Returns:
        Raster ready for hatch generation

    Raises:
        ImageLoadError: If the file is missing or cannot be decoded
    """
    if not path.exists():
        raise ImageLoadError(str(path), "file not found")

    try:
        with Image.open(path) as image:
            image.load()
            return image_to_raster(image, canvas_width, canvas_height)
    except (UnidentifiedImageError, OSError) as e:
        raise ImageLoadError(str(path), str(e)) from e
