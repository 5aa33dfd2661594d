"""Raster image representation.

A Raster holds the RGBA pixels the hatch generator samples. It is created
once per run by the image loader (or directly from a byte buffer) and never
mutated afterwards.
"""

from dataclasses import dataclass, field

import numpy as np

from hatchplot.exceptions import InvalidParameterError

# ITU-R BT.601 luma weights, in thousandths so white sums to exactly 255
LUMA_R = 299
LUMA_G = 587
LUMA_B = 114
LUMA_SCALE = 1000


@dataclass(frozen=True, eq=False)
class Raster:
    """An immutable RGBA raster.

    Attributes:
        pixels: Read-only uint8 array of shape (height, width, 4), row 0 first
        luminance: Read-only float array of shape (height, width) holding
            0.299*R + 0.587*G + 0.114*B per pixel
    """

    pixels: np.ndarray
    luminance: np.ndarray = field(init=False, repr=False)

    def __post_init__(self) -> None:
        pixels = self.pixels
        if pixels.ndim != 3 or pixels.shape[2] != 4:
            raise InvalidParameterError(
                "pixels", pixels.shape, "expected an array of shape (height, width, 4)"
            )
        if pixels.shape[0] < 1 or pixels.shape[1] < 1:
            raise InvalidParameterError(
                "pixels", pixels.shape, "raster must be at least 1x1"
            )

        pixels = np.array(pixels, dtype=np.uint8, copy=True)
        pixels.setflags(write=False)

        channels = pixels.astype(np.int64)
        weighted = (
            LUMA_R * channels[:, :, 0]
            + LUMA_G * channels[:, :, 1]
            + LUMA_B * channels[:, :, 2]
        )
        luminance = weighted / LUMA_SCALE
        luminance.setflags(write=False)

        object.__setattr__(self, "pixels", pixels)
        object.__setattr__(self, "luminance", luminance)

    @property
    def width(self) -> int:
        """Raster width in pixels."""
        return int(self.pixels.shape[1])

    @property
    def height(self) -> int:
        """Raster height in pixels."""
        return int(self.pixels.shape[0])

    def contains(self, x: float, y: float) -> bool:
        """Check whether a (possibly fractional) position lies on the raster."""
        return 0 <= x < self.width and 0 <= y < self.height

    @classmethod
    def from_rgba(cls, width: int, height: int, data: bytes) -> "Raster":
        """Build a raster from an interleaved RGBA byte buffer.

        Args:
            width: Raster width in pixels
            height: Raster height in pixels
            data: Row-major RGBA bytes, length width * height * 4

        Returns:
            Raster instance

        Raises:
            InvalidParameterError: If dimensions or buffer length are invalid
        """
        if width < 1 or height < 1:
            raise InvalidParameterError(
                "size", (width, height), "width and height must be positive"
            )
        expected = width * height * 4
        if len(data) != expected:
            raise InvalidParameterError(
                "data", len(data), f"expected {expected} bytes for {width}x{height} RGBA"
            )

        array = np.frombuffer(bytes(data), dtype=np.uint8).reshape(height, width, 4)
        return cls(pixels=array)

    @classmethod
    def from_array(cls, array: np.ndarray) -> "Raster":
        """Wrap an (height, width, 4) uint8 array."""
        return cls(pixels=array)

    @classmethod
    def filled(
        cls,
        width: int,
        height: int,
        rgba: tuple[int, int, int, int] = (255, 255, 255, 255),
    ) -> "Raster":
        """Create a raster of a single uniform color."""
        if width < 1 or height < 1:
            raise InvalidParameterError(
                "size", (width, height), "width and height must be positive"
            )
        array = np.empty((height, width, 4), dtype=np.uint8)
        array[:, :] = rgba
        return cls(pixels=array)
