"""Sawtooth hatch path generation.

Parallel scan lines are laid across the raster at a configurable angle and
spacing. Walking each line, the generator samples local brightness and
displaces every sample perpendicular to the line by a sine wave whose
amplitude, phase advance and step size follow the brightness:

- dark areas: large amplitude, high frequency, small steps (dense ink)
- light areas: flat line, low frequency, large steps

Successive lines run in opposite directions (boustrophedon) so the end of
one line sits next to the start of the following one.
"""

import math
from typing import NamedTuple

from hatchplot.config import HatchConfig
from hatchplot.core._validation import (
    require_at_least,
    require_finite,
    require_ordered,
    require_positive,
)
from hatchplot.core.geometry import scan_vectors
from hatchplot.core.sampler import area_brightness
from hatchplot.domain import Point, Polyline, Raster


class Modulation(NamedTuple):
    """Oscillation parameters derived from one brightness sample."""

    amplitude: float
    frequency: float
    velocity: float


def modulation_for(brightness: float, config: HatchConfig) -> Modulation:
    """Map a raw brightness sample to oscillation parameters.

    Args:
        brightness: Brightness in [0, 255]
        config: Hatch configuration with amplitude, frequency and velocity bounds

    Returns:
        Modulation for the sample

    Examples:
        >>> m = modulation_for(0.0, HatchConfig(max_amplitude=10.0))
        >>> # Black: amplitude 10.0, frequency ~0.2, velocity 0.5
    """
    normalized = brightness / 255
    darkness = 1 - normalized

    amplitude = config.max_amplitude * darkness
    frequency = config.min_frequency + (config.max_frequency - config.min_frequency) * darkness
    velocity = config.min_velocity + (config.max_velocity - config.min_velocity) * normalized
    return Modulation(amplitude, frequency, velocity)


class HatchPathGenerator:
    """Generates brightness-modulated hatch polylines over a raster.

    Example:
        generator = HatchPathGenerator(HatchConfig(line_spacing=4.0, angle=30.0))
        polylines = generator.generate(raster)
    """

    def __init__(self, config: HatchConfig) -> None:
        """Initialize the generator.

        Args:
            config: Hatch configuration

        Raises:
            InvalidParameterError: If any parameter is out of range or not finite
        """
        _validate_config(config)
        self.config = config
        self._direction, self._perpendicular = scan_vectors(config.angle)

    def line_count(self, raster: Raster) -> int:
        """Number of scan lines needed to cover the raster at any angle."""
        return math.ceil(_diagonal(raster) / self.config.line_spacing)

    def generate(self, raster: Raster) -> list[Polyline]:
        """Generate hatch polylines for the whole raster.

        Args:
            raster: Source raster

        Returns:
            One polyline per scan line with at least two points, in scan
            order, or a single concatenated polyline when link_ends is set.
            Empty if no scan line crosses the raster.
        """
        diagonal = _diagonal(raster)
        paths: list[Polyline] = []

        for i in range(self.line_count(raster)):
            offset = i * self.config.line_spacing - diagonal / 2
            points = self.generate_line_points(raster, offset, reverse=(i % 2 == 1))

            if len(points) >= 2:
                paths.append(points)

        if self.config.link_ends and paths:
            # Concatenation only; adjacency comes from the alternating directions
            linked: Polyline = []
            for path in paths:
                linked.extend(path)
            return [linked]

        return paths

    def generate_line_points(
        self, raster: Raster, offset: float, reverse: bool = False
    ) -> Polyline:
        """Walk one scan line and collect its displaced sample points.

        Args:
            raster: Source raster
            offset: Perpendicular offset of the line from the raster center
            reverse: Return points in reverse walking order

        Returns:
            Points in draw order (may be empty when the line misses the raster)
        """
        config = self.config
        dx, dy = self._direction
        px, py = self._perpendicular

        width = raster.width
        height = raster.height
        center_x = width / 2
        center_y = height / 2
        diagonal = _diagonal(raster)

        points: Polyline = []
        t = -diagonal
        phase = 0.0

        while t <= diagonal:
            base_x = px * offset + dx * t + center_x
            base_y = py * offset + dy * t + center_y

            if 0 <= base_x < width and 0 <= base_y < height:
                brightness = area_brightness(raster, base_x, base_y, config.cell_size)
                amplitude, frequency, velocity = modulation_for(brightness, config)

                wave = amplitude * math.sin(phase)
                points.append(
                    Point(base_x + px * wave, base_y + py * wave, brightness=brightness)
                )

                phase += frequency
                t += velocity
            else:
                t += config.max_velocity

        if reverse:
            points.reverse()

        return points


def generate_hatch_paths(raster: Raster, config: HatchConfig) -> list[Polyline]:
    """Generate hatch polylines for a raster.

    Convenience wrapper around HatchPathGenerator.

    Args:
        raster: Source raster
        config: Hatch configuration

    Returns:
        List of polylines in draw order
    """
    return HatchPathGenerator(config).generate(raster)


def _diagonal(raster: Raster) -> float:
    return math.sqrt(raster.width * raster.width + raster.height * raster.height)


def _validate_config(config: HatchConfig) -> None:
    """Re-check a config that may have bypassed pydantic validation."""
    require_positive("line_spacing", config.line_spacing)
    require_finite("angle", config.angle)
    require_at_least("max_amplitude", config.max_amplitude, 0.0)
    require_positive("min_frequency", config.min_frequency)
    require_positive("max_frequency", config.max_frequency)
    require_ordered("min_frequency", config.min_frequency, "max_frequency", config.max_frequency)
    require_positive("min_velocity", config.min_velocity)
    require_positive("max_velocity", config.max_velocity)
    require_ordered("min_velocity", config.min_velocity, "max_velocity", config.max_velocity)
    require_at_least("cell_size", config.cell_size, 1.0)
