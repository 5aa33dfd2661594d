"""Unit tests for sawtooth hatch path generation."""

import math

import numpy as np
import pytest

from hatchplot.config import HatchConfig
from hatchplot.core.geometry import scan_vectors
from hatchplot.core.hatch import HatchPathGenerator, generate_hatch_paths, modulation_for
from hatchplot.domain import Point, Raster
from hatchplot.exceptions import InvalidParameterError


def _perpendicular_offset(point: Point, angle: float) -> float:
    _, (px, py) = scan_vectors(angle)
    return point.x * px + point.y * py


class TestModulation:
    """Tests for modulation_for."""

    def test_black_is_maximum(self) -> None:
        """Black samples get max amplitude and frequency, min velocity."""
        config = HatchConfig(
            max_amplitude=10.0,
            min_frequency=0.05,
            max_frequency=0.2,
            min_velocity=0.5,
            max_velocity=2.0,
        )
        amplitude, frequency, velocity = modulation_for(0.0, config)
        assert amplitude == pytest.approx(10.0)
        assert frequency == pytest.approx(0.2)
        assert velocity == pytest.approx(0.5)

    def test_white_is_minimum(self) -> None:
        """White samples get zero amplitude, min frequency, max velocity."""
        config = HatchConfig()
        amplitude, frequency, velocity = modulation_for(255.0, config)
        assert amplitude == 0.0
        assert frequency == pytest.approx(config.min_frequency)
        assert velocity == pytest.approx(config.max_velocity)

    def test_mid_gray_interpolates(self) -> None:
        """Mid gray lands halfway between the bounds."""
        config = HatchConfig(max_amplitude=8.0, min_velocity=1.0, max_velocity=3.0)
        amplitude, _, velocity = modulation_for(127.5, config)
        assert amplitude == pytest.approx(4.0)
        assert velocity == pytest.approx(2.0)


class TestHatchPathGeneratorValidation:
    """Tests for parameter validation."""

    @pytest.mark.parametrize(
        ("field", "value"),
        [
            ("line_spacing", 0.0),
            ("line_spacing", float("nan")),
            ("angle", float("inf")),
            ("max_amplitude", -1.0),
            ("min_frequency", 0.0),
            ("min_velocity", -0.5),
            ("max_velocity", float("inf")),
            ("cell_size", 0.5),
        ],
    )
    def test_rejects_bad_values(self, field: str, value: float) -> None:
        """Bad values fail even when pydantic validation is bypassed."""
        config = HatchConfig().model_copy(update={field: value})
        with pytest.raises(InvalidParameterError) as excinfo:
            HatchPathGenerator(config)
        assert excinfo.value.parameter == field

    def test_rejects_inverted_frequency(self) -> None:
        """min_frequency above max_frequency is rejected."""
        config = HatchConfig.model_construct(
            **{**HatchConfig().model_dump(), "min_frequency": 0.3, "max_frequency": 0.2}
        )
        with pytest.raises(InvalidParameterError, match="max_frequency"):
            HatchPathGenerator(config)

    def test_rejects_inverted_velocity(self) -> None:
        """min_velocity above max_velocity is rejected."""
        config = HatchConfig.model_construct(
            **{**HatchConfig().model_dump(), "min_velocity": 3.0, "max_velocity": 2.0}
        )
        with pytest.raises(InvalidParameterError, match="max_velocity"):
            HatchPathGenerator(config)


class TestGenerateLinePoints:
    """Tests for walking a single scan line."""

    def test_black_raster_full_oscillation(self) -> None:
        """On black, every point oscillates at max amplitude and frequency."""
        raster = Raster.filled(10, 10, (0, 0, 0, 255))
        config = HatchConfig(
            angle=0.0,
            max_amplitude=10.0,
            min_frequency=0.05,
            max_frequency=0.2,
            min_velocity=0.5,
            max_velocity=2.0,
        )
        generator = HatchPathGenerator(config)
        points = generator.generate_line_points(raster, offset=0.0)

        assert len(points) > 2
        for k, point in enumerate(points):
            assert point.y == pytest.approx(5.0 + 10.0 * math.sin(0.2 * k))
            assert point.brightness == 0.0

        # Steps along the line are min_velocity
        for a, b in zip(points, points[1:]):
            assert b.x - a.x == pytest.approx(0.5)

    def test_white_raster_is_straight(self) -> None:
        """On white, points stay on the base line and step at max velocity."""
        raster = Raster.filled(20, 20)
        generator = HatchPathGenerator(HatchConfig(angle=0.0, max_amplitude=10.0))
        points = generator.generate_line_points(raster, offset=-3.0)

        assert points
        for point in points:
            assert point.y == pytest.approx(7.0)
        for a, b in zip(points, points[1:]):
            assert b.x - a.x == pytest.approx(2.0)

    def test_points_stay_within_raster_span(self) -> None:
        """Base positions are only sampled inside the raster."""
        raster = Raster.filled(30, 10)
        generator = HatchPathGenerator(HatchConfig(angle=0.0))
        points = generator.generate_line_points(raster, offset=0.0)
        assert all(0 <= p.x < 30 for p in points)

    def test_line_missing_raster_is_empty(self) -> None:
        """A line whose offset lies beyond the raster has no points."""
        raster = Raster.filled(10, 10)
        generator = HatchPathGenerator(HatchConfig(angle=0.0))
        assert generator.generate_line_points(raster, offset=50.0) == []

    def test_reverse(self) -> None:
        """Reversed lines return the same points in opposite order."""
        raster = Raster.filled(15, 15, (90, 90, 90, 255))
        generator = HatchPathGenerator(HatchConfig(angle=20.0))
        forward = generator.generate_line_points(raster, offset=1.0)
        backward = generator.generate_line_points(raster, offset=1.0, reverse=True)
        assert backward == list(reversed(forward))

    def test_termination_bound(self) -> None:
        """A line never yields more than 2 * diag / min_velocity + 1 points."""
        raster = Raster.filled(40, 30, (0, 0, 0, 255))
        config = HatchConfig(angle=37.0, min_velocity=0.25, max_velocity=4.0)
        generator = HatchPathGenerator(config)
        diagonal = math.hypot(40, 30)
        bound = 2 * diagonal / config.min_velocity + 1

        for offset in (-20.0, -5.0, 0.0, 5.0, 20.0):
            points = generator.generate_line_points(raster, offset=offset)
            assert len(points) <= bound


class TestGenerate:
    """Tests for whole-raster generation."""

    def test_line_count(self) -> None:
        """Scan lines cover the diagonal at the given spacing."""
        raster = Raster.filled(30, 40)
        generator = HatchPathGenerator(HatchConfig(line_spacing=7.0))
        assert generator.line_count(raster) == math.ceil(50.0 / 7.0)

    def test_boustrophedon_endpoints_adjacent(self) -> None:
        """Consecutive separate lines end and start next to each other."""
        raster = Raster.filled(100, 50)
        config = HatchConfig(line_spacing=5.0, angle=0.0, link_ends=False)
        paths = generate_hatch_paths(raster, config)

        assert len(paths) >= 2
        for current, following in zip(paths, paths[1:]):
            gap = math.hypot(
                following[0].x - current[-1].x, following[0].y - current[-1].y
            )
            assert gap <= config.line_spacing * math.sqrt(2) + 1e-9

    def test_directions_alternate(self) -> None:
        """Horizontal lines alternate left-to-right and right-to-left."""
        raster = Raster.filled(60, 40)
        paths = generate_hatch_paths(
            raster, HatchConfig(line_spacing=6.0, angle=0.0, link_ends=False)
        )
        directions = [path[-1].x > path[0].x for path in paths]
        for a, b in zip(directions, directions[1:]):
            assert a != b

    def test_short_lines_dropped(self) -> None:
        """Every returned line has at least two points."""
        raster = Raster.filled(12, 9, (40, 40, 40, 255))
        paths = generate_hatch_paths(
            raster, HatchConfig(line_spacing=1.5, angle=33.0, link_ends=False)
        )
        assert paths
        assert all(len(path) >= 2 for path in paths)

    def test_link_ends_concatenates_in_order(self) -> None:
        """link_ends joins the separate lines end to end."""
        pixels = np.full((25, 35, 4), 255, dtype=np.uint8)
        pixels[5:20, 10:25, :3] = 30
        raster = Raster.from_array(pixels)

        separate = generate_hatch_paths(raster, HatchConfig(angle=60.0, link_ends=False))
        linked = generate_hatch_paths(raster, HatchConfig(angle=60.0, link_ends=True))

        assert len(linked) == 1
        assert linked[0] == [point for path in separate for point in path]

    def test_white_lines_are_straight(self) -> None:
        """With nothing dark, each line keeps a constant perpendicular offset."""
        raster = Raster.filled(50, 40)
        paths = generate_hatch_paths(
            raster, HatchConfig(angle=30.0, max_amplitude=12.0, link_ends=False)
        )
        for path in paths:
            offsets = [_perpendicular_offset(p, 30.0) for p in path]
            assert max(offsets) - min(offsets) == pytest.approx(0.0, abs=1e-9)

    def test_deterministic(self) -> None:
        """Identical input yields identical points."""
        rng = np.random.default_rng(7)
        pixels = rng.integers(0, 256, size=(20, 30, 4), dtype=np.uint8)
        raster = Raster.from_array(pixels)
        config = HatchConfig(angle=15.0, line_spacing=3.0)

        first = generate_hatch_paths(raster, config)
        second = generate_hatch_paths(raster, config)
        assert [[p.to_tuple() for p in path] for path in first] == [
            [p.to_tuple() for p in path] for path in second
        ]
