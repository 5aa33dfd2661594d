"""Core geometric types for plotter paths.

This module defines the geometric values flowing between pipeline stages:
- Point: A 2D point with an optional brightness sample
- Polyline: An ordered list of points in draw order
- BezierSegment: One cubic Bezier segment
- StraightPath / CurvedPath: The two shapes a fitted path can take
"""

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True, slots=True)
class Point:
    """A point in canvas space.

    Attributes:
        x: X coordinate in canvas pixels
        y: Y coordinate in canvas pixels (downwards)
        brightness: Raw brightness sampled at the base position, kept for
            diagnostics only and ignored by equality
    """

    x: float
    y: float
    brightness: float | None = field(default=None, compare=False)

    def to_tuple(self) -> tuple[float, float]:
        """Convert to simple (x, y) tuple.

        Returns:
            Tuple of (x, y) coordinates
        """
        return (self.x, self.y)

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary.

        Returns:
            Dictionary with x, y, and brightness fields
        """
        return {"x": self.x, "y": self.y, "brightness": self.brightness}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Point":
        """Deserialize from dictionary.

        Args:
            data: Dictionary with x, y, and optional brightness fields

        Returns:
            Point instance
        """
        return cls(x=data["x"], y=data["y"], brightness=data.get("brightness"))


Polyline = list[Point]


@dataclass(frozen=True, slots=True)
class BezierSegment:
    """A cubic Bezier segment from start to end.

    Attributes:
        start: On-curve start point
        cp1: First control point
        cp2: Second control point
        end: On-curve end point
    """

    start: Point
    cp1: Point
    cp2: Point
    end: Point

    def control_points(self) -> tuple[Point, Point, Point, Point]:
        """Return (start, cp1, cp2, end)."""
        return (self.start, self.cp1, self.cp2, self.end)


@dataclass(frozen=True)
class StraightPath:
    """A fitted path drawn as straight segments through its points.

    Produced for polylines too short to fit curves. An empty StraightPath
    stands for a polyline with fewer than two points.
    """

    points: tuple[Point, ...]

    def is_empty(self) -> bool:
        """Check whether there is nothing to draw."""
        return len(self.points) < 2

    @property
    def start(self) -> Point:
        return self.points[0]

    @property
    def end(self) -> Point:
        return self.points[-1]


@dataclass(frozen=True)
class CurvedPath:
    """A fitted path made of consecutive cubic Bezier segments."""

    segments: tuple[BezierSegment, ...]

    def is_empty(self) -> bool:
        """Check whether there is nothing to draw."""
        return not self.segments

    @property
    def start(self) -> Point:
        return self.segments[0].start

    @property
    def end(self) -> Point:
        return self.segments[-1].end


FittedPath = StraightPath | CurvedPath
