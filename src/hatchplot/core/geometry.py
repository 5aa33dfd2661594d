"""Geometric operations for hatch and curve calculations.

This module provides core mathematical utilities for:
- Scan direction and perpendicular vectors
- Polyline length
- Cubic Bezier evaluation
- Fixed-step Bezier flattening

All functions are pure and stateless.
"""

import math

from hatchplot.core._validation import require_at_least
from hatchplot.domain import Point


def scan_vectors(angle_degrees: float) -> tuple[tuple[float, float], tuple[float, float]]:
    """Calculate the unit scan direction and its perpendicular.

    The perpendicular is rotated 90 degrees counter-clockwise from the
    direction vector: (x, y) -> (-y, x).

    Args:
        angle_degrees: Scan angle in degrees

    Returns:
        Tuple ((dx, dy), (px, py))

    Examples:
        >>> direction, perp = scan_vectors(0.0)
        >>> direction
        (1.0, 0.0)
        >>> perp
        (-0.0, 1.0)
    """
    angle = math.radians(angle_degrees)
    cos = math.cos(angle)
    sin = math.sin(angle)
    return (cos, sin), (-sin, cos)


def path_length(points: list[Point]) -> float:
    """Calculate the total length of a polyline.

    Args:
        points: Points in draw order

    Returns:
        Sum of Euclidean distances between consecutive points; 0.0 for
        fewer than two points
    """
    length = 0.0
    for i in range(1, len(points)):
        length += math.hypot(points[i].x - points[i - 1].x, points[i].y - points[i - 1].y)
    return length


def cubic_bezier_point(p0: Point, p1: Point, p2: Point, p3: Point, t: float) -> Point:
    """Evaluate a cubic Bezier curve at parameter t.

    Uses the Bernstein form
    B(t) = (1-t)^3 P0 + 3(1-t)^2 t P1 + 3(1-t) t^2 P2 + t^3 P3.

    Args:
        p0: Start point
        p1: First control point
        p2: Second control point
        p3: End point
        t: Curve parameter in [0, 1]

    Returns:
        Point on the curve
    """
    mt = 1 - t
    a = mt * mt * mt
    b = 3 * mt * mt * t
    c = 3 * mt * t * t
    d = t * t * t

    x = a * p0.x + b * p1.x + c * p2.x + d * p3.x
    y = a * p0.y + b * p1.y + c * p2.y + d * p3.y
    return Point(x, y)


def flatten_cubic(
    p0: Point, p1: Point, p2: Point, p3: Point, segments: int = 10
) -> list[Point]:
    """Approximate a cubic Bezier curve with a fixed number of lines.

    The start point is not included; the last point is exactly p3.

    Args:
        p0: Start point
        p1: First control point
        p2: Second control point
        p3: End point
        segments: Number of line segments

    Returns:
        Points at t = i / segments for i = 1..segments

    Raises:
        InvalidParameterError: If segments is less than 1
    """
    require_at_least("segments", segments, 1)
    count = int(segments)
    return [cubic_bezier_point(p0, p1, p2, p3, i / count) for i in range(1, count + 1)]
