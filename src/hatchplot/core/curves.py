"""Catmull-Rom to cubic Bezier curve fitting.

Each hatch polyline is smoothed into a chain of cubic Bezier segments that
pass through every sample. Endpoints are clamped: where a neighbor is
missing, the boundary point itself stands in for it.

Tension controls how far the control points reach along the tangent:
- tension = 0: cardinal spline (loose)
- tension = 0.5: Catmull-Rom spline (balanced)
- tension = 1: straight segments (control points on the endpoints)
"""

from collections.abc import Sequence

from hatchplot.core._validation import require_finite
from hatchplot.domain import BezierSegment, CurvedPath, FittedPath, Point, StraightPath
from hatchplot.exceptions import InvalidParameterError

MIN_CURVE_POINTS = 4


def catmull_rom_to_bezier(points: Sequence[Point], tension: float = 0.5) -> FittedPath:
    """Convert a polyline to cubic Bezier segments.

    Args:
        points: Polyline points in draw order
        tension: Curve tension in [0, 1]

    Returns:
        - Empty StraightPath for fewer than 2 points
        - StraightPath with the points unchanged for 2 or 3 points
        - CurvedPath with len(points) - 1 segments otherwise

    Raises:
        InvalidParameterError: If tension is outside [0, 1] or not finite

    Examples:
        >>> pts = [Point(0, 0), Point(1, 0), Point(2, 0), Point(3, 0)]
        >>> path = catmull_rom_to_bezier(pts, tension=0.5)
        >>> len(path.segments)
        3
    """
    tension = require_finite("tension", tension)
    if not 0.0 <= tension <= 1.0:
        raise InvalidParameterError("tension", tension, "must be between 0 and 1")

    n = len(points)
    if n < 2:
        return StraightPath(points=())
    if n < MIN_CURVE_POINTS:
        return StraightPath(points=tuple(points))

    s = (1 - tension) / 2
    segments: list[BezierSegment] = []

    for i in range(n - 1):
        p0 = points[i - 1] if i > 0 else points[i]
        p1 = points[i]
        p2 = points[i + 1]
        p3 = points[i + 2] if i < n - 2 else points[i + 1]

        cp1 = Point(p1.x + s * (p2.x - p0.x), p1.y + s * (p2.y - p0.y))
        cp2 = Point(p2.x - s * (p3.x - p1.x), p2.y - s * (p3.y - p1.y))

        segments.append(BezierSegment(start=p1, cp1=cp1, cp2=cp2, end=p2))

    return CurvedPath(segments=tuple(segments))


class CurveFitter:
    """Fits polylines with a fixed tension.

    Example:
        fitter = CurveFitter(tension=0.5)
        fitted = fitter.fit_all(polylines)
    """

    def __init__(self, tension: float = 0.5) -> None:
        """Initialize the fitter.

        Args:
            tension: Curve tension in [0, 1]

        Raises:
            InvalidParameterError: If tension is outside [0, 1] or not finite
        """
        tension = require_finite("tension", tension)
        if not 0.0 <= tension <= 1.0:
            raise InvalidParameterError("tension", tension, "must be between 0 and 1")
        self.tension = tension

    def fit(self, points: Sequence[Point]) -> FittedPath:
        """Fit a single polyline."""
        return catmull_rom_to_bezier(points, self.tension)

    def fit_all(self, polylines: Sequence[Sequence[Point]]) -> list[FittedPath]:
        """Fit every polyline, dropping those with nothing to draw."""
        fitted = (self.fit(points) for points in polylines)
        return [path for path in fitted if not path.is_empty()]
