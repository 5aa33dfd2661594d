"""Normalized path commands.

The SVG parser resolves path data into these absolute commands, and the
G-code emitter consumes them. Each curve carries its own start point so the
emitter never has to track position.
"""

from dataclasses import dataclass

from hatchplot.domain.path import Point


@dataclass(frozen=True, slots=True)
class MoveCommand:
    """Absolute move with the pen lifted."""

    x: float
    y: float

    @property
    def end(self) -> Point:
        return Point(self.x, self.y)


@dataclass(frozen=True, slots=True)
class LineCommand:
    """Absolute straight line with the pen down."""

    x: float
    y: float

    @property
    def end(self) -> Point:
        return Point(self.x, self.y)


@dataclass(frozen=True, slots=True)
class CurveCommand:
    """Cubic Bezier curve from the current position.

    Attributes:
        start: Current position when the curve command was read
        cp1: First control point
        cp2: Second control point
        end: End point, which becomes the new current position
    """

    start: Point
    cp1: Point
    cp2: Point
    end: Point


PathCommand = MoveCommand | LineCommand | CurveCommand
