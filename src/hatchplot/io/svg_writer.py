"""SVG document writer for fitted paths.

This module renders fitted paths into a minimal SVG document: a white
background rectangle and one stroked <path> element per fitted path, all
inside a single styled group. Coordinates are written with two decimals, so
identical input always produces byte-identical output.
"""

from collections.abc import Sequence

from hatchplot.core._validation import require_positive
from hatchplot.domain import CurvedPath, FittedPath, StraightPath

SVG_NAMESPACE = "http://www.w3.org/2000/svg"


def format_coordinate(value: float) -> str:
    """Format a coordinate with fixed 2-decimal precision."""
    return f"{value:.2f}"


def format_number(value: float) -> str:
    """Format an attribute value in its shortest general form (1, 2.5)."""
    if float(value).is_integer():
        return str(int(value))
    return repr(float(value))


def build_path_data(path: FittedPath) -> str:
    """Build the "d" attribute for a fitted path.

    Straight paths become "M x0 y0 L x1 y1 ..." and curved paths become
    "M x0 y0 C c1x c1y, c2x c2y, x y ...".

    Args:
        path: Fitted path

    Returns:
        Path data string; empty for an empty path
    """
    if path.is_empty():
        return ""

    fmt = format_coordinate

    if isinstance(path, StraightPath):
        first = path.points[0]
        parts = [f"M {fmt(first.x)} {fmt(first.y)}"]
        for point in path.points[1:]:
            parts.append(f" L {fmt(point.x)} {fmt(point.y)}")
        return "".join(parts)

    start = path.segments[0].start
    parts = [f"M {fmt(start.x)} {fmt(start.y)}"]
    for segment in path.segments:
        parts.append(
            f" C {fmt(segment.cp1.x)} {fmt(segment.cp1.y)}, "
            f"{fmt(segment.cp2.x)} {fmt(segment.cp2.y)}, "
            f"{fmt(segment.end.x)} {fmt(segment.end.y)}"
        )
    return "".join(parts)


def render_svg(
    paths: Sequence[FittedPath],
    width: int,
    height: int,
    stroke_width: float = 1.0,
) -> str:
    """Render fitted paths as an SVG document.

    Args:
        paths: Fitted paths in draw order
        width: Canvas width in pixels
        height: Canvas height in pixels
        stroke_width: Pen width used for the stroke

    Returns:
        SVG document text

    Raises:
        InvalidParameterError: If a dimension or the stroke width is not positive
    """
    require_positive("width", width)
    require_positive("height", height)
    require_positive("stroke_width", stroke_width)

    parts = [
        f'<svg width="{width}" height="{height}" xmlns="{SVG_NAMESPACE}" '
        f'viewBox="0 0 {width} {height}">',
        f'<rect width="{width}" height="{height}" fill="white"/>',
        f'<g stroke="black" fill="none" stroke-width="{format_number(stroke_width)}" '
        'stroke-linecap="round" stroke-linejoin="round">',
    ]

    for path in paths:
        data = build_path_data(path)
        if not data:
            continue
        parts.append(f'<path d="{data}"/>')

    parts.append("</g></svg>")
    return "".join(parts)


class SvgWriter:
    """Renders fitted paths onto a fixed canvas.

    Example:
        writer = SvgWriter(width=800, height=600, stroke_width=1.0)
        svg_text = writer.render(fitted_paths)
    """

    def __init__(self, width: int, height: int, stroke_width: float = 1.0) -> None:
        """Initialize the writer.

        Args:
            width: Canvas width in pixels
            height: Canvas height in pixels
            stroke_width: Pen width used for the stroke
        """
        self.width = width
        self.height = height
        self.stroke_width = stroke_width

    def render(self, paths: Sequence[FittedPath]) -> str:
        """Render paths as an SVG document."""
        return render_svg(paths, self.width, self.height, self.stroke_width)

    @staticmethod
    def count_segments(paths: Sequence[FittedPath]) -> int:
        """Count drawn segments (lines or curves) across all paths."""
        total = 0
        for path in paths:
            if isinstance(path, CurvedPath):
                total += len(path.segments)
            elif not path.is_empty():
                total += len(path.points) - 1
        return total
