"""G-code emitter for parsed path commands.

Walks command groups (one per SVG path element) and produces a plain
G-code program for a pen plotter:

- Z height lifts and lowers the pen
- G0 travels with the pen up, G1 draws at a fixed feed rate
- Cubic curves are flattened into a fixed number of G1 moves

Coordinates are divided by a unit divisor (SVG pixels to millimeters by
default) and written with three decimals.
"""

from collections.abc import Sequence

from hatchplot.config import GcodeConfig
from hatchplot.core._validation import require_at_least, require_finite, require_positive
from hatchplot.core.geometry import flatten_cubic
from hatchplot.domain import CurveCommand, LineCommand, MoveCommand, PathCommand
from hatchplot.io.svg_parser import parse_svg_paths

PROGRAM_TITLE = "; Generated by hatchplot"
ALGORITHM_NAME = "; Hatch Sawtooth Algorithm"


def format_value(value: float) -> str:
    """Format a Z height or feed rate in its shortest form (5, 2.5)."""
    if float(value).is_integer():
        return str(int(value))
    return repr(float(value))


class GcodeEmitter:
    """Emits G-code programs from parsed path commands.

    Example:
        emitter = GcodeEmitter(GcodeConfig(feed_rate=1500))
        program = emitter.emit_document(svg_text)
    """

    def __init__(self, config: GcodeConfig | None = None) -> None:
        """Initialize the emitter.

        Args:
            config: G-code settings (defaults if None)

        Raises:
            InvalidParameterError: If any setting is out of range or not finite
        """
        config = config or GcodeConfig()
        require_positive("unit_divisor", config.unit_divisor)
        require_positive("feed_rate", config.feed_rate)
        require_at_least("bezier_segments", config.bezier_segments, 1)
        require_finite("pen_up_z", config.pen_up_z)
        require_finite("pen_down_z", config.pen_down_z)
        self.config = config

    def _xy(self, x: float, y: float) -> str:
        divisor = self.config.unit_divisor
        return f"X{x / divisor:.3f} Y{y / divisor:.3f}"

    def _pen_up(self) -> str:
        return f"G0 Z{format_value(self.config.pen_up_z)}"

    def _pen_down(self) -> str:
        return f"G0 Z{format_value(self.config.pen_down_z)}"

    def _draw(self, x: float, y: float) -> str:
        return f"G1 {self._xy(x, y)} F{format_value(self.config.feed_rate)}"

    def header(self) -> list[str]:
        """Program preamble: units, positioning, pen up, go home."""
        return [
            PROGRAM_TITLE,
            ALGORITHM_NAME,
            "G21 ; Set units to millimeters",
            "G90 ; Use absolute positioning",
            f"{self._pen_up()} ; Lift pen",
            "G0 X0 Y0 ; Move to origin",
            "",
        ]

    def footer(self, path_count: int) -> list[str]:
        """Program epilogue: pen up, return home, end."""
        return [
            f"{self._pen_up()} ; Pen up",
            "G0 X0 Y0 ; Return to origin",
            "M2 ; End program",
            f"; Total paths: {path_count}",
        ]

    def command_lines(self, command: PathCommand) -> list[str]:
        """Translate one path command into G-code lines.

        Args:
            command: Parsed path command

        Returns:
            G-code lines for the command
        """
        if isinstance(command, MoveCommand):
            return [
                f"{self._pen_up()} ; Pen up",
                f"G0 {self._xy(command.x, command.y)}",
                f"{self._pen_down()} ; Pen down",
            ]

        if isinstance(command, LineCommand):
            return [self._draw(command.x, command.y)]

        if isinstance(command, CurveCommand):
            points = flatten_cubic(
                command.start,
                command.cp1,
                command.cp2,
                command.end,
                self.config.bezier_segments,
            )
            return [self._draw(point.x, point.y) for point in points]

        raise TypeError(f"Unsupported path command: {type(command).__name__}")

    def emit_lines(
        self,
        groups: Sequence[Sequence[PathCommand]],
        numbers: Sequence[int] | None = None,
    ) -> list[str]:
        """Emit a complete program as a list of lines.

        Each group is labelled "; Path k". By default k counts the groups
        from 1; pass numbers to label groups by their source element
        instead (see parse_svg_paths), so elements without path data leave
        gaps in the labels.

        Args:
            groups: Command lists, one per source path element
            numbers: Label for each group (defaults to 1..len(groups))

        Returns:
            Program lines (header, one block per group, footer)

        Raises:
            ValueError: If numbers and groups differ in length
        """
        if numbers is None:
            numbers = range(1, len(groups) + 1)
        elif len(numbers) != len(groups):
            raise ValueError(
                f"Got {len(numbers)} path numbers for {len(groups)} path groups"
            )

        lines = self.header()

        for number, commands in zip(numbers, groups):
            lines.append(f"; Path {number}")
            for command in commands:
                lines.extend(self.command_lines(command))
            lines.append("")

        lines.extend(self.footer(len(groups)))
        return lines

    def emit(
        self,
        groups: Sequence[Sequence[PathCommand]],
        numbers: Sequence[int] | None = None,
    ) -> str:
        """Emit a complete program as text (lines joined with newlines)."""
        return "\n".join(self.emit_lines(groups, numbers))

    def emit_document(self, svg_text: str) -> str:
        """Parse an SVG document and emit its program.

        Groups are labelled with their <path> element number.

        Raises:
            SvgParseError: If the document is not well-formed XML
        """
        numbered = parse_svg_paths(svg_text)
        return self.emit(
            [commands for _, commands in numbered],
            [number for number, _ in numbered],
        )


def emit_gcode(svg_text: str, config: GcodeConfig | None = None) -> str:
    """Convert an SVG document straight to a G-code program.

    Args:
        svg_text: SVG document text
        config: G-code settings (defaults if None)

    Returns:
        G-code program text

    Raises:
        SvgParseError: If the document is not well-formed XML
    """
    return GcodeEmitter(config).emit_document(svg_text)
