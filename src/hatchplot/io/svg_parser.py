"""SVG path parser.

This module reads the path grammar produced by the SVG writer back into
absolute commands. It is deliberately permissive: anything it does not
understand is skipped, so no path data can make parsing fail.

Grammar:
- A command letter M, L, C or Z (either case)
- Followed by a run of argument characters: digits, '.', '-', ',' and
  whitespace
- The run is split on commas and whitespace into numbers

Key functions:
- parse_path_data: Parse one "d" attribute
- parse_svg_document: Parse every <path> element of a document
- parse_svg_paths: Same, paired with each element's 1-based number
"""

import xml.etree.ElementTree as ET
from collections.abc import Iterator

from hatchplot.domain import CurveCommand, LineCommand, MoveCommand, PathCommand, Point
from hatchplot.exceptions import SvgParseError

COMMAND_LETTERS = frozenset("MLCZ")
ARGUMENT_CHARS = frozenset("-0123456789., \t\n\r\f\v")
SEPARATOR_CHARS = frozenset(", \t\n\r\f\v")

# Minimum number of arguments per command
ARGUMENT_COUNTS = {"M": 2, "L": 2, "C": 6, "Z": 0}


def tokenize_path_data(data: str) -> Iterator[tuple[str, str]]:
    """Split path data into (command, argument run) pairs.

    Characters that are neither a known command letter nor part of an
    argument run are skipped.

    Args:
        data: Path data string

    Yields:
        Tuples of (upper-case command letter, raw argument text)
    """
    i = 0
    n = len(data)

    while i < n:
        char = data[i].upper()
        i += 1
        if char not in COMMAND_LETTERS:
            continue

        start = i
        while i < n and data[i] in ARGUMENT_CHARS:
            i += 1

        yield char, data[start:i]


def leading_number(chunk: str) -> float | None:
    """Read the longest number at the start of an argument chunk.

    A number is an optional '-', digits, and at most one '.', with at least
    one digit. Trailing characters are ignored, so "1..5" reads as 1 and
    "10.5.1" as 10.5.

    Args:
        chunk: One comma/whitespace-separated piece of an argument run

    Returns:
        The leading number, or None if the chunk does not start with one

    Examples:
        >>> leading_number("10.5.1")
        10.5
        >>> leading_number("-.5")
        -0.5
        >>> leading_number("..") is None
        True
    """
    i = 0
    n = len(chunk)
    if i < n and chunk[i] == "-":
        i += 1

    digits = 0
    while i < n and chunk[i].isdigit():
        i += 1
        digits += 1
    if i < n and chunk[i] == ".":
        i += 1
        while i < n and chunk[i].isdigit():
            i += 1
            digits += 1

    if digits == 0:
        return None
    return float(chunk[:i])


def split_arguments(text: str) -> list[float] | None:
    """Convert an argument run into numbers.

    Each chunk contributes its leading number.

    Args:
        text: Raw argument text following a command letter

    Returns:
        List of numbers, or None if any chunk has no leading number
    """
    numbers: list[float] = []
    chunk: list[str] = []

    for char in text + " ":
        if char in SEPARATOR_CHARS:
            if chunk:
                value = leading_number("".join(chunk))
                if value is None:
                    return None
                numbers.append(value)
                chunk = []
        else:
            chunk.append(char)

    return numbers


def parse_path_data(data: str) -> list[PathCommand]:
    """Parse path data into absolute commands.

    The current position starts at (0, 0). M and L set it; C records it as
    the curve start and then moves it to the curve end. Z, unknown letters,
    commands with too few arguments, and argument runs with a chunk that does
    not start with a number are skipped. Extra arguments are ignored.

    Args:
        data: Path data string (an SVG "d" attribute)

    Returns:
        Commands in document order

    Examples:
        >>> parse_path_data("M 0.00 0.00 L 10.00 0.00")
        [MoveCommand(x=0.0, y=0.0), LineCommand(x=10.0, y=0.0)]
    """
    commands: list[PathCommand] = []
    current_x = 0.0
    current_y = 0.0

    for letter, raw_args in tokenize_path_data(data):
        args = split_arguments(raw_args)
        if args is None or len(args) < ARGUMENT_COUNTS[letter]:
            continue

        if letter == "M":
            current_x, current_y = args[0], args[1]
            commands.append(MoveCommand(current_x, current_y))
        elif letter == "L":
            current_x, current_y = args[0], args[1]
            commands.append(LineCommand(current_x, current_y))
        elif letter == "C":
            commands.append(
                CurveCommand(
                    start=Point(current_x, current_y),
                    cp1=Point(args[0], args[1]),
                    cp2=Point(args[2], args[3]),
                    end=Point(args[4], args[5]),
                )
            )
            current_x, current_y = args[4], args[5]

    return commands


def iter_path_data(svg_text: str) -> Iterator[str]:
    """Yield the "d" attribute of every <path> element in document order.

    Elements are matched by local name, so namespaced and plain documents
    both work. Paths without a "d" attribute yield an empty string.

    Args:
        svg_text: SVG document text

    Raises:
        SvgParseError: If the document is not well-formed XML
    """
    try:
        root = ET.fromstring(svg_text)
    except ET.ParseError as e:
        raise SvgParseError(str(e)) from e

    for element in root.iter():
        tag = element.tag
        if not isinstance(tag, str):
            continue
        if tag.rsplit("}", 1)[-1] == "path":
            yield element.get("d", "")


def parse_svg_document(svg_text: str) -> list[list[PathCommand]]:
    """Parse every non-empty <path> element of an SVG document.

    Args:
        svg_text: SVG document text

    Returns:
        One command list per path element with non-empty path data, in
        document order

    Raises:
        SvgParseError: If the document is not well-formed XML
    """
    return [commands for _, commands in parse_svg_paths(svg_text)]


def parse_svg_paths(svg_text: str) -> list[tuple[int, list[PathCommand]]]:
    """Parse every non-empty <path> element, keeping its element number.

    Element numbers count every <path> in document order starting at 1,
    including those without path data, so a G-code label can name the
    element it came from.

    Args:
        svg_text: SVG document text

    Returns:
        List of (element_number, commands) for elements with non-empty
        path data

    Raises:
        SvgParseError: If the document is not well-formed XML

    Examples:
        >>> parse_svg_paths('<svg><path/><path d="M 1 2"/></svg>')
        [(2, [MoveCommand(x=1.0, y=2.0)])]
    """
    return [
        (number, parse_path_data(data))
        for number, data in enumerate(iter_path_data(svg_text), start=1)
        if data
    ]
