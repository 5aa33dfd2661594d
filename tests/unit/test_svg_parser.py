"""Unit tests for the SVG path parser."""

import pytest

from hatchplot.domain import CurveCommand, LineCommand, MoveCommand, Point
from hatchplot.exceptions import SvgParseError
from hatchplot.io.svg_parser import (
    iter_path_data,
    leading_number,
    parse_path_data,
    parse_svg_document,
    parse_svg_paths,
    split_arguments,
    tokenize_path_data,
)


class TestTokenizer:
    """Tests for tokenize_path_data and split_arguments."""

    def test_tokens(self) -> None:
        """Each command letter is paired with its argument run."""
        tokens = list(tokenize_path_data("M 1 2 L3,4Z"))
        assert tokens == [("M", " 1 2 "), ("L", "3,4"), ("Z", "")]

    def test_lowercase_letters_are_upper_cased(self) -> None:
        assert [letter for letter, _ in tokenize_path_data("m 0 0 l 1 1 c 1 1 1 1 1 1")] == [
            "M",
            "L",
            "C",
        ]

    def test_unknown_letters_skipped(self) -> None:
        """Letters outside M, L, C, Z are not commands."""
        assert [letter for letter, _ in tokenize_path_data("M 0 0 Q 1 1 2 2 L 3 3")] == [
            "M",
            "L",
        ]

    def test_split_arguments(self) -> None:
        assert split_arguments(" 1.5, -2 3\t4 ") == [1.5, -2.0, 3.0, 4.0]

    def test_split_arguments_reads_leading_number(self) -> None:
        """Each chunk contributes the number it starts with."""
        assert split_arguments("1.2.3 4") == [1.2, 4.0]
        assert split_arguments("1..5,2") == [1.0, 2.0]
        assert split_arguments("3-4 5.") == [3.0, 5.0]

    def test_split_arguments_invalid_chunk(self) -> None:
        """A chunk with no leading number invalidates the run."""
        assert split_arguments("- 4") is None
        assert split_arguments("1 .") is None
        assert split_arguments("--1 2") is None


class TestLeadingNumber:
    """Tests for leading_number."""

    @pytest.mark.parametrize(
        ("chunk", "expected"),
        [
            ("10", 10.0),
            ("10.5.1", 10.5),
            ("1..5", 1.0),
            ("-.5", -0.5),
            ("7.", 7.0),
            ("-3-2", -3.0),
            ("0.25-", 0.25),
        ],
    )
    def test_prefix(self, chunk: str, expected: float) -> None:
        assert leading_number(chunk) == expected

    @pytest.mark.parametrize("chunk", ["", "-", ".", "-.", "..5", "--1"])
    def test_no_number(self, chunk: str) -> None:
        assert leading_number(chunk) is None


class TestParsePathData:
    """Tests for parse_path_data."""

    def test_move_and_lines(self) -> None:
        """Writer output parses back to the same absolute commands."""
        commands = parse_path_data("M 0.00 0.00 L 10.00 0.00 L 10.00 10.00")
        assert commands == [
            MoveCommand(0.0, 0.0),
            LineCommand(10.0, 0.0),
            LineCommand(10.0, 10.0),
        ]

    def test_curve_tracks_start(self) -> None:
        """Each curve starts where the previous command ended."""
        commands = parse_path_data(
            "M 1.00 2.00 C 3.00 4.00, 5.00 6.00, 7.00 8.00 C 9 9, 9 9, 10 10"
        )
        assert commands == [
            MoveCommand(1.0, 2.0),
            CurveCommand(Point(1, 2), Point(3, 4), Point(5, 6), Point(7, 8)),
            CurveCommand(Point(7, 8), Point(9, 9), Point(9, 9), Point(10, 10)),
        ]

    def test_curve_without_move_starts_at_origin(self) -> None:
        commands = parse_path_data("C 1 1 2 2 3 3")
        assert commands == [CurveCommand(Point(0, 0), Point(1, 1), Point(2, 2), Point(3, 3))]

    def test_lowercase_treated_as_absolute(self) -> None:
        assert parse_path_data("m 5 5 l 6 6") == [MoveCommand(5, 5), LineCommand(6, 6)]

    def test_close_path_skipped(self) -> None:
        assert parse_path_data("M 0 0 L 1 0 Z") == [MoveCommand(0, 0), LineCommand(1, 0)]

    def test_short_commands_skipped(self) -> None:
        """Commands with too few arguments emit nothing."""
        assert parse_path_data("M 1 L 2 2 C 1 2 3 4 5") == [LineCommand(2, 2)]

    def test_malformed_number_uses_prefix(self) -> None:
        """Malformed numbers keep their leading valid part."""
        assert parse_path_data("M 0 0 L 1..5 2") == [MoveCommand(0, 0), LineCommand(1, 2)]
        assert parse_path_data("M 10.5.1 3") == [MoveCommand(10.5, 3)]

    def test_chunk_without_number_skipped(self) -> None:
        """A chunk with no leading number drops only its own command."""
        assert parse_path_data("M 0 0 L . 2 L 3 3") == [MoveCommand(0, 0), LineCommand(3, 3)]

    def test_skipped_command_keeps_position(self) -> None:
        """A skipped line does not move the current position."""
        commands = parse_path_data("M 4 4 L 1 C 0 0 0 0 1 1")
        assert commands[-1].start == Point(4, 4)

    def test_extra_arguments_ignored(self) -> None:
        assert parse_path_data("M 1 2 3 4") == [MoveCommand(1, 2)]

    @pytest.mark.parametrize("data", ["", "   ", "hello", "Z", "1 2 3"])
    def test_nothing_to_parse(self, data: str) -> None:
        assert parse_path_data(data) == []


class TestParseSvgDocument:
    """Tests for document-level parsing."""

    def test_namespaced_document(self) -> None:
        """Paths are found inside groups of a namespaced document."""
        svg = (
            '<svg xmlns="http://www.w3.org/2000/svg" width="10" height="10">'
            '<g><path d="M 0 0 L 1 1"/><path d="M 2 2 L 3 3"/></g></svg>'
        )
        groups = parse_svg_document(svg)
        assert groups == [
            [MoveCommand(0, 0), LineCommand(1, 1)],
            [MoveCommand(2, 2), LineCommand(3, 3)],
        ]

    def test_plain_document(self) -> None:
        svg = '<svg><path d="M 1 1 L 2 2"/></svg>'
        assert parse_svg_document(svg) == [[MoveCommand(1, 1), LineCommand(2, 2)]]

    def test_empty_path_data_skipped(self) -> None:
        """Path elements without data produce no group."""
        svg = '<svg><path/><path d=""/><path d="M 0 0 L 5 5"/></svg>'
        assert len(parse_svg_document(svg)) == 1
        assert list(iter_path_data(svg)) == ["", "", "M 0 0 L 5 5"]

    def test_non_path_elements_ignored(self) -> None:
        svg = '<svg><rect width="5" height="5"/><pathology d="M 1 1"/></svg>'
        assert parse_svg_document(svg) == []

    def test_malformed_document(self) -> None:
        """Invalid XML raises SvgParseError."""
        with pytest.raises(SvgParseError):
            parse_svg_document("<svg><path d='M 0 0'></svg")

    def test_element_numbers_count_every_path(self) -> None:
        """Element numbers include paths that carry no data."""
        svg = '<svg><path/><path d="M 0 0 L 10 0"/><path d=""/><path d="M 1 1"/></svg>'
        assert parse_svg_paths(svg) == [
            (2, [MoveCommand(0, 0), LineCommand(10, 0)]),
            (4, [MoveCommand(1, 1)]),
        ]
