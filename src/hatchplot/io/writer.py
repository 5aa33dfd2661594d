"""Artifact writer for generated documents.

This module provides the ArtifactWriter class for saving the SVG and G-code
documents produced by a pipeline run.
"""

from pathlib import Path

from hatchplot.exceptions import OutputWriteError

DEFAULT_STEM = "plotter-path"
SVG_SUFFIX = ".svg"
GCODE_SUFFIX = ".gcode"


class ArtifactWriter:
    """Writes generated documents to disk.

    Example:
        writer = ArtifactWriter(Path("out"))
        writer.write_svg(result.svg)
        writer.write_gcode(result.gcode)
    """

    def __init__(self, output_dir: Path, stem: str = DEFAULT_STEM) -> None:
        """Initialize the writer.

        Args:
            output_dir: Directory receiving the documents
            stem: File name without suffix
        """
        self._output_dir = output_dir
        self._stem = stem

    @property
    def svg_path(self) -> Path:
        """Destination of the SVG document."""
        return self._output_dir / f"{self._stem}{SVG_SUFFIX}"

    @property
    def gcode_path(self) -> Path:
        """Destination of the G-code program."""
        return self._output_dir / f"{self._stem}{GCODE_SUFFIX}"

    def write_svg(self, svg_text: str) -> Path:
        """Write the SVG document and return its path."""
        return self.write_to(self.svg_path, svg_text)

    def write_gcode(self, gcode_text: str) -> Path:
        """Write the G-code program and return its path."""
        return self.write_to(self.gcode_path, gcode_text)

    @staticmethod
    def write_to(path: Path, text: str) -> Path:
        """Write a document to an explicit path, creating parent directories.

        Args:
            path: Destination file
            text: Document text

        Returns:
            The destination path

        Raises:
            OutputWriteError: If the file cannot be written
        """
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(text, encoding="utf-8")
        except OSError as e:
            raise OutputWriteError(str(path), str(e)) from e
        return path

    @staticmethod
    def get_output_paths(input_path: Path) -> tuple[Path, Path]:
        """Generate SVG and G-code paths next to an input file.

        Converts: photo.png -> photo.svg, photo.gcode
                  /path/to/cat.jpg -> /path/to/cat.svg, /path/to/cat.gcode

        Args:
            input_path: Source image or SVG path

        Returns:
            Tuple of (svg_path, gcode_path)
        """
        parent = input_path.parent
        stem = input_path.stem
        return parent / f"{stem}{SVG_SUFFIX}", parent / f"{stem}{GCODE_SUFFIX}"
