"""Unit tests for image loading and artifact writing."""

import tempfile
from pathlib import Path
from unittest.mock import patch

import pytest
from PIL import Image

from hatchplot.exceptions import ImageLoadError, InvalidParameterError, OutputWriteError
from hatchplot.io.image_loader import fit_to_canvas, image_to_raster, load_raster
from hatchplot.io.writer import ArtifactWriter


class TestFitToCanvas:
    """Tests for fit_to_canvas."""

    @pytest.mark.parametrize(
        ("image", "canvas", "expected"),
        [
            ((400, 400), (800, 600), (100, 0, 600, 600)),
            ((800, 200), (800, 600), (0, 200, 800, 200)),
            ((100, 50), (800, 600), (0, 100, 800, 400)),
            ((800, 600), (800, 600), (0, 0, 800, 600)),
        ],
    )
    def test_placement(self, image, canvas, expected) -> None:
        assert fit_to_canvas(*image, *canvas) == expected

    def test_never_collapses(self) -> None:
        """Extreme aspect ratios keep at least one pixel."""
        _, _, width, height = fit_to_canvas(10000, 1, 100, 100)
        assert width == 100
        assert height == 1


class TestImageToRaster:
    """Tests for image_to_raster."""

    def test_letterbox_is_white(self) -> None:
        """A square black image on a wide canvas leaves white margins."""
        image = Image.new("RGB", (10, 10), (0, 0, 0))
        raster = image_to_raster(image, 40, 20)

        assert (raster.width, raster.height) == (40, 20)
        assert raster.luminance[10, 0] == pytest.approx(255.0)
        assert raster.luminance[10, 39] == pytest.approx(255.0)
        assert raster.luminance[10, 20] == pytest.approx(0.0, abs=1.0)

    def test_transparent_pixels_are_white(self) -> None:
        image = Image.new("RGBA", (8, 6), (0, 0, 0, 0))
        raster = image_to_raster(image, 8, 6)
        assert raster.luminance.min() == pytest.approx(255.0)

    def test_grayscale_mode(self) -> None:
        image = Image.new("L", (5, 5), 100)
        raster = image_to_raster(image, 5, 5)
        assert raster.luminance[2, 2] == pytest.approx(100.0)

    def test_rejects_empty_canvas(self) -> None:
        with pytest.raises(InvalidParameterError):
            image_to_raster(Image.new("RGB", (2, 2)), 0, 10)


class TestLoadRaster:
    """Tests for load_raster."""

    def test_missing_file(self) -> None:
        with pytest.raises(ImageLoadError, match="file not found"):
            load_raster(Path("/nonexistent/photo.png"))

    def test_not_an_image(self) -> None:
        with tempfile.TemporaryDirectory() as tmpdir:
            path = Path(tmpdir) / "notes.png"
            path.write_text("not an image", encoding="utf-8")
            with pytest.raises(ImageLoadError):
                load_raster(path)

    def test_png_round_trip(self) -> None:
        with tempfile.TemporaryDirectory() as tmpdir:
            path = Path(tmpdir) / "gray.png"
            Image.new("RGB", (30, 20), (50, 50, 50)).save(path)

            raster = load_raster(path, canvas_width=60, canvas_height=40)

        assert (raster.width, raster.height) == (60, 40)
        assert raster.luminance[20, 30] == pytest.approx(50.0, abs=1.0)


class TestArtifactWriter:
    """Tests for ArtifactWriter class."""

    def test_default_paths(self) -> None:
        writer = ArtifactWriter(Path("out"))
        assert writer.svg_path == Path("out/plotter-path.svg")
        assert writer.gcode_path == Path("out/plotter-path.gcode")

    def test_get_output_paths(self) -> None:
        svg_path, gcode_path = ArtifactWriter.get_output_paths(Path("/path/to/cat.jpg"))
        assert svg_path == Path("/path/to/cat.svg")
        assert gcode_path == Path("/path/to/cat.gcode")

    def test_write_creates_directories(self) -> None:
        with tempfile.TemporaryDirectory() as tmpdir:
            writer = ArtifactWriter(Path(tmpdir) / "nested" / "dir", stem="drawing")
            svg_path = writer.write_svg("<svg/>")
            gcode_path = writer.write_gcode("M2")

            assert svg_path.read_text(encoding="utf-8") == "<svg/>"
            assert gcode_path.read_text(encoding="utf-8") == "M2"
            assert gcode_path.name == "drawing.gcode"

    @patch("pathlib.Path.write_text", side_effect=PermissionError("denied"))
    def test_write_error(self, _mock_write) -> None:  # noqa: ARG002
        with tempfile.TemporaryDirectory() as tmpdir:
            with pytest.raises(OutputWriteError, match="denied"):
                ArtifactWriter.write_to(Path(tmpdir) / "out.svg", "<svg/>")
