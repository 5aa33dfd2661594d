"""CLI application entry point for hatchplot.

This module provides the main CLI interface using Typer.
"""

from pathlib import Path
from typing import Annotated

import typer

from hatchplot import __version__
from hatchplot.cli.output import (
    SYM_OK,
    console,
    create_progress,
    print_empty,
    print_error,
    print_header,
    print_image_info,
    print_settings_info,
    print_step,
    print_success,
    print_summary,
)
from hatchplot.config import GcodeConfig, build_settings
from hatchplot.core.pipeline import PlotPipeline
from hatchplot.exceptions import (
    HatchplotError,
    ImageLoadError,
    InvalidParameterError,
    OutputWriteError,
    SvgParseError,
)
from hatchplot.io import ArtifactWriter, emit_gcode, load_raster
from hatchplot.utils import configure_logging

# Create the Typer app
app = typer.Typer(
    name="hatchplot",
    help="Convert images into sawtooth hatch drawings for pen plotters (SVG + G-code).",
    add_completion=False,
    no_args_is_help=True,
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"[bold blue]Hatchplot[/bold blue] v{__version__}")
        raise typer.Exit()


@app.callback()
def main_callback(
    _version: Annotated[  # noqa: ARG001
        bool | None,
        typer.Option(
            "--version",
            "-V",
            help="Show version and exit",
            callback=version_callback,
            is_eager=True,
        ),
    ] = None,
) -> None:
    """Hatchplot: image to pen-plotter paths."""


@app.command()
def render(
    image: Annotated[
        Path,
        typer.Argument(
            help="Path to input image (PNG, JPEG, ...)",
            show_default=False,
        ),
    ],
    output_dir: Annotated[
        Path | None,
        typer.Option(
            "--output-dir",
            "-o",
            help="Write plotter-path.svg and plotter-path.gcode into this directory",
        ),
    ] = None,
    svg_output: Annotated[
        Path | None,
        typer.Option(
            "--svg",
            help="SVG output path (default: {image}.svg)",
        ),
    ] = None,
    gcode_output: Annotated[
        Path | None,
        typer.Option(
            "--gcode",
            help="G-code output path (default: {image}.gcode)",
        ),
    ] = None,
    line_spacing: Annotated[
        float,
        typer.Option("--line-spacing", "-s", help="Distance between scan lines"),
    ] = 5.0,
    angle: Annotated[
        float,
        typer.Option("--angle", "-a", help="Scan line angle in degrees"),
    ] = 45.0,
    max_amplitude: Annotated[
        float,
        typer.Option("--max-amplitude", help="Oscillation amplitude over black"),
    ] = 10.0,
    min_frequency: Annotated[
        float,
        typer.Option("--min-frequency", help="Phase advance per sample over white"),
    ] = 0.05,
    max_frequency: Annotated[
        float,
        typer.Option("--max-frequency", help="Phase advance per sample over black"),
    ] = 0.2,
    link_ends: Annotated[
        bool,
        typer.Option(
            "--link-ends/--no-link-ends",
            help="Join all scan lines into one continuous stroke",
        ),
    ] = True,
    min_velocity: Annotated[
        float,
        typer.Option("--min-velocity", help="Step along the line over black"),
    ] = 0.5,
    max_velocity: Annotated[
        float,
        typer.Option("--max-velocity", help="Step along the line over white"),
    ] = 2.0,
    curve_tension: Annotated[
        float,
        typer.Option("--curve-tension", "-t", help="Curve tension (0-1)"),
    ] = 0.5,
    cell_size: Annotated[
        float,
        typer.Option("--cell-size", help="Brightness averaging window (pixels)"),
    ] = 3.0,
    pen_width: Annotated[
        float,
        typer.Option("--pen-width", help="SVG stroke width"),
    ] = 1.0,
    canvas_width: Annotated[
        int,
        typer.Option("--canvas-width", "-W", help="Canvas width in pixels"),
    ] = 800,
    canvas_height: Annotated[
        int,
        typer.Option("--canvas-height", "-H", help="Canvas height in pixels"),
    ] = 600,
    feed_rate: Annotated[
        float,
        typer.Option("--feed-rate", "-f", help="G1 feed rate"),
    ] = 1000.0,
    dry_run: Annotated[
        bool,
        typer.Option(
            "--dry-run",
            help="Generate and report statistics without writing files",
        ),
    ] = False,
    log_file: Annotated[
        Path | None,
        typer.Option(
            "--log-file",
            help="Write detailed logs to file",
        ),
    ] = None,
    log_level: Annotated[
        str,
        typer.Option(
            "--log-level",
            help="Logging level (DEBUG|INFO|WARNING|ERROR)",
        ),
    ] = "WARNING",
    verbose: Annotated[
        bool,
        typer.Option(
            "--verbose",
            "-v",
            help="Verbose console output",
        ),
    ] = False,
    quiet: Annotated[
        bool,
        typer.Option(
            "--quiet",
            "-q",
            help="Minimal console output",
        ),
    ] = False,
) -> None:
    """Convert an image to an SVG hatch drawing and a G-code program.

    Example:
        hatchplot render portrait.png --angle 30 --line-spacing 4

    This will create portrait.svg and portrait.gcode next to the image.
    """
    # Validate mutually exclusive options
    if verbose and quiet:
        print_error("Cannot use --verbose and --quiet together")
        raise typer.Exit(code=1)

    if not quiet:
        print_header(__version__)

    try:
        settings = build_settings(
            {
                "hatch": {
                    "line_spacing": line_spacing,
                    "angle": angle,
                    "max_amplitude": max_amplitude,
                    "min_frequency": min_frequency,
                    "max_frequency": max_frequency,
                    "link_ends": link_ends,
                    "min_velocity": min_velocity,
                    "max_velocity": max_velocity,
                    "cell_size": cell_size,
                },
                "curve": {"tension": curve_tension},
                "canvas": {
                    "width": canvas_width,
                    "height": canvas_height,
                    "pen_width": pen_width,
                },
                "gcode": {"feed_rate": feed_rate},
                "logging": {
                    "log_file": log_file,
                    "log_level": "INFO" if verbose else log_level,
                },
            }
        )

        logger = configure_logging(
            log_file=settings.logging.log_file,
            console_level=settings.logging.log_level,
            file_level=settings.logging.file_log_level,
            quiet=quiet,
        )
        pipeline = PlotPipeline(settings, logger=logger)

        if not quiet:
            print_step("Loading image")
        raster = load_raster(image, settings.canvas.width, settings.canvas.height)

        if not quiet:
            print_image_info(str(image), raster.width, raster.height)
            print_settings_info(
                settings.hatch.line_spacing,
                settings.hatch.angle,
                settings.curve.tension,
                settings.hatch.link_ends,
            )
            print_step("Generating paths")

        if not quiet:
            with create_progress() as progress:
                progress.add_task("Hatching, fitting, emitting", total=None)
                result = pipeline.run(raster)
        else:
            result = pipeline.run(raster)

        if result.is_empty:
            if not quiet:
                print_empty(result.message)
            raise typer.Exit(code=0)

        stats = result.stats
        if not quiet:
            print_summary(
                paths=stats.paths,
                points=stats.points,
                segments=stats.segments,
                path_length=stats.path_length,
                gcode_lines=stats.gcode_lines,
            )

        if dry_run:
            if not quiet:
                console.print(
                    f"\n[bold green]{SYM_OK} Dry run complete[/bold green] – no files written"
                )
            raise typer.Exit(code=0)

        if output_dir is not None:
            writer = ArtifactWriter(output_dir)
            default_svg, default_gcode = writer.svg_path, writer.gcode_path
        else:
            default_svg, default_gcode = ArtifactWriter.get_output_paths(image)
        svg_path = svg_output or default_svg
        gcode_path = gcode_output or default_gcode

        ArtifactWriter.write_to(svg_path, result.svg)
        ArtifactWriter.write_to(gcode_path, result.gcode)

        if not quiet:
            print_success([str(svg_path), str(gcode_path)], stats.duration_seconds)

    except InvalidParameterError as e:
        print_error(f"Invalid parameter '{e.parameter}'", details=e.reason)
        raise typer.Exit(code=1)
    except ImageLoadError as e:
        print_error(f"Could not load image: {e.reason}")
        raise typer.Exit(code=1)
    except OutputWriteError as e:
        print_error(f"Could not write output: {e.reason}", details=e.path)
        raise typer.Exit(code=1)
    except HatchplotError as e:
        print_error(str(e))
        raise typer.Exit(code=1)
    except typer.Exit:
        # Re-raise typer.Exit to allow clean exits
        raise
    except Exception as e:
        print_error(f"Unexpected error: {e}")
        raise typer.Exit(code=1)


@app.command()
def gcode(
    svg_file: Annotated[
        Path,
        typer.Argument(
            help="Path to an SVG document with <path> elements",
            show_default=False,
        ),
    ],
    output: Annotated[
        Path | None,
        typer.Option(
            "--output",
            "-o",
            help="G-code output path (default: {svg}.gcode)",
        ),
    ] = None,
    feed_rate: Annotated[
        float,
        typer.Option("--feed-rate", "-f", help="G1 feed rate"),
    ] = 1000.0,
    unit_divisor: Annotated[
        float,
        typer.Option("--unit-divisor", help="Divide SVG coordinates by this value"),
    ] = 10.0,
    bezier_segments: Annotated[
        int,
        typer.Option("--bezier-segments", help="Linear moves per cubic curve"),
    ] = 10,
    quiet: Annotated[
        bool,
        typer.Option(
            "--quiet",
            "-q",
            help="Minimal console output",
        ),
    ] = False,
) -> None:
    """Convert an existing SVG path document to a G-code program.

    Example:
        hatchplot gcode drawing.svg -o drawing.gcode
    """
    if not svg_file.is_file():
        print_error(
            f"Input file not found: {svg_file}",
            details=f"The file '{svg_file}' does not exist or is not accessible.",
        )
        raise typer.Exit(code=1)

    try:
        config = build_settings(
            {
                "gcode": {
                    "feed_rate": feed_rate,
                    "unit_divisor": unit_divisor,
                    "bezier_segments": bezier_segments,
                }
            }
        ).gcode
        program = _convert_svg(svg_file, config)

        output_path = output or ArtifactWriter.get_output_paths(svg_file)[1]
        ArtifactWriter.write_to(output_path, program)

        if not quiet:
            console.print(f"\n[bold green]{SYM_OK} Complete[/bold green]")
            console.print(f"  {output_path}")

    except InvalidParameterError as e:
        print_error(f"Invalid parameter '{e.parameter}'", details=e.reason)
        raise typer.Exit(code=1)
    except SvgParseError as e:
        print_error(f"Could not read SVG: {e.reason}")
        raise typer.Exit(code=1)
    except HatchplotError as e:
        print_error(str(e))
        raise typer.Exit(code=1)


def _convert_svg(svg_file: Path, config: GcodeConfig) -> str:
    """Read an SVG file and emit its G-code program.

    Args:
        svg_file: Path to the SVG document
        config: G-code settings

    Returns:
        G-code program text
    """
    try:
        text = svg_file.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise SvgParseError(str(e)) from e
    return emit_gcode(text, config)


def cli() -> None:
    """Entry point for the CLI application."""
    app()


def main() -> None:
    """Entry point for the CLI application (alias for cli)."""
    cli()


if __name__ == "__main__":
    cli()
