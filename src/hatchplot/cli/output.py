"""Rich console output helpers for the CLI.

This module provides user-friendly console output using Rich library
with progress spinners and formatted messages.
"""


from rich.console import Console
from rich.progress import Progress, SpinnerColumn, TextColumn, TimeElapsedColumn
from rich.text import Text

console = Console()

# Unicode symbols for consistent visual language
SYM_STEP = "▸"  # Step indicator
SYM_OK = "✓"  # Success
SYM_ERR = "✗"  # Error
SYM_DOT = "·"  # Separator/secondary info


def create_progress() -> Progress:
    """Create a rich spinner for long-running stages.

    Returns:
        Configured Progress instance with spinner and time elapsed.
    """
    return Progress(
        TextColumn("  "),
        SpinnerColumn(),
        TextColumn("{task.description}"),
        TimeElapsedColumn(),
        console=console,
        transient=True,
    )


def print_header(version: str) -> None:
    """Print application header.

    Args:
        version: Application version string
    """
    console.print(f"\n[bold]Hatchplot[/bold] v{version}")
    console.print("─" * 44)


def print_step(message: str) -> None:
    """Print a processing step indicator.

    Args:
        message: Step description message
    """
    console.print(f"\n{SYM_STEP} {message}")


def print_image_info(image_path: str, width: int, height: int) -> None:
    """Print source image and canvas information.

    Args:
        image_path: Path to the image file
        width: Canvas width in pixels
        height: Canvas height in pixels
    """
    line = Text("  ")
    line.append(image_path)
    console.print(line)
    console.print(f"  {width} × {height} canvas")


def print_settings_info(
    line_spacing: float, angle: float, tension: float, link_ends: bool
) -> None:
    """Print the main hatch settings.

    Args:
        line_spacing: Distance between scan lines
        angle: Scan angle in degrees
        tension: Curve tension
        link_ends: Whether lines are linked into one stroke
    """
    linked = "linked" if link_ends else "separate lines"
    console.print(
        f"  spacing {line_spacing:g} {SYM_DOT} angle {angle:g}° "
        f"{SYM_DOT} tension {tension:g} {SYM_DOT} {linked}"
    )


def _format_time(seconds: float) -> str:
    """Format seconds into human-readable time string."""
    if seconds < 1:
        return f"{seconds * 1000:.0f}ms"
    elif seconds < 60:
        return f"{seconds:.1f}s"
    else:
        mins = int(seconds // 60)
        secs = seconds % 60
        return f"{mins}m {secs:.1f}s"


def print_summary(
    paths: int,
    points: int,
    segments: int,
    path_length: float,
    gcode_lines: int,
) -> None:
    """Print generation statistics.

    Args:
        paths: Number of plotted paths
        points: Number of sampled points
        segments: Number of curve or line segments
        path_length: Total drawn length in canvas pixels
        gcode_lines: Number of G-code lines
    """
    console.print(
        f"  {paths:,} paths {SYM_DOT} {points:,} points {SYM_DOT} {segments:,} segments"
    )
    console.print(f"  {path_length:,.0f} px drawn {SYM_DOT} {gcode_lines:,} G-code lines")


def print_success(output_paths: list[str], total_time_s: float) -> None:
    """Print success message with written files.

    Args:
        output_paths: Paths of the written documents
        total_time_s: Total processing time in seconds
    """
    console.print(f"\n[bold green]{SYM_OK} Complete[/bold green] in {_format_time(total_time_s)}")
    for path in output_paths:
        line = Text("  ")
        line.append(path, style="bold")
        console.print(line)


def print_empty(message: str) -> None:
    """Print a notice for a run that produced nothing.

    Args:
        message: Reason nothing was generated
    """
    console.print(f"\n{SYM_DOT} {message}. Nothing to write.")


def print_error(message: str, details: str | None = None) -> None:
    """Print error message.

    Args:
        message: Main error message
        details: Optional detailed error information
    """
    console.print(f"\n[bold red]{SYM_ERR} Error:[/bold red] {message}")
    if details:
        console.print(f"  {details}")
