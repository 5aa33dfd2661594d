"""Command-line interface for hatchplot.

This module provides the CLI using Typer with rich output for
user-friendly feedback.

Key features:
- render: image to SVG and G-code
- gcode: existing SVG to G-code
- Verbose/quiet output modes
- Dry-run mode for inspecting statistics
"""

from hatchplot.cli.app import cli, main

__all__ = ["cli", "main"]
