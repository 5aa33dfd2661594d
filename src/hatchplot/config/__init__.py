"""Configuration management for hatchplot.

This module provides configuration management using Pydantic models.
Configuration can be provided via CLI arguments or defaults.

Key classes:
- HatchConfig: Scan line and oscillation settings
- CurveConfig: Curve fitting settings
- CanvasConfig: Canvas size and pen width
- GcodeConfig: Motion program settings
- LoggingConfig: Logging settings
- PlotterSettings: Main application settings
"""

from hatchplot.config.settings import (
    CanvasConfig,
    CurveConfig,
    GcodeConfig,
    HatchConfig,
    LoggingConfig,
    PlotterSettings,
    build_settings,
    get_default_settings,
)

__all__ = [
    "CanvasConfig",
    "CurveConfig",
    "GcodeConfig",
    "HatchConfig",
    "LoggingConfig",
    "PlotterSettings",
    "build_settings",
    "get_default_settings",
]
