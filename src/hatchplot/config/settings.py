"""Configuration settings for Hatchplot."""

from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError, model_validator

from hatchplot.exceptions import InvalidParameterError


class HatchConfig(BaseModel):
    """Configuration for sawtooth hatch path generation.

    Amplitude, frequency and velocity are interpolated between their
    bounds by local image brightness: dark areas use the maximum amplitude
    and frequency and the minimum velocity.
    """

    model_config = ConfigDict(allow_inf_nan=False)

    line_spacing: float = Field(
        default=5.0,
        gt=0.0,
        description="Distance between parallel scan lines (canvas pixels)",
    )
    angle: float = Field(
        default=45.0,
        description="Scan line angle in degrees",
    )
    max_amplitude: float = Field(
        default=10.0,
        ge=0.0,
        description="Oscillation amplitude over fully black regions",
    )
    min_frequency: float = Field(
        default=0.05,
        gt=0.0,
        description="Phase advance per sample over white regions (radians)",
    )
    max_frequency: float = Field(
        default=0.2,
        gt=0.0,
        description="Phase advance per sample over black regions (radians)",
    )
    link_ends: bool = Field(
        default=True,
        description="Concatenate all scan lines into one continuous stroke",
    )
    min_velocity: float = Field(
        default=0.5,
        gt=0.0,
        description="Step size along the scan line over black regions",
    )
    max_velocity: float = Field(
        default=2.0,
        gt=0.0,
        description="Step size along the scan line over white or blank regions",
    )
    cell_size: float = Field(
        default=3.0,
        ge=1.0,
        description="Side of the square window used to average brightness",
    )

    @model_validator(mode="after")
    def _check_ranges(self) -> "HatchConfig":
        if self.min_frequency > self.max_frequency:
            raise ValueError("min_frequency must not exceed max_frequency")
        if self.min_velocity > self.max_velocity:
            raise ValueError("min_velocity must not exceed max_velocity")
        return self


class CurveConfig(BaseModel):
    """Configuration for Catmull-Rom curve fitting."""

    model_config = ConfigDict(allow_inf_nan=False)

    tension: float = Field(
        default=0.5,
        ge=0.0,
        le=1.0,
        description="Curve tension (0 = loose cardinal spline, 1 = straight segments)",
    )


class CanvasConfig(BaseModel):
    """Canvas dimensions and pen settings for the SVG document."""

    model_config = ConfigDict(allow_inf_nan=False)

    width: int = Field(
        default=800,
        gt=0,
        description="Canvas width in pixels",
    )
    height: int = Field(
        default=600,
        gt=0,
        description="Canvas height in pixels",
    )
    pen_width: float = Field(
        default=1.0,
        gt=0.0,
        description="Stroke width of the rendered paths",
    )


class GcodeConfig(BaseModel):
    """Configuration for G-code emission."""

    model_config = ConfigDict(allow_inf_nan=False)

    unit_divisor: float = Field(
        default=10.0,
        gt=0.0,
        description="Divisor converting SVG units to machine units",
    )
    bezier_segments: int = Field(
        default=10,
        ge=1,
        le=1000,
        description="Number of linear moves per flattened cubic segment",
    )
    feed_rate: float = Field(
        default=1000.0,
        gt=0.0,
        description="Feed rate for drawing moves",
    )
    pen_up_z: float = Field(
        default=5.0,
        description="Z height with the pen lifted",
    )
    pen_down_z: float = Field(
        default=0.0,
        description="Z height with the pen on the paper",
    )


class LoggingConfig(BaseModel):
    """Logging configuration."""

    log_file: Path | None = Field(
        default=None,
        description="Path to log file",
    )
    log_level: str = Field(
        default="WARNING",
        description="Console log level",
    )
    file_log_level: str = Field(
        default="DEBUG",
        description="File log level (more verbose)",
    )


class PlotterSettings(BaseModel):
    """Main application settings."""

    hatch: HatchConfig = Field(default_factory=HatchConfig)
    curve: CurveConfig = Field(default_factory=CurveConfig)
    canvas: CanvasConfig = Field(default_factory=CanvasConfig)
    gcode: GcodeConfig = Field(default_factory=GcodeConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


def get_default_settings() -> PlotterSettings:
    """Get default application settings."""
    return PlotterSettings()


def build_settings(data: dict[str, Any]) -> PlotterSettings:
    """Validate a nested settings mapping.

    Args:
        data: Mapping with optional "hatch", "curve", "canvas", "gcode" and
            "logging" sections

    Returns:
        Validated settings

    Raises:
        InvalidParameterError: If any value is out of range or not finite
    """
    try:
        return PlotterSettings.model_validate(data)
    except ValidationError as e:
        first = e.errors()[0]
        parameter = ".".join(str(part) for part in first["loc"]) or "settings"
        raise InvalidParameterError(
            parameter, first.get("input"), first["msg"]
        ) from e
