"""Logging utilities for Hatchplot."""

import logging
from dataclasses import dataclass
from pathlib import Path

import structlog

# Handlers installed by configure_logging, replaced on each call
_installed_handlers: list[logging.Handler] = []


@dataclass
class PipelineStats:
    """Statistics from a pipeline run."""

    scan_lines: int = 0
    paths: int = 0
    points: int = 0
    segments: int = 0
    path_length: float = 0.0
    path_groups: int = 0
    gcode_lines: int = 0
    start_time: float | None = None
    end_time: float | None = None

    @property
    def duration_seconds(self) -> float:
        """Calculate processing duration."""
        if self.start_time and self.end_time:
            return self.end_time - self.start_time
        return 0.0


def configure_logging(
    log_file: Path | None = None,
    console_level: str = "INFO",
    file_level: str = "DEBUG",
    quiet: bool = False,
) -> structlog.stdlib.BoundLogger:
    """Configure dual-output structured logging.

    Args:
        log_file: Path to log file (no file output if None)
        console_level: Logging level for console output
        file_level: Logging level for file output
        quiet: If True, suppress console output except errors

    Returns:
        Configured structlog logger
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)

    while _installed_handlers:
        handler = _installed_handlers.pop()
        root_logger.removeHandler(handler)
        handler.close()

    if log_file is not None:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(getattr(logging, file_level.upper()))
        file_handler.setFormatter(
            logging.Formatter("%(asctime)s | %(levelname)-8s | %(name)s | %(message)s")
        )
        root_logger.addHandler(file_handler)
        _installed_handlers.append(file_handler)

    console_handler = logging.StreamHandler()
    console_handler.setLevel(
        logging.ERROR if quiet else getattr(logging, console_level.upper())
    )
    console_handler.setFormatter(logging.Formatter("%(message)s"))
    root_logger.addHandler(console_handler)
    _installed_handlers.append(console_handler)

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    logger = structlog.get_logger("hatchplot")
    logger.info(
        "Logging initialized",
        log_file=str(log_file) if log_file else None,
        level=file_level,
    )

    return logger


class PipelineLogger:
    """Logger for tracking pipeline stages and statistics."""

    def __init__(self, logger: structlog.stdlib.BoundLogger) -> None:
        self._logger = logger
        self._stats = PipelineStats()

    def log_raster(self, width: int, height: int) -> None:
        """Log the raster being processed."""
        self._logger.debug("Raster ready", width=width, height=height)

    def log_hatch_complete(self, scan_lines: int, paths: int, points: int) -> None:
        """Log hatch generation results."""
        self._logger.info(
            "Hatch paths generated",
            scan_lines=scan_lines,
            paths=paths,
            points=points,
        )
        self._stats.scan_lines = scan_lines
        self._stats.paths = paths
        self._stats.points = points

    def log_curves_fitted(self, segments: int, path_length: float) -> None:
        """Log curve fitting results."""
        self._logger.info(
            "Curves fitted",
            segments=segments,
            path_length=round(path_length, 2),
        )
        self._stats.segments = segments
        self._stats.path_length = path_length

    def log_svg_rendered(self, size_bytes: int) -> None:
        """Log SVG serialization."""
        self._logger.debug("SVG rendered", bytes=size_bytes)

    def log_gcode_emitted(self, path_groups: int, gcode_lines: int) -> None:
        """Log G-code emission."""
        self._logger.info(
            "G-code emitted",
            path_groups=path_groups,
            lines=gcode_lines,
        )
        self._stats.path_groups = path_groups
        self._stats.gcode_lines = gcode_lines

    def log_empty(self, reason: str) -> None:
        """Log a run that produced nothing."""
        self._logger.warning("Nothing to plot", reason=reason)

    @property
    def stats(self) -> PipelineStats:
        """Get current pipeline statistics."""
        return self._stats
