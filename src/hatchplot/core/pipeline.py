"""Pipeline orchestration for image-to-plotter conversion.

This module coordinates the full workflow for one raster:

1. Generate sawtooth hatch polylines
2. Fit Catmull-Rom curves to each polyline
3. Render the fitted paths as an SVG document
4. Parse the SVG back into absolute commands
5. Emit a G-code program

Key components:
- PipelineResult: Documents and statistics from one run
- PlotPipeline: Main orchestrator class
"""

import time
from dataclasses import dataclass, field

import structlog

from hatchplot.config import PlotterSettings
from hatchplot.core._validation import require_positive
from hatchplot.core.curves import CurveFitter
from hatchplot.core.geometry import path_length
from hatchplot.core.hatch import HatchPathGenerator
from hatchplot.domain import FittedPath, Polyline, Raster
from hatchplot.io.gcode import GcodeEmitter
from hatchplot.io.svg_parser import parse_svg_paths
from hatchplot.io.svg_writer import SvgWriter
from hatchplot.utils import PipelineLogger, PipelineStats

NO_RASTER_MESSAGE = "No image loaded"
NO_PATHS_MESSAGE = "No scan line crossed the image"


@dataclass
class PipelineResult:
    """Output of one pipeline run.

    Attributes:
        svg: SVG document text (empty when nothing was generated)
        gcode: G-code program text (empty when nothing was generated)
        paths: Fitted paths in draw order
        stats: Counts and timing for the run
        message: Human-readable outcome
    """

    svg: str
    gcode: str
    paths: list[FittedPath] = field(default_factory=list)
    stats: PipelineStats = field(default_factory=PipelineStats)
    message: str = ""

    @property
    def is_empty(self) -> bool:
        """True if the run produced nothing to plot."""
        return not self.paths


class PlotPipeline:
    """Orchestrates raster to SVG to G-code conversion.

    All parameters are validated when the pipeline is built, so a bad
    setting fails before any image is touched.

    Example:
        settings = PlotterSettings()
        pipeline = PlotPipeline(settings)
        result = pipeline.run(raster)
        print(result.gcode)
    """

    def __init__(
        self,
        settings: PlotterSettings,
        logger: structlog.stdlib.BoundLogger | None = None,
    ) -> None:
        """Initialize the pipeline.

        Args:
            settings: Plotter settings
            logger: Bound logger (module logger if None)

        Raises:
            InvalidParameterError: If any setting is out of range or not finite
        """
        self.settings = settings
        self.logger = logger or structlog.get_logger("hatchplot")
        self.generator = HatchPathGenerator(settings.hatch)
        self.fitter = CurveFitter(settings.curve.tension)
        self.emitter = GcodeEmitter(settings.gcode)
        self.pen_width = require_positive("pen_width", settings.canvas.pen_width)

    def generate_paths(self, raster: Raster) -> list[Polyline]:
        """Generate hatch polylines for a raster."""
        return self.generator.generate(raster)

    def render_svg(self, raster: Raster, polylines: list[Polyline]) -> tuple[str, list[FittedPath]]:
        """Fit curves to polylines and render them on a raster-sized canvas.

        Args:
            raster: Raster the polylines were generated from
            polylines: Hatch polylines

        Returns:
            Tuple of (svg_text, fitted_paths)
        """
        fitted = self.fitter.fit_all(polylines)
        writer = SvgWriter(raster.width, raster.height, self.pen_width)
        return writer.render(fitted), fitted

    def svg_to_gcode(self, svg_text: str) -> tuple[str, int]:
        """Convert an SVG document to a G-code program.

        Args:
            svg_text: SVG document text

        Returns:
            Tuple of (gcode_text, path_group_count)

        Raises:
            SvgParseError: If the document is not well-formed XML
        """
        numbered = parse_svg_paths(svg_text)
        program = self.emitter.emit(
            [commands for _, commands in numbered],
            [number for number, _ in numbered],
        )
        return program, len(numbered)

    def run(self, raster: Raster | None) -> PipelineResult:
        """Run the full pipeline.

        Args:
            raster: Source raster, or None if no image is loaded

        Returns:
            PipelineResult; is_empty is True (with a message) when there is
            no raster or no hatch line crosses it
        """
        tracker = PipelineLogger(self.logger)
        stats = tracker.stats
        stats.start_time = time.time()

        if raster is None:
            tracker.log_empty(NO_RASTER_MESSAGE)
            stats.end_time = time.time()
            return PipelineResult(svg="", gcode="", stats=stats, message=NO_RASTER_MESSAGE)

        tracker.log_raster(raster.width, raster.height)

        polylines = self.generate_paths(raster)
        tracker.log_hatch_complete(
            scan_lines=self.generator.line_count(raster),
            paths=len(polylines),
            points=sum(len(points) for points in polylines),
        )

        if not polylines:
            tracker.log_empty(NO_PATHS_MESSAGE)
            stats.end_time = time.time()
            return PipelineResult(svg="", gcode="", stats=stats, message=NO_PATHS_MESSAGE)

        svg_text, fitted = self.render_svg(raster, polylines)
        tracker.log_curves_fitted(
            segments=SvgWriter.count_segments(fitted),
            path_length=sum(path_length(points) for points in polylines),
        )
        tracker.log_svg_rendered(len(svg_text.encode("utf-8")))

        gcode_text, groups = self.svg_to_gcode(svg_text)
        tracker.log_gcode_emitted(path_groups=groups, gcode_lines=gcode_text.count("\n") + 1)

        stats.end_time = time.time()
        self.logger.info(
            "Pipeline complete",
            paths=stats.paths,
            segments=stats.segments,
            duration_seconds=round(stats.duration_seconds, 2),
        )

        return PipelineResult(
            svg=svg_text,
            gcode=gcode_text,
            paths=fitted,
            stats=stats,
            message=f"Generated {len(fitted)} paths",
        )
