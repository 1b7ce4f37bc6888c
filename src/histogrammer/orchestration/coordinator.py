"""Coordinator for orchestrating the histogram pipeline."""

import time
from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path

from pydantic import BaseModel, Field

from histogrammer.core.binner import Binner
from histogrammer.core.chart_renderer import ChartRenderer
from histogrammer.core.enums import PipelinePhase
from histogrammer.core.errors import HistogrammerError, InputFileError, SystemError
from histogrammer.core.models import Histogram, LayoutParams
from histogrammer.infra.logging import get_logger
from histogrammer.infra.settings import HistogrammerSettings


class ChartResult(BaseModel):
    """Result of a successful pipeline run."""

    lines: list[str] = Field(..., description="Rendered chart, one entry per output line")
    histogram: Histogram = Field(..., description="Letter counts the chart was drawn from")
    layout: LayoutParams = Field(..., description="Layout used for rendering")
    processing_time_ms: dict[str, float] = Field(default_factory=dict, description="Processing time per phase")


class Coordinator:
    """Runs read, bin and render as one synchronous pipeline.

    Nothing is written anywhere: callers receive the full set of lines only
    once every phase has completed.
    """

    def __init__(
        self,
        settings: HistogrammerSettings | None = None,
        binner: Binner | None = None,
        renderer: ChartRenderer | None = None,
    ) -> None:
        """Initialize the coordinator.

        Args:
            settings: Runtime configuration, loaded from the environment if omitted
            binner: Letter binner
            renderer: Chart renderer
        """
        self.logger = get_logger(self.__class__.__name__)
        self.settings = settings or HistogrammerSettings()
        self.binner = binner or Binner()
        self.renderer = renderer or ChartRenderer()

    def read_input(self, path: str | Path) -> str:
        """Read the whole input file.

        Args:
            path: Path to a text file

        Returns:
            File contents. Bytes that do not decode are replaced.

        Raises:
            InputFileError: If the file is missing, a directory, or unreadable
        """
        try:
            with open(path, encoding=self.settings.encoding, errors="replace") as f:
                return f.read()
        except OSError as e:
            self.logger.debug("Failed to read input file", path=str(path), error=str(e))
            raise InputFileError(path=str(path), reason=e.strerror or str(e)) from e

    def process(self, text: str, layout: LayoutParams | None = None) -> ChartResult:
        """Bin ``text`` and render the chart.

        Args:
            text: Full input text
            layout: Row count and tick stride, configured defaults if omitted

        Returns:
            ChartResult with the rendered lines

        Raises:
            HistogrammerError: If any phase fails
        """
        layout = layout or self.settings.layout()
        timings: dict[str, float] = {}

        with self._phase(PipelinePhase.BINNING, timings):
            histogram = self.binner.count(text)

        with self._phase(PipelinePhase.RENDERING, timings):
            lines = self.renderer.render(histogram, layout)

        self.logger.info(
            "Chart rendered",
            letters=histogram.total,
            peak=histogram.peak,
            rows=layout.row_count,
            tick_stride=layout.tick_stride,
            processing_time_ms=timings,
        )

        return ChartResult(lines=lines, histogram=histogram, layout=layout, processing_time_ms=timings)

    def run(self, path: str | Path, layout: LayoutParams | None = None) -> ChartResult:
        """Read ``path`` and render its letter histogram.

        Args:
            path: Path to a text file
            layout: Row count and tick stride, configured defaults if omitted

        Returns:
            ChartResult with the rendered lines and file-reading time included

        Raises:
            HistogrammerError: If any phase fails
        """
        timings: dict[str, float] = {}
        with self._phase(PipelinePhase.FILE_READING, timings):
            text = self.read_input(path)

        result = self.process(text, layout)
        result.processing_time_ms = {**timings, **result.processing_time_ms}
        return result

    @contextmanager
    def _phase(self, phase: PipelinePhase, timings: dict[str, float]) -> Iterator[None]:
        """Time a pipeline phase and wrap unexpected failures.

        Args:
            phase: Phase being executed
            timings: Mapping that receives the phase duration in milliseconds

        Raises:
            HistogrammerError: Re-raised unchanged
            SystemError: For any other exception raised inside the phase
        """
        start = time.perf_counter()
        try:
            yield
        except HistogrammerError:
            raise
        except Exception as e:
            self.logger.exception("Unexpected error in pipeline phase", phase=phase.value)
            raise SystemError(message=f"Unexpected error during {phase.value}: {e}", phase=phase) from e
        finally:
            timings[phase.value] = (time.perf_counter() - start) * 1000
