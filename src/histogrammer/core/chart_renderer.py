"""ASCII bar chart rendering for letter histograms."""

from __future__ import annotations

from collections.abc import Iterator, Sequence

from histogrammer.core.binner import ALPHABET
from histogrammer.core.errors import InvalidLayoutError
from histogrammer.core.models import Histogram, LayoutParams, Row
from histogrammer.infra.logging import get_logger

logger = get_logger(__name__)


def label_width(peak: int) -> int:
    """Number of characters reserved for tick labels.

    Equals the number of decimal digits of ``peak``, i.e. floor(log10(peak)) + 1,
    and 1 when ``peak`` is 0.

    Args:
        peak: Largest bin count

    Returns:
        Width of the label column
    """
    if peak <= 0:
        return 1
    # Exact for any int, unlike math.log10 near large powers of ten
    return len(str(peak))


def tick_value(floor: float, ceil: float) -> int:
    """Label for a band: the midpoint of its interval, truncated toward zero."""
    return int(0.5 * (floor + ceil))


class ChartRenderer:
    """Renders a histogram as a fixed-height text chart.

    The range [0, peak] is split into ``row_count`` equal bands. A column is
    filled at a band when its count is strictly greater than the band's floor,
    so bars grow contiguously from the bottom.
    """

    FILL_MARK = "*"
    EMPTY_MARK = " "
    AXIS_VERTICAL = "|"
    AXIS_CORNER = "+"
    AXIS_HORIZONTAL = "-"

    def __init__(self, alphabet: Sequence[str] = ALPHABET) -> None:
        """Initialize the renderer.

        Args:
            alphabet: Symbols drawn as columns, left to right
        """
        self.alphabet = tuple(alphabet)

    def rows(self, peak: int, layout: LayoutParams) -> Iterator[Row]:
        """Yield the chart's bands from top to bottom.

        Args:
            peak: Largest bin count, used to scale the bands
            layout: Row count and tick stride

        Yields:
            Row for each band, starting with index ``row_count - 1``

        Raises:
            InvalidLayoutError: If row count or tick stride is not positive
        """
        row_count = layout.row_count
        tick_stride = layout.tick_stride
        self._check_layout(row_count, tick_stride)

        for r in reversed(range(row_count)):
            floor = (r / row_count) * peak
            ceil = ((r + 1) / row_count) * peak
            # Counted from the top so the highest band is always labeled
            labeled = (row_count - 1 - r) % tick_stride == 0
            yield Row(index=r, floor=floor, ceil=ceil, tick=tick_value(floor, ceil) if labeled else None)

    def render(self, histogram: Histogram, layout: LayoutParams | None = None) -> list[str]:
        """Render the histogram as printable lines.

        Args:
            histogram: Letter counts and peak
            layout: Row count and tick stride, defaults to 10 rows labeled every 3rd

        Returns:
            One line per band, then the horizontal axis, then the symbol labels

        Raises:
            InvalidLayoutError: If row count or tick stride is not positive
        """
        layout = layout or LayoutParams()
        self._check_layout(layout.row_count, layout.tick_stride)

        width = label_width(histogram.peak)
        counts = [histogram.count(symbol) for symbol in self.alphabet]

        lines = []
        for row in self.rows(histogram.peak, layout):
            label = str(row.tick) if row.has_tick else ""
            marks = "".join(self.FILL_MARK if row.is_filled(count) else self.EMPTY_MARK for count in counts)
            lines.append(label.rjust(width) + self.AXIS_VERTICAL + marks)

        padding = " " * width
        lines.append(padding + self.AXIS_CORNER + self.AXIS_HORIZONTAL * len(self.alphabet))
        lines.append(padding + self.AXIS_VERTICAL + "".join(self.alphabet))

        logger.debug(
            "Rendered chart",
            rows=layout.row_count,
            tick_stride=layout.tick_stride,
            peak=histogram.peak,
            label_width=width,
        )

        return lines

    def _check_layout(self, row_count: int, tick_stride: int) -> None:
        """Reject layouts that would divide or take a modulo by zero."""
        if row_count <= 0 or tick_stride <= 0:
            raise InvalidLayoutError(row_count=row_count, tick_stride=tick_stride)
