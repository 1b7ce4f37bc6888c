"""Data structures for Histogrammer."""

from __future__ import annotations

from dataclasses import dataclass

from pydantic import BaseModel, ConfigDict, Field

DEFAULT_ROW_COUNT = 10
DEFAULT_TICK_STRIDE = 3
# Upper bound for row count and tick stride
MAX_LAYOUT_VALUE = 10_000


class LayoutParams(BaseModel):
    """Chart layout parameters."""

    model_config = ConfigDict(frozen=True)

    row_count: int = Field(
        default=DEFAULT_ROW_COUNT,
        ge=1,
        le=MAX_LAYOUT_VALUE,
        description="Number of horizontal bands in the chart",
    )
    tick_stride: int = Field(
        default=DEFAULT_TICK_STRIDE,
        ge=1,
        le=MAX_LAYOUT_VALUE,
        description="Label every Nth row, counted from the top",
    )


class Histogram(BaseModel):
    """Letter frequencies collected from a text.

    Symbols that never occurred may be absent from ``frequencies``; use
    :meth:`count` to read a bin with the zero default applied.
    """

    model_config = ConfigDict(frozen=True)

    frequencies: dict[str, int] = Field(default_factory=dict, description="Symbol to occurrence count")
    peak: int = Field(default=0, ge=0, description="Largest bin count, 0 when no letters were found")
    total: int = Field(default=0, ge=0, description="Number of letters counted")

    def count(self, symbol: str) -> int:
        """Return the count for ``symbol``, 0 if it never occurred."""
        return self.frequencies.get(symbol, 0)


@dataclass(frozen=True)
class Row:
    """One horizontal band of the chart.

    Attributes:
        index: Band index, 0 at the bottom
        floor: Inclusive lower bound of the band's frequency interval
        ceil: Exclusive upper bound of the band's frequency interval
        tick: Numeric label for the band, or None when the band is unlabeled
    """

    index: int
    floor: float
    ceil: float
    tick: int | None = None

    @property
    def has_tick(self) -> bool:
        return self.tick is not None

    def is_filled(self, count: int) -> bool:
        """Whether a bin with ``count`` occurrences reaches into this band."""
        return count > self.floor


class ErrorDetail(BaseModel):
    """Detailed error information."""

    field: str | None = Field(default=None, description="Argument or field that caused the error")
    reason: str | None = Field(default=None, description="Detailed reason for the error")
    suggestion: str | None = Field(default=None, description="Suggested correction")


class ErrorResponse(BaseModel):
    """Structured representation of a failure."""

    code: str = Field(..., description="Error code (e.g., E400_INVALID_LAYOUT)")
    message: str = Field(..., description="Human-readable error message")
    details: list[ErrorDetail] | None = Field(default=None, description="Detailed error information")
    hint: str | None = Field(default=None, description="Correction hint for the user")
    phase: str | None = Field(default=None, description="Pipeline phase where error occurred")
