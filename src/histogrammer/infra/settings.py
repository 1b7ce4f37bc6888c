"""Runtime configuration for Histogrammer."""

from __future__ import annotations

from pydantic import Field, ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from histogrammer.core.enums import PipelinePhase
from histogrammer.core.errors import InvalidLayoutError
from histogrammer.core.models import DEFAULT_ROW_COUNT, DEFAULT_TICK_STRIDE, MAX_LAYOUT_VALUE, LayoutParams


class HistogrammerSettings(BaseSettings):
    """Defaults applied when the command line leaves an option unset."""

    model_config = SettingsConfigDict(
        env_prefix="HISTOGRAMMER_",
        env_file=".env",
        extra="ignore",
    )

    row_count: int = Field(DEFAULT_ROW_COUNT, ge=1, le=MAX_LAYOUT_VALUE, description="Default number of chart rows")
    tick_stride: int = Field(
        DEFAULT_TICK_STRIDE, ge=1, le=MAX_LAYOUT_VALUE, description="Default spacing between labeled rows"
    )
    encoding: str = Field("utf-8", description="Text encoding used to decode the input file")

    def layout(self, row_count: int | None = None, tick_stride: int | None = None) -> LayoutParams:
        """Build layout parameters, preferring explicit values over configured defaults.

        Args:
            row_count: Row count override
            tick_stride: Tick stride override

        Returns:
            LayoutParams combining overrides and defaults

        Raises:
            InvalidLayoutError: If the resulting row count or tick stride is out of range
        """
        row_count = self.row_count if row_count is None else row_count
        tick_stride = self.tick_stride if tick_stride is None else tick_stride
        try:
            return LayoutParams(row_count=row_count, tick_stride=tick_stride)
        except ValidationError as e:
            raise InvalidLayoutError(
                row_count=row_count,
                tick_stride=tick_stride,
                phase=PipelinePhase.ARGUMENT_PARSING,
            ) from e
