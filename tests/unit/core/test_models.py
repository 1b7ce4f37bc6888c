"""Unit tests for Pydantic models."""

import pytest
from pydantic import ValidationError as PydanticValidationError

from histogrammer.core.models import (
    DEFAULT_ROW_COUNT,
    DEFAULT_TICK_STRIDE,
    MAX_LAYOUT_VALUE,
    ErrorDetail,
    ErrorResponse,
    Histogram,
    LayoutParams,
    Row,
)


class TestLayoutParams:
    """Test LayoutParams model."""

    def test_default_values(self) -> None:
        """Test default values are set correctly."""
        layout = LayoutParams()
        assert layout.row_count == DEFAULT_ROW_COUNT == 10
        assert layout.tick_stride == DEFAULT_TICK_STRIDE == 3

    def test_custom_values(self) -> None:
        """Test custom values are accepted."""
        layout = LayoutParams(row_count=25, tick_stride=5)
        assert layout.row_count == 25
        assert layout.tick_stride == 5

    def test_validation_constraints(self) -> None:
        """Test non-positive values are rejected."""
        with pytest.raises(PydanticValidationError) as exc_info:
            LayoutParams(row_count=0)
        assert "greater than or equal to 1" in str(exc_info.value)

        with pytest.raises(PydanticValidationError) as exc_info:
            LayoutParams(tick_stride=-2)
        assert "greater than or equal to 1" in str(exc_info.value)

    def test_upper_bound(self) -> None:
        """Test values past the maximum are rejected."""
        assert LayoutParams(row_count=MAX_LAYOUT_VALUE, tick_stride=MAX_LAYOUT_VALUE).row_count == 10000

        with pytest.raises(PydanticValidationError) as exc_info:
            LayoutParams(row_count=MAX_LAYOUT_VALUE + 1)
        assert "less than or equal to 10000" in str(exc_info.value)

        with pytest.raises(PydanticValidationError):
            LayoutParams(tick_stride=MAX_LAYOUT_VALUE + 1)

    def test_frozen(self) -> None:
        """Test layout parameters cannot be changed after creation."""
        layout = LayoutParams()
        with pytest.raises(PydanticValidationError):
            layout.row_count = 4


class TestHistogram:
    """Test Histogram model."""

    def test_empty_histogram(self) -> None:
        """Test an empty histogram reads zero everywhere."""
        histogram = Histogram()
        assert histogram.frequencies == {}
        assert histogram.peak == 0
        assert histogram.total == 0
        assert histogram.count("a") == 0

    def test_count_default(self) -> None:
        """Test absent symbols read as zero and present ones as stored."""
        histogram = Histogram(frequencies={"a": 3}, peak=3, total=3)
        assert histogram.count("a") == 3
        assert histogram.count("b") == 0

    def test_negative_peak_rejected(self) -> None:
        """Test peak must be non-negative."""
        with pytest.raises(PydanticValidationError):
            Histogram(peak=-1)

    def test_serialization(self) -> None:
        """Test histogram serializes to plain data."""
        histogram = Histogram(frequencies={"x": 2}, peak=2, total=2)
        assert histogram.model_dump() == {"frequencies": {"x": 2}, "peak": 2, "total": 2}


class TestRow:
    """Test Row dataclass."""

    def test_fill_is_strict(self) -> None:
        """Test a count equal to the floor does not fill the row."""
        row = Row(index=1, floor=1.5, ceil=3.0, tick=2)
        assert row.is_filled(2)
        assert not row.is_filled(1)

        row = Row(index=1, floor=2.0, ceil=4.0)
        assert not row.is_filled(2)
        assert row.is_filled(3)

    def test_has_tick(self) -> None:
        """Test has_tick reflects the presence of a label, including zero."""
        assert Row(index=0, floor=0.0, ceil=0.5, tick=0).has_tick
        assert not Row(index=0, floor=0.0, ceil=0.5).has_tick


class TestErrorResponse:
    """Test ErrorResponse model."""

    def test_minimal(self) -> None:
        """Test error response with required fields only."""
        response = ErrorResponse(code="E500_INTERNAL", message="boom")
        assert response.details is None
        assert response.hint is None
        assert response.phase is None

    def test_with_details(self) -> None:
        """Test error response with details."""
        response = ErrorResponse(
            code="E400_INVALID_ARGUMENT",
            message="Invalid argument for flag -r",
            details=[ErrorDetail(field="-r", reason="'x' is not a positive integer")],
            phase="argument_parsing",
        )
        assert response.details[0].field == "-r"
        assert response.model_dump()["phase"] == "argument_parsing"
