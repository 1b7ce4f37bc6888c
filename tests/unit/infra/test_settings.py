"""Unit tests for runtime settings."""

import pytest
from pydantic import ValidationError as PydanticValidationError

from histogrammer.core.enums import PipelinePhase
from histogrammer.core.errors import InvalidLayoutError
from histogrammer.core.models import LayoutParams
from histogrammer.infra.settings import HistogrammerSettings


class TestHistogrammerSettings:
    """Test HistogrammerSettings."""

    def test_defaults(self) -> None:
        """Test built-in defaults."""
        settings = HistogrammerSettings(_env_file=None)
        assert settings.row_count == 10
        assert settings.tick_stride == 3
        assert settings.encoding == "utf-8"

    def test_env_override(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test defaults can be changed through the environment."""
        monkeypatch.setenv("HISTOGRAMMER_ROW_COUNT", "4")
        monkeypatch.setenv("HISTOGRAMMER_TICK_STRIDE", "2")
        settings = HistogrammerSettings(_env_file=None)
        assert settings.row_count == 4
        assert settings.tick_stride == 2

    def test_env_file(self, tmp_path) -> None:
        """Test defaults can be read from a .env file."""
        env_file = tmp_path / ".env"
        env_file.write_text("HISTOGRAMMER_ROW_COUNT=7\nUNRELATED=1\n")
        settings = HistogrammerSettings(_env_file=env_file)
        assert settings.row_count == 7

    def test_invalid_env_rejected(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test a non-positive configured default is rejected."""
        monkeypatch.setenv("HISTOGRAMMER_ROW_COUNT", "0")
        with pytest.raises(PydanticValidationError):
            HistogrammerSettings(_env_file=None)

    def test_oversized_env_rejected(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test a configured default past the maximum is rejected."""
        monkeypatch.setenv("HISTOGRAMMER_TICK_STRIDE", "10001")
        with pytest.raises(PydanticValidationError):
            HistogrammerSettings(_env_file=None)

class TestLayout:
    """Test building layouts from settings."""

    @pytest.fixture
    def settings(self) -> HistogrammerSettings:
        """Create settings with known defaults."""
        return HistogrammerSettings(_env_file=None, row_count=8, tick_stride=2)

    def test_defaults_used(self, settings: HistogrammerSettings) -> None:
        """Test configured defaults fill unset values."""
        assert settings.layout() == LayoutParams(row_count=8, tick_stride=2)

    def test_overrides_win(self, settings: HistogrammerSettings) -> None:
        """Test explicit values take precedence."""
        assert settings.layout(row_count=3) == LayoutParams(row_count=3, tick_stride=2)
        assert settings.layout(tick_stride=5) == LayoutParams(row_count=8, tick_stride=5)

    @pytest.mark.parametrize(("row_count", "tick_stride"), [(0, None), (None, 0), (0, 0)])
    def test_non_positive_rejected(
        self, settings: HistogrammerSettings, row_count: int | None, tick_stride: int | None
    ) -> None:
        """Test zero values raise InvalidLayoutError during argument handling."""
        with pytest.raises(InvalidLayoutError) as exc_info:
            settings.layout(row_count=row_count, tick_stride=tick_stride)
        assert exc_info.value.phase == PipelinePhase.ARGUMENT_PARSING

    def test_above_maximum_rejected(self, settings: HistogrammerSettings) -> None:
        """Test an override past the maximum raises InvalidLayoutError."""
        with pytest.raises(InvalidLayoutError) as exc_info:
            settings.layout(row_count=10001)
        assert exc_info.value.details[0].field == "row_count"
