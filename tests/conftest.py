"""Shared fixtures for Histogrammer tests."""

import pytest

SETTINGS_ENV_VARS = (
    "HISTOGRAMMER_ROW_COUNT",
    "HISTOGRAMMER_TICK_STRIDE",
    "HISTOGRAMMER_ENCODING",
)


@pytest.fixture(autouse=True)
def clean_settings_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep configuration from the developer's environment out of the tests."""
    for name in SETTINGS_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
