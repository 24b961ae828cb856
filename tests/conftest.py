"""Shared pytest fixtures."""

from collections.abc import Iterator

import pytest

from sample_calculator.utils.logger import configure_logging
from sample_calculator.utils.settings import (
    LoggingSettings,
    reset_calculator_settings,
    reset_settings,
)


@pytest.fixture(autouse=True)
def _reset_settings(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Isolate every test from environment-driven settings."""
    for name in (
        "LOG_LEVEL",
        "LOG_FORMAT",
        "LOG_FILE_PATH",
        "CALCULATOR_INT_BITS",
        "CALCULATOR_COMMAND_CONFIG_PATH",
    ):
        monkeypatch.delenv(name, raising=False)
    reset_settings()
    reset_calculator_settings()
    configure_logging(LoggingSettings(log_level="WARNING", log_format="plain"))
    yield
    reset_settings()
    reset_calculator_settings()
