from __future__ import annotations

import pytest

from subsample.cli.config import (
    DEFAULT_LOG_LEVEL,
    LOG_LEVEL_ENV,
    TARGET_POINTS_ENV,
    InvalidConfigurationError,
    get_settings,
)
from subsample.constants import DEFAULT_TARGET_POINTS


def test_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv(TARGET_POINTS_ENV, raising=False)
    monkeypatch.delenv(LOG_LEVEL_ENV, raising=False)

    settings = get_settings()

    assert settings.target_points == DEFAULT_TARGET_POINTS
    assert settings.log_level == DEFAULT_LOG_LEVEL


def test_environment_then_override(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv(TARGET_POINTS_ENV, "750")
    monkeypatch.setenv(LOG_LEVEL_ENV, "debug")

    assert get_settings().target_points == 750
    assert get_settings().log_level == "DEBUG"
    assert get_settings(target_points=5, log_level="info").target_points == 5
    assert get_settings(log_level="info").log_level == "INFO"


def test_invalid_target_points(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv(TARGET_POINTS_ENV, "lots")

    with pytest.raises(InvalidConfigurationError, match=TARGET_POINTS_ENV):
        get_settings()


def test_invalid_log_level(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv(TARGET_POINTS_ENV, raising=False)

    with pytest.raises(InvalidConfigurationError, match="VERBOSE"):
        get_settings(log_level="verbose")
