import logging
import os
from dataclasses import dataclass
from typing import Optional

from subsample.constants import DEFAULT_TARGET_POINTS


TARGET_POINTS_ENV = "SUBSAMPLE_TARGET_POINTS"
LOG_LEVEL_ENV = "SUBSAMPLE_LOG_LEVEL"

DEFAULT_LOG_LEVEL = "WARNING"


@dataclass
class CLISettings:
    target_points: int
    log_level: str


class InvalidConfigurationError(RuntimeError):
    """Raised when a configuration value cannot be used."""


def _resolve_target_points(value: Optional[str]) -> int:
    if value is None or value == "":
        return DEFAULT_TARGET_POINTS
    try:
        return int(value)
    except ValueError as exc:
        raise InvalidConfigurationError(
            f"{TARGET_POINTS_ENV} must be an integer, got {value!r}."
        ) from exc


def get_settings(target_points: Optional[int] = None, log_level: Optional[str] = None) -> CLISettings:
    """Load CLI settings from arguments or environment variables.

    Args:
        target_points: Optional default point count override.
        log_level: Optional logging level name override.

    Returns:
        CLISettings populated from the first non-empty value in the priority
        order of explicit override then environment variable then default.

    Raises:
        InvalidConfigurationError: when a value is malformed.
    """

    resolved_points = target_points if target_points is not None else _resolve_target_points(os.getenv(TARGET_POINTS_ENV))
    resolved_level = (log_level or os.getenv(LOG_LEVEL_ENV) or DEFAULT_LOG_LEVEL).upper()

    if not isinstance(logging.getLevelName(resolved_level), int):
        raise InvalidConfigurationError(
            f"Unknown log level {resolved_level!r}. Set {LOG_LEVEL_ENV} or pass --log-level."
        )

    return CLISettings(target_points=resolved_points, log_level=resolved_level)
