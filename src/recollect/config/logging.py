"""Logging configuration read from the environment."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Final

from .env import optional_env_var
from .errors import ConfigurationError

LOG_LEVEL_ENV_VAR: Final[str] = "RECOLLECT_LOG_LEVEL"
DEFAULT_LOG_LEVEL: Final[int] = logging.INFO


@dataclass(frozen=True, slots=True)
class LoggingConfig:
    level: int = DEFAULT_LOG_LEVEL


def parse_log_level(value: str) -> int:
    """Parse a level name (``debug``, ``WARNING``) or a numeric level."""

    candidate = value.strip()
    if candidate.isdigit():
        return int(candidate)
    level = logging.getLevelNamesMapping().get(candidate.upper())
    if level is None:
        raise ConfigurationError(f"Unknown log level for {LOG_LEVEL_ENV_VAR}: {value}")
    return level


def get_logging_config() -> LoggingConfig:
    raw = optional_env_var(LOG_LEVEL_ENV_VAR)
    if raw is None:
        return LoggingConfig()
    return LoggingConfig(level=parse_log_level(raw))
