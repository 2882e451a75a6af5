"""Configuration helpers."""

from __future__ import annotations

from .env import optional_env_var
from .errors import ConfigurationError
from .logging import LOG_LEVEL_ENV_VAR, LoggingConfig, get_logging_config, parse_log_level
from .options import DEFAULT_OPTIONS, ReconcileOptions

__all__ = [
    "DEFAULT_OPTIONS",
    "LOG_LEVEL_ENV_VAR",
    "ConfigurationError",
    "LoggingConfig",
    "ReconcileOptions",
    "get_logging_config",
    "optional_env_var",
    "parse_log_level",
]
