"""Configuration error definitions."""

from __future__ import annotations

from recollect.errors import RecollectError


class ConfigurationError(RecollectError, RuntimeError):
    """Raised when configuration values are invalid."""
