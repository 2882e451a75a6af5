from __future__ import annotations

import logging
import os

import pytest

from recollect import CASEFOLD_COMPARER, DEFAULT_COMPARER
from recollect.config import (
    DEFAULT_OPTIONS,
    LOG_LEVEL_ENV_VAR,
    ConfigurationError,
    ReconcileOptions,
    get_logging_config,
    optional_env_var,
    parse_log_level,
)
from recollect.errors import RecollectError


def test_optional_env_var_strips_surrounding_whitespace(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("TEMP_VAR", "  value ")

    assert optional_env_var("TEMP_VAR") == "value"


def test_optional_env_var_treats_blank_as_unset(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("TEMP_VAR", "  ")

    assert optional_env_var("TEMP_VAR") is None
    assert os.getenv("TEMP_VAR") == "  "


def test_logging_config_defaults_to_info(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv(LOG_LEVEL_ENV_VAR, raising=False)

    assert get_logging_config().level == logging.INFO


@pytest.mark.parametrize(
    ("raw", "expected"),
    [("debug", logging.DEBUG), (" WARNING ", logging.WARNING), ("15", 15)],
)
def test_logging_config_reads_level_from_environment(
    monkeypatch: pytest.MonkeyPatch, raw: str, expected: int
) -> None:
    monkeypatch.setenv(LOG_LEVEL_ENV_VAR, raw)

    assert get_logging_config().level == expected


def test_parse_log_level_rejects_unknown_names() -> None:
    with pytest.raises(ConfigurationError, match="Unknown log level") as exc:
        parse_log_level("chatty")

    assert isinstance(exc.value, RecollectError)


def test_default_options_use_plain_equality_and_no_update() -> None:
    assert DEFAULT_OPTIONS.comparer is DEFAULT_COMPARER
    assert DEFAULT_OPTIONS.update is None


def test_options_resolve_prefers_explicit_values() -> None:
    def update(target: object, source: object) -> None:
        return None

    base = ReconcileOptions(update=update)

    resolved = base.resolve(comparer=CASEFOLD_COMPARER)

    assert resolved.comparer is CASEFOLD_COMPARER
    assert resolved.update is update
    assert base.resolve() == base
