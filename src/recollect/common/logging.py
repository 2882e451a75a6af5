"""Shared logging helpers for recollect."""

from __future__ import annotations

import logging

from recollect.config import get_logging_config


def configure_logging(*, level: int | None = None, force: bool = False) -> None:
    """Initialise the root logger once with sensible defaults.

    Parameters mirror ``logging.basicConfig`` with a simplified contract: the level
    comes from ``RECOLLECT_LOG_LEVEL`` (INFO when unset) unless passed explicitly.
    Pass ``force=True`` to reconfigure during tests or specialised entry points.
    """

    if level is None:
        level = get_logging_config().level
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
        datefmt="%H:%M:%S",
        force=force,
    )
