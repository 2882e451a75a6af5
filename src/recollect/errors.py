"""Exception types raised by recollect."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Mapping


class RecollectError(Exception):
    """Base class for errors raised by the package itself."""


class InvalidArgumentError(RecollectError, ValueError):
    """Raised when a required argument is missing (``None``)."""

    def __init__(self, param_name: str) -> None:
        self.param_name = param_name
        super().__init__(f"Argument must not be None: {param_name}")


def require_arguments(arguments: Mapping[str, object]) -> None:
    """Raise ``InvalidArgumentError`` for the first argument that is ``None``.

    Checks run in mapping order, so callers list parameters in signature order.
    """

    for name, value in arguments.items():
        if value is None:
            raise InvalidArgumentError(name)
