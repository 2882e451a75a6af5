"""In-place update hooks applied to matched target items."""

from __future__ import annotations

from collections.abc import Callable
from typing import Protocol, runtime_checkable

type UpdateFn[T, S] = Callable[[T, S], None]


@runtime_checkable
class Updatable[S](Protocol):
    """Item that can absorb state from an incoming item."""

    def update(self, source: S) -> None: ...


def update_from_source[S](target: Updatable[S], source: S) -> None:
    """Update function that defers to the target's own ``update`` method."""

    target.update(source)
