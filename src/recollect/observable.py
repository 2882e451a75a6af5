"""List that reports every structural change to its subscribers.

Reconciliation never depends on this type; it is a ready-made target for
callers (and tests) that want to watch which primitive changes a call made.
"""

from __future__ import annotations

import logging
from collections.abc import MutableSequence
from dataclasses import dataclass
from enum import StrEnum
from typing import TYPE_CHECKING, overload

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable, Iterator

log = logging.getLogger(__name__)


class ChangeAction(StrEnum):
    ADD = "add"
    REMOVE = "remove"
    REPLACE = "replace"
    RESET = "reset"


@dataclass(frozen=True, slots=True, kw_only=True)
class CollectionChange[T]:
    """One notification. ``index`` is ``None`` for resets."""

    action: ChangeAction
    new_items: tuple[T, ...] = ()
    old_items: tuple[T, ...] = ()
    index: int | None = None


type ChangeListener[T] = Callable[[CollectionChange[T]], None]


class ObservableList[T](MutableSequence[T]):
    """``MutableSequence`` emitting ``CollectionChange`` events synchronously.

    Listeners run in subscription order after the change is applied. Slice
    assignment and slice deletion are reported as a single reset.
    """

    def __init__(self, items: Iterable[T] = ()) -> None:
        self._items: list[T] = list(items)
        self._listeners: list[ChangeListener[T]] = []

    def subscribe(self, listener: ChangeListener[T]) -> Callable[[], None]:
        """Register ``listener`` and return a callable that unsubscribes it."""

        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    @overload
    def __getitem__(self, index: int) -> T: ...

    @overload
    def __getitem__(self, index: slice) -> list[T]: ...

    def __getitem__(self, index: int | slice) -> T | list[T]:
        return self._items[index]

    @overload
    def __setitem__(self, index: int, value: T) -> None: ...

    @overload
    def __setitem__(self, index: slice, value: Iterable[T]) -> None: ...

    def __setitem__(self, index: int | slice, value: T | Iterable[T]) -> None:
        if isinstance(index, slice):
            self._items[index] = value  # type: ignore[assignment]
            self._notify(CollectionChange(action=ChangeAction.RESET))
            return
        position = self._position(index)
        old = self._items[position]
        self._items[position] = value  # type: ignore[assignment]
        self._notify(
            CollectionChange(
                action=ChangeAction.REPLACE,
                new_items=(value,),  # type: ignore[arg-type]
                old_items=(old,),
                index=position,
            )
        )

    def __delitem__(self, index: int | slice) -> None:
        if isinstance(index, slice):
            del self._items[index]
            self._notify(CollectionChange(action=ChangeAction.RESET))
            return
        position = self._position(index)
        old = self._items.pop(position)
        self._notify(CollectionChange(action=ChangeAction.REMOVE, old_items=(old,), index=position))

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[T]:
        return iter(self._items)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, ObservableList):
            return self._items == other._items
        if isinstance(other, list):
            return self._items == other
        return NotImplemented

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._items!r})"

    def insert(self, index: int, value: T) -> None:
        position = min(self._position(index, clamp=True), len(self._items))
        self._items.insert(position, value)
        self._notify(CollectionChange(action=ChangeAction.ADD, new_items=(value,), index=position))

    def clear(self) -> None:
        self._items.clear()
        self._notify(CollectionChange(action=ChangeAction.RESET))

    def _position(self, index: int, *, clamp: bool = False) -> int:
        size = len(self._items)
        position = index + size if index < 0 else index
        if clamp:
            return max(position, 0)
        if not 0 <= position < size:
            raise IndexError("list index out of range")
        return position

    def _notify(self, change: CollectionChange[T]) -> None:
        log.debug("Collection change: %s at %s", change.action, change.index)
        for listener in tuple(self._listeners):
            listener(change)
