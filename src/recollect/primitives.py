"""Mutation primitives over the supported target collection shapes.

Targets are either mutable sequences (``list``, ``ObservableList``, ORM
relationship lists), mutable sets, or any object with ``add``/``remove``/
``clear`` and membership tests. Every change made by the reconciler goes
through these helpers so that the target's own notification hooks fire.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator, MutableSequence, MutableSet
from typing import Protocol


class SupportsAddRemove[T](Protocol):
    """Minimal bag-like collection contract."""

    def add(self, item: T) -> None: ...

    def remove(self, item: T) -> None: ...

    def clear(self) -> None: ...

    def __contains__(self, item: object) -> bool: ...

    def __iter__(self) -> Iterator[T]: ...

    def __len__(self) -> int: ...


type TargetCollection[T] = MutableSequence[T] | MutableSet[T] | SupportsAddRemove[T]


def add_item[T](collection: TargetCollection[T], item: T) -> None:
    if isinstance(collection, MutableSequence):
        collection.append(item)
    else:
        collection.add(item)


def remove_item[T](collection: TargetCollection[T], item: T) -> bool:
    """Remove the first element equal to ``item``; return whether one was found."""

    if item not in collection:
        return False
    collection.remove(item)
    return True


def remove_exact[T](collection: TargetCollection[T], item: T) -> bool:
    """Remove ``item`` itself rather than the first element equal to it.

    Sequences may hold distinct objects that compare equal; deleting by position
    of the identical object keeps the others in place. Sets have no positions, so
    they fall back to equality.
    """

    if isinstance(collection, MutableSequence):
        for position, candidate in enumerate(collection):
            if candidate is item:
                del collection[position]
                return True
        return False
    return remove_item(collection, item)


def clear_items[T](collection: TargetCollection[T]) -> None:
    collection.clear()


def add_all[T](collection: TargetCollection[T], items: Iterable[T]) -> int:
    count = 0
    for item in items:
        add_item(collection, item)
        count += 1
    return count


def remove_all_exact[T](collection: TargetCollection[T], items: Iterable[T]) -> int:
    return sum(1 for item in items if remove_exact(collection, item))
