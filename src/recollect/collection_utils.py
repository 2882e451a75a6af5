"""Bulk helpers over target collections and plain iterables."""

from __future__ import annotations

from functools import cmp_to_key
from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

from recollect.errors import require_arguments
from recollect.primitives import add_item, remove_exact, remove_item
from recollect.reconciliation import replace_items

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable

    from recollect.primitives import TargetCollection


@runtime_checkable
class SupportsClose(Protocol):
    def close(self) -> None: ...


def sort[T](
    collection: TargetCollection[T],
    comparer: Callable[[T, T], int] | None = None,
    *,
    key: Callable[[T], Any] | None = None,
    reverse: bool = False,
) -> None:
    """Reorder ``collection`` in place.

    ``comparer`` is a three-way comparison (negative, zero, positive) and
    ``key`` a sort key as for ``sorted``; without either, natural ordering is
    used. The collection is rebuilt through ``replace_items`` so a notifying
    collection reports one reset followed by the additions.
    """

    require_arguments({"collection": collection})
    if comparer is not None and key is not None:
        raise TypeError("Pass either comparer or key, not both")
    sort_key = cmp_to_key(comparer) if comparer is not None else key
    ordered = sorted(collection, key=sort_key, reverse=reverse)
    replace_items(collection, ordered)


def add_range[T](collection: TargetCollection[T], items: Iterable[T]) -> None:
    require_arguments({"collection": collection, "items": items})
    snapshot = tuple(items) if items is collection else items
    for item in snapshot:
        add_item(collection, item)


def remove_range[T](collection: TargetCollection[T], items: Iterable[T]) -> None:
    """Remove one equal element per entry of ``items``; absent entries are skipped."""

    require_arguments({"collection": collection, "items": items})
    for item in tuple(items):
        remove_item(collection, item)


def remove_if[T](collection: TargetCollection[T], predicate: Callable[[T], bool]) -> int:
    """Remove every item matching ``predicate`` and return how many went."""

    require_arguments({"collection": collection, "predicate": predicate})
    matches = [item for item in collection if predicate(item)]
    return sum(1 for item in matches if remove_exact(collection, item))


def for_each[T](items: Iterable[T], action: Callable[[T], object]) -> None:
    require_arguments({"items": items, "action": action})
    for item in items:
        action(item)


def dispose_all(items: Iterable[object]) -> None:
    """Close every closable item, then ``items`` itself when it is closable."""

    require_arguments({"items": items})
    for item in items:
        if isinstance(item, SupportsClose):
            item.close()
    if isinstance(items, SupportsClose):
        items.close()
