"""Public reconciling operations over mutable collections.

``add_or_remove_or_update`` is the full keyed pipeline. ``add_or_remove`` keys
each item by itself and never updates. ``replace_items`` skips diffing
entirely and rebuilds the collection.
"""

from __future__ import annotations

import logging
from operator import itemgetter
from typing import TYPE_CHECKING, Any

from recollect.config import DEFAULT_OPTIONS
from recollect.errors import require_arguments
from recollect.primitives import add_item, clear_items

from .diff import diff_indices
from .engine import ReconcileResult, Reconciler, apply_diff
from .index import index_by_key
from .updatable import update_from_source

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable

    from recollect.comparers import KeyComparer
    from recollect.config import ReconcileOptions
    from recollect.primitives import TargetCollection

    from .index import KeyOf
    from .updatable import Updatable, UpdateFn

log = logging.getLogger(__name__)


def _identity[T](item: T) -> T:
    return item


def add_or_remove_or_update[T, S, K](
    collection: TargetCollection[T],
    incoming: Iterable[S],
    key_of_target: KeyOf[T, K],
    key_of_incoming: KeyOf[S, K],
    make_item: Callable[[S], T],
    update: UpdateFn[T, S] | None = None,
    comparer: KeyComparer[K] | None = None,
    *,
    options: ReconcileOptions | None = None,
) -> ReconcileResult:
    """Make ``collection`` hold exactly one item per distinct incoming key.

    Target items whose key is missing from ``incoming`` are removed, incoming
    items with a new key are converted with ``make_item`` and added, and items
    matched by key stay in place and are passed to ``update`` with the first
    incoming item carrying their key. Without ``update`` matched items are left
    as they are.
    """

    require_arguments(
        {
            "collection": collection,
            "incoming": incoming,
            "key_of_target": key_of_target,
            "key_of_incoming": key_of_incoming,
            "make_item": make_item,
        }
    )
    resolved = (options or DEFAULT_OPTIONS).resolve(comparer=comparer, update=update)
    reconciler: Reconciler[T, S, K] = Reconciler(
        key_of_target=key_of_target,
        key_of_incoming=key_of_incoming,
        make_item=make_item,
        update=resolved.update,
        comparer=resolved.comparer,
    )
    return reconciler.reconcile(collection, incoming)


def sync_updatables[T: Updatable[Any], S, K](
    collection: TargetCollection[T],
    incoming: Iterable[S],
    key_of_target: KeyOf[T, K],
    key_of_incoming: KeyOf[S, K],
    make_item: Callable[[S], T],
    comparer: KeyComparer[K] | None = None,
    *,
    options: ReconcileOptions | None = None,
) -> ReconcileResult:
    """``add_or_remove_or_update`` that updates matches through ``item.update(source)``."""

    return add_or_remove_or_update(
        collection,
        incoming,
        key_of_target,
        key_of_incoming,
        make_item,
        update_from_source,
        comparer,
        options=options,
    )


def add_or_remove_or_update_converted[T, S](
    collection: TargetCollection[T],
    incoming: Iterable[S],
    make_item: Callable[[S], T],
    update: UpdateFn[T, S],
    comparer: KeyComparer[T] | None = None,
    *,
    options: ReconcileOptions | None = None,
) -> ReconcileResult:
    """Reconcile by converted-item equality, updating matches and new items alike.

    Each incoming item is converted once; the converted item is its key. A new
    item is added only after ``update(new_item, source)`` ran on it, and an
    existing equal item receives ``update(existing, source)`` in place.
    """

    require_arguments(
        {
            "collection": collection,
            "incoming": incoming,
            "make_item": make_item,
            "update": update,
        }
    )
    resolved = (options or DEFAULT_OPTIONS).resolve(comparer=comparer)

    def create(pair: tuple[T, S]) -> T:
        item, source = pair
        update(item, source)
        return item

    def absorb(target: T, pair: tuple[T, S]) -> None:
        if pair[1] is not None:
            update(target, pair[1])

    converted = [(make_item(source), source) for source in incoming]
    current_index = index_by_key(collection, _identity, resolved.comparer)
    incoming_index = index_by_key(converted, itemgetter(0), resolved.comparer)
    diff = diff_indices(current_index, incoming_index)
    return apply_diff(collection, diff, make_item=create, update=absorb)


def sync_updatables_converted[T: Updatable[Any], S](
    collection: TargetCollection[T],
    incoming: Iterable[S],
    make_item: Callable[[S], T],
    comparer: KeyComparer[T] | None = None,
    *,
    options: ReconcileOptions | None = None,
) -> ReconcileResult:
    """``add_or_remove_or_update_converted`` updating through ``item.update(source)``."""

    return add_or_remove_or_update_converted(
        collection, incoming, make_item, update_from_source, comparer, options=options
    )


def add_or_remove_or_update_items[T](
    collection: TargetCollection[T],
    incoming: Iterable[T],
    update: UpdateFn[T, T],
    comparer: KeyComparer[T] | None = None,
    *,
    options: ReconcileOptions | None = None,
) -> ReconcileResult:
    """Reconcile same-typed items by equality, updating matches from their equal twin.

    Incoming items are their own keys and are added as they are, after
    ``update(item, item)`` ran on them, as ``add_or_remove_or_update_converted``
    does for every new item.
    """

    require_arguments({"collection": collection, "incoming": incoming, "update": update})
    return add_or_remove_or_update_converted(
        collection, incoming, _identity, update, comparer, options=options
    )


def add_or_remove[T, S](
    collection: TargetCollection[T],
    incoming: Iterable[S],
    make_item: Callable[[S], T] | None = None,
    comparer: KeyComparer[T] | None = None,
    *,
    options: ReconcileOptions | None = None,
) -> ReconcileResult:
    """Reconcile by item equality without any update step.

    Incoming items are converted with ``make_item`` (identity by default) and
    the converted item is its own key. Equal items already in ``collection``
    stay; converted duplicates are added once.
    """

    require_arguments({"collection": collection, "incoming": incoming})
    resolved = (options or DEFAULT_OPTIONS).resolve(comparer=comparer)
    convert = _identity if make_item is None else make_item

    current_index = index_by_key(collection, _identity, resolved.comparer)
    incoming_index = index_by_key(
        (convert(source) for source in incoming), _identity, resolved.comparer
    )
    diff = diff_indices(current_index, incoming_index)
    return apply_diff(collection, diff, make_item=_identity)


def replace_items[T, S](
    collection: TargetCollection[T],
    incoming: Iterable[S],
    make_item: Callable[[S], T] | None = None,
) -> ReconcileResult:
    """Clear ``collection`` and append ``make_item(s)`` for every incoming item.

    ``incoming`` is materialised before clearing, so it may be derived from
    ``collection`` itself. No identity is preserved.
    """

    require_arguments({"collection": collection, "incoming": incoming})
    convert = _identity if make_item is None else make_item

    sources = tuple(incoming)
    result = ReconcileResult(removed=len(collection))
    clear_items(collection)
    for source in sources:
        add_item(collection, convert(source))
        result.added += 1
    log.debug("Replaced %d item(s) with %d item(s)", result.removed, result.added)
    return result
