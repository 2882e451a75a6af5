"""Reconciler: index both sides, diff them, then mutate the target.

Mutation order is fixed: every removal, then every addition, then every
in-place update. Items matched on both sides never reach the add/remove
primitives, so a notifying target reports no churn for them.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from recollect.comparers import resolve_comparer
from recollect.errors import require_arguments
from recollect.primitives import add_item, remove_all_exact

from .diff import diff_indices
from .index import index_by_key

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable

    from recollect.comparers import KeyComparer
    from recollect.primitives import TargetCollection

    from .diff import ReconciliationDiff
    from .index import KeyOf
    from .updatable import UpdateFn

log = logging.getLogger(__name__)


@dataclass(slots=True)
class ReconcileResult:
    """Counts of primitive calls made by one reconciliation."""

    removed: int = 0
    added: int = 0
    updated: int = 0

    @property
    def changed(self) -> bool:
        return bool(self.removed or self.added or self.updated)


@dataclass(frozen=True, slots=True, kw_only=True)
class Reconciler[T, S, K]:
    """Reusable keyed reconciliation between a target and incoming items."""

    key_of_target: KeyOf[T, K]
    key_of_incoming: KeyOf[S, K]
    make_item: Callable[[S], T]
    update: UpdateFn[T, S] | None = None
    comparer: KeyComparer[K] | None = None

    def __post_init__(self) -> None:
        require_arguments(
            {
                "key_of_target": self.key_of_target,
                "key_of_incoming": self.key_of_incoming,
                "make_item": self.make_item,
            }
        )

    def plan(
        self,
        collection: TargetCollection[T],
        incoming: Iterable[S],
    ) -> ReconciliationDiff[T, S]:
        """Compute the diff without touching ``collection``."""

        require_arguments({"collection": collection, "incoming": incoming})
        comparer = resolve_comparer(self.comparer)
        current_index = index_by_key(collection, self.key_of_target, comparer)
        incoming_index = index_by_key(incoming, self.key_of_incoming, comparer)
        if incoming_index.duplicate_count:
            log.debug(
                "Ignoring %d incoming item(s) with an already seen key",
                incoming_index.duplicate_count,
            )
        return diff_indices(current_index, incoming_index)

    def reconcile(
        self,
        collection: TargetCollection[T],
        incoming: Iterable[S],
    ) -> ReconcileResult:
        diff = self.plan(collection, incoming)
        result = apply_diff(collection, diff, make_item=self.make_item, update=self.update)
        log.debug(
            "Reconciled %s: removed=%d added=%d updated=%d",
            type(collection).__name__,
            result.removed,
            result.added,
            result.updated,
        )
        return result


def apply_diff[T, S](
    collection: TargetCollection[T],
    diff: ReconciliationDiff[T, S],
    *,
    make_item: Callable[[S], T],
    update: UpdateFn[T, S] | None = None,
) -> ReconcileResult:
    """Apply ``diff`` to ``collection``: remove all, add all, then update each pair.

    New items are built before the first mutation, so a failing ``make_item``
    leaves ``collection`` untouched. A failing ``update`` propagates with earlier
    mutations already applied.
    """

    new_items = [make_item(source) for source in diff.to_add]

    result = ReconcileResult()
    result.removed = remove_all_exact(collection, diff.to_remove)
    for item in new_items:
        add_item(collection, item)
        result.added += 1

    if update is None:
        return result
    for target_item, incoming_item in diff.to_update:
        if target_item is None or incoming_item is None:
            continue
        update(target_item, incoming_item)
        result.updated += 1
    return result
