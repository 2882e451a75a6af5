"""Keyed reconciliation of a mutable target collection against incoming items.

Layered flow for one call:
1) index the target and the incoming items by key (first occurrence wins)
2) diff the two indices into remove-only, add-only and matched keys
3) remove, then add, then update matched items in place
"""

from __future__ import annotations

from .diff import ReconciliationDiff, diff_indices
from .engine import ReconcileResult, Reconciler, apply_diff
from .index import KeyIndex, index_by_key
from .reconcile import (
    add_or_remove,
    add_or_remove_or_update,
    add_or_remove_or_update_converted,
    add_or_remove_or_update_items,
    replace_items,
    sync_updatables,
    sync_updatables_converted,
)
from .updatable import Updatable, UpdateFn, update_from_source

__all__ = [
    "KeyIndex",
    "ReconcileResult",
    "ReconciliationDiff",
    "Reconciler",
    "Updatable",
    "UpdateFn",
    "add_or_remove",
    "add_or_remove_or_update",
    "add_or_remove_or_update_converted",
    "add_or_remove_or_update_items",
    "apply_diff",
    "diff_indices",
    "index_by_key",
    "replace_items",
    "sync_updatables",
    "sync_updatables_converted",
    "update_from_source",
]
