from __future__ import annotations

from importlib import metadata

from .collection_utils import add_range, dispose_all, for_each, remove_if, remove_range, sort
from .comparers import (
    CASEFOLD_COMPARER,
    DEFAULT_COMPARER,
    DefaultComparer,
    KeyComparer,
    NormalizingComparer,
)
from .config import ReconcileOptions
from .errors import InvalidArgumentError, RecollectError
from .observable import ChangeAction, CollectionChange, ObservableList
from .reconciliation import (
    ReconcileResult,
    Reconciler,
    Updatable,
    add_or_remove,
    add_or_remove_or_update,
    add_or_remove_or_update_converted,
    add_or_remove_or_update_items,
    replace_items,
    sync_updatables,
    sync_updatables_converted,
    update_from_source,
)

try:
    __version__ = metadata.version("recollect")
except metadata.PackageNotFoundError:
    __version__ = "0.0.0+local"

__all__ = [
    "CASEFOLD_COMPARER",
    "DEFAULT_COMPARER",
    "ChangeAction",
    "CollectionChange",
    "DefaultComparer",
    "InvalidArgumentError",
    "KeyComparer",
    "NormalizingComparer",
    "ObservableList",
    "ReconcileOptions",
    "ReconcileResult",
    "Reconciler",
    "RecollectError",
    "Updatable",
    "add_or_remove",
    "add_or_remove_or_update",
    "add_or_remove_or_update_converted",
    "add_or_remove_or_update_items",
    "add_range",
    "dispose_all",
    "for_each",
    "remove_if",
    "remove_range",
    "replace_items",
    "sort",
    "sync_updatables",
    "sync_updatables_converted",
    "update_from_source",
]
