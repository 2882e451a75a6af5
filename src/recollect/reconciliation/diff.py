"""Partition two key indices into remove-only, add-only and common keys.

The diff is pure: it does not convert incoming items and does not touch the
target collection.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .index import KeyIndex


@dataclass(slots=True, kw_only=True)
class ReconciliationDiff[T, S]:
    """Work needed to make a target match an incoming sequence.

    ``to_remove`` holds target items in target order, ``to_add`` holds
    incoming items (not yet converted) in incoming order and ``to_update`` holds
    ``(target_item, incoming_item)`` pairs for keys present on both sides.
    """

    to_remove: list[T] = field(default_factory=list)
    to_add: list[S] = field(default_factory=list)
    to_update: list[tuple[T, S]] = field(default_factory=list)

    @property
    def is_empty(self) -> bool:
        return not (self.to_remove or self.to_add or self.to_update)


def diff_indices[K, T, S](
    current: KeyIndex[K, T],
    incoming: KeyIndex[K, S],
) -> ReconciliationDiff[T, S]:
    """Compare ``current`` (target side) against ``incoming``.

    Every target occurrence whose key is missing from ``incoming`` is removed,
    duplicates included. Adds and updates use the first incoming item per key,
    and updates pair it with the first target item for that key.
    """

    if current.comparer != incoming.comparer:
        raise ValueError("Key indices must share one comparer")

    result: ReconciliationDiff[T, S] = ReconciliationDiff()
    for key, item in current.occurrences():
        if key not in incoming:
            result.to_remove.append(item)
    for key, incoming_item in incoming.items():
        if key in current:
            result.to_update.append((current[key], incoming_item))
        else:
            result.to_add.append(incoming_item)
    return result
