"""Key indexing: project a sequence to ``key -> first item with that key``.

Duplicate keys are resolved here, once, before any diffing happens: the first
item seen for a key is its representative and later items with an equal key
are not representatives. Every occurrence is still recorded so removal can see
duplicates that the representative mapping hides.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator, Mapping
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Final

from recollect.comparers import ComparedKey, resolve_comparer

if TYPE_CHECKING:
    from recollect.comparers import KeyComparer


type KeyOf[X, K] = Callable[[X], K]

_MISSING: Final = object()


@dataclass(slots=True, eq=False)
class KeyIndex[K, X](Mapping[K, X]):
    """Insertion-ordered ``key -> representative`` mapping honouring a comparer.

    Lookups (``key in index``, ``index[key]``) use the index comparer, so a
    casefolding index finds ``"ABC"`` under ``"abc"``. Iteration yields each
    key as it was first produced by the key extractor.

    Keys the comparer can hash live in a dict. Keys it cannot hash are kept in
    a list and found by a linear ``comparer.equals`` scan, so plain dataclasses,
    dicts and lists index like any other key, only slower.
    """

    comparer: KeyComparer[K]
    _hashed: dict[ComparedKey[K], X] = field(default_factory=dict, repr=False)
    _unhashable: list[tuple[K, X]] = field(default_factory=list, repr=False)
    _representatives: list[tuple[K, X]] = field(default_factory=list, repr=False)
    _occurrences: list[tuple[K, X]] = field(default_factory=list, repr=False)

    def record(self, key: K, item: X) -> bool:
        """Record ``item`` under ``key``; return whether it became the representative."""

        self._occurrences.append((key, item))
        slot = self._slot(key)
        if slot is None:
            if self._scan(key) is not _MISSING:
                return False
            self._unhashable.append((key, item))
        elif slot in self._hashed:
            return False
        else:
            self._hashed[slot] = item
        self._representatives.append((key, item))
        return True

    def __getitem__(self, key: K) -> X:
        found = self._lookup(key)
        if found is _MISSING:
            raise KeyError(key)
        return found  # type: ignore[return-value]

    def __contains__(self, key: object) -> bool:
        return self._lookup(key) is not _MISSING  # type: ignore[arg-type]

    def __iter__(self) -> Iterator[K]:
        return (key for key, _ in self._representatives)

    def __len__(self) -> int:
        return len(self._representatives)

    def occurrences(self) -> Iterator[tuple[K, X]]:
        """Yield every ``(key, item)`` pair seen, duplicates included, in order."""

        return iter(self._occurrences)

    @property
    def duplicate_count(self) -> int:
        return len(self._occurrences) - len(self._representatives)

    def _lookup(self, key: K) -> X | object:
        slot = self._slot(key)
        if slot is None:
            return self._scan(key)
        return self._hashed.get(slot, _MISSING)

    def _scan(self, key: K) -> X | object:
        for known, item in self._unhashable:
            if self.comparer.equals(known, key):
                return item
        return _MISSING

    def _slot(self, key: K) -> ComparedKey[K] | None:
        try:
            return ComparedKey(key, self.comparer)
        except TypeError:
            return None


def index_by_key[X, K](
    items: Iterable[X],
    key_of: KeyOf[X, K],
    comparer: KeyComparer[K] | None = None,
) -> KeyIndex[K, X]:
    """Index ``items`` by ``key_of`` keeping the first item for each key.

    ``items`` is iterated exactly once. Errors raised by ``key_of`` propagate.
    """

    index: KeyIndex[K, X] = KeyIndex(resolve_comparer(comparer))
    for item in items:
        index.record(key_of(item), item)
    return index
