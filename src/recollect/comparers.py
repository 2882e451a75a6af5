"""Key equality strategies used when matching target and incoming items.

A comparer decides when two keys denote the same entry. The default uses
Python equality and ``hash``; ``NormalizingComparer`` compares keys after
running them through a normalizing function (for example ``str.casefold``).
Comparers must be consistent: keys that compare equal must hash equal. A key
whose ``hash`` raises ``TypeError`` (a list, a dict, an ``eq=True`` dataclass)
is still usable; key indices then match it by ``equals`` alone.
"""

from __future__ import annotations

from collections.abc import Callable, Hashable
from dataclasses import dataclass, field
from typing import Any, Protocol


class KeyComparer[K](Protocol):
    """Equality and hashing for keys of type ``K``."""

    def equals(self, left: K, right: K) -> bool: ...

    def hash(self, key: K) -> int: ...


@dataclass(frozen=True, slots=True)
class DefaultComparer:
    """Plain ``==`` and ``hash`` semantics."""

    def equals(self, left: Any, right: Any) -> bool:
        return bool(left == right)

    def hash(self, key: Any) -> int:
        return hash(key)


@dataclass(frozen=True, slots=True)
class NormalizingComparer[K]:
    """Compare keys by a normalized projection of each key."""

    normalize: Callable[[K], Hashable]

    def equals(self, left: K, right: K) -> bool:
        return bool(self.normalize(left) == self.normalize(right))

    def hash(self, key: K) -> int:
        return hash(self.normalize(key))


DEFAULT_COMPARER: KeyComparer[Any] = DefaultComparer()
CASEFOLD_COMPARER: KeyComparer[str] = NormalizingComparer(str.casefold)


def resolve_comparer[K](comparer: KeyComparer[K] | None) -> KeyComparer[K]:
    """Return ``comparer`` or the default comparer when none is given."""

    return DEFAULT_COMPARER if comparer is None else comparer


@dataclass(frozen=True, slots=True, eq=False)
class ComparedKey[K]:
    """Dictionary slot that hashes and compares ``key`` through ``comparer``.

    The hash is computed once on construction, so building a slot for a key the
    comparer cannot hash raises ``TypeError`` right away.
    """

    key: K
    comparer: KeyComparer[K]
    key_hash: int = field(init=False, repr=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "key_hash", self.comparer.hash(self.key))

    def __hash__(self) -> int:
        return self.key_hash

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ComparedKey):
            return NotImplemented
        return self.comparer.equals(self.key, other.key)
