"""Explicit defaults for optional reconciliation parameters."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Final

from recollect.comparers import DEFAULT_COMPARER

if TYPE_CHECKING:
    from recollect.comparers import KeyComparer
    from recollect.reconciliation.updatable import UpdateFn


@dataclass(frozen=True, slots=True, kw_only=True)
class ReconcileOptions:
    """Optional knobs shared by the reconciling operations.

    ``comparer`` defaults to plain equality and ``update`` to no update at all,
    which leaves matched items untouched.
    """

    comparer: KeyComparer[Any] = DEFAULT_COMPARER
    update: UpdateFn[Any, Any] | None = None

    def resolve(
        self,
        *,
        comparer: KeyComparer[Any] | None = None,
        update: UpdateFn[Any, Any] | None = None,
    ) -> ReconcileOptions:
        """Return options where explicitly passed values override these ones."""

        return ReconcileOptions(
            comparer=self.comparer if comparer is None else comparer,
            update=self.update if update is None else update,
        )


DEFAULT_OPTIONS: Final[ReconcileOptions] = ReconcileOptions()
