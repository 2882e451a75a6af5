from __future__ import annotations

import logging

import pytest

from recollect import InvalidArgumentError, ObservableList
from recollect.reconciliation import Reconciler, ReconciliationDiff, apply_diff
from tests.support.items import ChangeRecorder, Row, RowDto, copy_value, row_from_dto


def _reconciler(**overrides: object) -> Reconciler[Row, RowDto, int]:
    arguments: dict[str, object] = {
        "key_of_target": lambda row: row.id,
        "key_of_incoming": lambda dto: dto.id,
        "make_item": row_from_dto,
        "update": copy_value,
    }
    arguments.update(overrides)
    return Reconciler(**arguments)  # type: ignore[arg-type]


@pytest.mark.parametrize("missing", ["key_of_target", "key_of_incoming", "make_item"])
def test_reconciler_requires_functions(missing: str) -> None:
    with pytest.raises(InvalidArgumentError) as exc:
        _reconciler(**{missing: None})

    assert exc.value.param_name == missing


def test_plan_does_not_mutate_target(rows: list[Row]) -> None:
    before = list(rows)

    diff = _reconciler().plan(rows, [RowDto(1, "x"), RowDto(9, "new")])

    assert rows == before
    assert diff.to_remove == [before[1], before[2]]
    assert diff.to_add == [RowDto(9, "new")]


def test_reconcile_reports_counts(rows: list[Row]) -> None:
    result = _reconciler().reconcile(rows, [RowDto(1, "uno"), RowDto(4, "four")])

    assert (result.removed, result.added, result.updated) == (2, 1, 1)
    assert result.changed


def test_reconcile_logs_summary(rows: list[Row], caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.DEBUG, logger="recollect.reconciliation.engine"):
        _reconciler().reconcile(rows, [RowDto(1), RowDto(1)])

    assert "removed=2 added=0 updated=1" in caplog.text
    assert "Ignoring 1 incoming item(s)" in caplog.text


def test_apply_diff_orders_removals_before_additions_before_updates() -> None:
    calls: list[str] = []
    kept = Row(1, "kept")
    dropped = Row(2, "dropped")
    target = ObservableList([kept, dropped])
    target.subscribe(lambda change: calls.append(str(change.action)))

    def update(row: Row, dto: RowDto) -> None:
        calls.append("update")
        copy_value(row, dto)

    diff: ReconciliationDiff[Row, RowDto] = ReconciliationDiff(
        to_remove=[dropped],
        to_add=[RowDto(3, "added"), RowDto(4, "added")],
        to_update=[(kept, RowDto(1, "updated"))],
    )

    apply_diff(target, diff, make_item=row_from_dto, update=update)

    assert calls == ["remove", "add", "add", "update"]
    assert kept.value == "updated"


def test_apply_diff_skips_pairs_with_missing_side() -> None:
    calls: list[tuple[object, object]] = []
    diff: ReconciliationDiff[Row | None, RowDto | None] = ReconciliationDiff(
        to_update=[(None, RowDto(1)), (Row(2), None)],
    )

    result = apply_diff([], diff, make_item=row_from_dto, update=lambda a, b: calls.append((a, b)))

    assert calls == []
    assert result.updated == 0


def test_failing_make_item_leaves_target_untouched() -> None:
    target = ObservableList([Row(1)])
    recorder = ChangeRecorder().attach(target)

    def make_item(dto: RowDto) -> Row:
        raise RuntimeError("cannot build")

    with pytest.raises(RuntimeError, match="cannot build"):
        _reconciler(make_item=make_item).reconcile(target, [RowDto(2)])

    assert recorder.changes == []
    assert [row.id for row in target] == [1]


def test_failing_update_keeps_applied_mutations() -> None:
    first = Row(1, "a")
    second = Row(2, "b")
    target = [first, second, Row(3)]
    seen: list[int] = []

    def update(row: Row, dto: RowDto) -> None:
        if row.id == 2:
            raise RuntimeError("update failed")
        seen.append(row.id)
        copy_value(row, dto)

    with pytest.raises(RuntimeError, match="update failed"):
        _reconciler(update=update).reconcile(target, [RowDto(1, "x"), RowDto(2, "y")])

    assert target == [first, second]
    assert seen == [1]
    assert first.value == "x"
    assert second.value == "b"
