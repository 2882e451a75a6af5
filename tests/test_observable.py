from __future__ import annotations

import pytest

from recollect import ChangeAction, CollectionChange, ObservableList


def _record(target: ObservableList[str]) -> list[CollectionChange[str]]:
    changes: list[CollectionChange[str]] = []
    target.subscribe(changes.append)
    return changes


def test_append_and_insert_report_additions_with_position() -> None:
    target = ObservableList(["a"])
    changes = _record(target)

    target.append("c")
    target.insert(1, "b")

    assert list(target) == ["a", "b", "c"]
    assert changes == [
        CollectionChange(action=ChangeAction.ADD, new_items=("c",), index=1),
        CollectionChange(action=ChangeAction.ADD, new_items=("b",), index=1),
    ]


def test_insert_clamps_out_of_range_positions() -> None:
    target = ObservableList(["b"])
    changes = _record(target)

    target.insert(10, "c")
    target.insert(-10, "a")

    assert list(target) == ["a", "b", "c"]
    assert [change.index for change in changes] == [1, 0]


def test_remove_and_delete_report_removals() -> None:
    target = ObservableList(["a", "b", "c"])
    changes = _record(target)

    target.remove("b")
    del target[-1]

    assert list(target) == ["a"]
    assert changes == [
        CollectionChange(action=ChangeAction.REMOVE, old_items=("b",), index=1),
        CollectionChange(action=ChangeAction.REMOVE, old_items=("c",), index=1),
    ]


def test_setitem_reports_replacement() -> None:
    target = ObservableList(["a", "b"])
    changes = _record(target)

    target[0] = "z"

    assert changes == [
        CollectionChange(
            action=ChangeAction.REPLACE, new_items=("z",), old_items=("a",), index=0
        )
    ]


def test_clear_and_slice_changes_report_reset() -> None:
    target = ObservableList(["a", "b", "c"])
    changes = _record(target)

    target[0:2] = ["x"]
    del target[:]
    target.clear()

    assert list(target) == []
    assert [change.action for change in changes] == [ChangeAction.RESET] * 3


def test_out_of_range_index_raises_without_notifying() -> None:
    target = ObservableList(["a"])
    changes = _record(target)

    with pytest.raises(IndexError):
        del target[5]
    with pytest.raises(IndexError):
        target[-2] = "x"

    assert changes == []


def test_unsubscribe_stops_notifications() -> None:
    target = ObservableList[str]()
    changes: list[CollectionChange[str]] = []
    unsubscribe = target.subscribe(changes.append)

    target.append("a")
    unsubscribe()
    unsubscribe()
    target.append("b")

    assert len(changes) == 1


def test_equality_and_slicing() -> None:
    target = ObservableList([1, 2, 3])

    assert target == [1, 2, 3]
    assert target == ObservableList([1, 2, 3])
    assert target[1:] == [2, 3]
    assert len(target) == 3
    assert repr(target) == "ObservableList([1, 2, 3])"
