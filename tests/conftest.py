from __future__ import annotations

import pytest

from recollect import ObservableList
from tests.support.items import ChangeRecorder, Row


@pytest.fixture
def rows() -> list[Row]:
    return [Row(1, "one"), Row(2, "two"), Row(3, "three")]


@pytest.fixture
def observable_rows(rows: list[Row]) -> ObservableList[Row]:
    return ObservableList(rows)


@pytest.fixture
def recorder(observable_rows: ObservableList[Row]) -> ChangeRecorder:
    return ChangeRecorder().attach(observable_rows)
