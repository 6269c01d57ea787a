# Shared pytest fixtures
from __future__ import annotations

import os
from datetime import date
from typing import Optional

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

import pytest
from PySide6.QtCore import QItemSelectionModel
from PySide6.QtWidgets import QApplication

from persontable.core.person import Person
from persontable.core.person_table import PersonTableModel


@pytest.fixture(scope="session", autouse=True)
def qapp() -> QApplication:
    app = QApplication.instance() or QApplication([])
    yield app


class FakeForm:
    """Plain stand-in for the form widget."""

    def __init__(
        self,
        first_name: Optional[str] = None,
        last_name: Optional[str] = None,
        birth_date: Optional[date] = None,
    ) -> None:
        self.values = (first_name, last_name, birth_date)

    def first_name(self) -> Optional[str]:
        return self.values[0]

    def last_name(self) -> Optional[str]:
        return self.values[1]

    def birth_date(self) -> Optional[date]:
        return self.values[2]

    def clear(self) -> None:
        self.values = (None, None, None)


@pytest.fixture()
def fake_form() -> FakeForm:
    return FakeForm()


@pytest.fixture()
def abcd_rows() -> PersonTableModel:
    return PersonTableModel(
        [
            Person("a", "A", date(2000, 1, 1)),
            Person("b", "B", date(2000, 1, 2)),
            Person("c", "C", date(2000, 1, 3)),
            Person("d", "D", date(2000, 1, 4)),
        ]
    )


@pytest.fixture()
def select_rows():
    def _select(selection: QItemSelectionModel, *rows: int) -> None:
        model = selection.model()
        for row in rows:
            selection.select(
                model.index(row, 0),
                QItemSelectionModel.SelectionFlag.Select | QItemSelectionModel.SelectionFlag.Rows,
            )

    return _select
