from __future__ import annotations

from datetime import date
from typing import Optional, Protocol

from PySide6.QtCore import QItemSelectionModel, QObject, Signal

from .person import Person
from .person_table import PersonTableModel, seed_persons

EMPTY_SELECTION_MESSAGE = "Please select a row to delete."
MISSING_FIRST_NAME_MESSAGE = "First name must not be empty."
MISSING_LAST_NAME_MESSAGE = "Last name must not be empty."
MISSING_BIRTH_DATE_MESSAGE = "Birth date must not be empty."


class PersonForm(Protocol):
    """Input fields the editor reads a new person from."""

    def first_name(self) -> Optional[str]:
        ...

    def last_name(self) -> Optional[str]:
        ...

    def birth_date(self) -> Optional[date]:
        ...

    def clear(self) -> None:
        ...


class PersonEditorController(QObject):
    """Applies the add / delete / restore actions to the row model."""

    log_emitted = Signal(str)
    rows_changed = Signal(int)

    def __init__(
        self,
        form: PersonForm,
        rows: PersonTableModel,
        selection: QItemSelectionModel,
        parent: Optional[QObject] = None,
    ) -> None:
        super().__init__(parent)
        self._form = form
        self._rows = rows
        self._selection = selection

    @property
    def rows(self) -> PersonTableModel:
        return self._rows

    @property
    def selection(self) -> QItemSelectionModel:
        return self._selection

    def add_person(self) -> Optional[Person]:
        first_name = self._form.first_name()
        last_name = self._form.last_name()
        birth_date = self._form.birth_date()

        if first_name is None or not first_name.strip():
            self._report(MISSING_FIRST_NAME_MESSAGE)
            return None
        if last_name is None or not last_name.strip():
            self._report(MISSING_LAST_NAME_MESSAGE)
            return None
        if birth_date is None:
            self._report(MISSING_BIRTH_DATE_MESSAGE)
            return None

        person = Person(first_name, last_name, birth_date)
        self._rows.append(person)
        self.clear_fields()
        self.rows_changed.emit(len(self._rows))
        return person

    def delete_selected_rows(self) -> int:
        if not self._selection.hasSelection():
            self._report(EMPTY_SELECTION_MESSAGE)
            return 0

        selected = sorted({index.row() for index in self._selection.selectedIndexes()})
        # Highest row first so the pending row numbers stay valid.
        for row in reversed(selected):
            self._selection.select(
                self._rows.index(row, 0),
                QItemSelectionModel.SelectionFlag.Deselect | QItemSelectionModel.SelectionFlag.Rows,
            )
            self._rows.remove(row)
        self.rows_changed.emit(len(self._rows))
        return len(selected)

    def restore_rows(self) -> None:
        self._rows.clear()
        self._rows.extend(seed_persons())
        self.rows_changed.emit(len(self._rows))

    def clear_fields(self) -> None:
        self._form.clear()

    def _report(self, message: str) -> None:
        print(message)
        self.log_emitted.emit(message)
