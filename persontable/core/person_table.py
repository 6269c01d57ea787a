from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Any, Iterable, Iterator, List, Optional, Tuple, Union

from PySide6.QtCore import QAbstractTableModel, QModelIndex, QObject, QPersistentModelIndex, Qt

from .person import Person, person_sequence


@dataclass(frozen=True)
class ColumnSpec:
    key: str
    attribute: str
    title: str


COLUMNS: Tuple[ColumnSpec, ...] = (
    ColumnSpec("id", "person_id", "Id"),
    ColumnSpec("firstName", "first_name", "First Name"),
    ColumnSpec("lastName", "last_name", "Last Name"),
    ColumnSpec("birthDate", "birth_date", "Birth Date"),
)

SEED_RECORDS: Tuple[Tuple[str, str, date], ...] = (
    ("Ashwin", "Sharan", date(2012, 10, 11)),
    ("Advik", "Sharan", date(2012, 10, 11)),
    ("Layne", "Estes", date(2011, 12, 16)),
)

IndexLike = Union[QModelIndex, QPersistentModelIndex]


class PersonTableModel(QAbstractTableModel):
    """
    Ordered, observable list of people backing the table view.

    Every mutation goes through the begin/end notifications so attached views
    and selection models update before the call returns.
    """

    def __init__(self, persons: Iterable[Person] = (), parent: Optional[QObject] = None) -> None:
        super().__init__(parent)
        self._persons: List[Person] = list(persons)

    # Qt model interface

    def rowCount(self, parent: IndexLike = QModelIndex()) -> int:  # noqa: N802
        if parent.isValid():
            return 0
        return len(self._persons)

    def columnCount(self, parent: IndexLike = QModelIndex()) -> int:  # noqa: N802
        if parent.isValid():
            return 0
        return len(COLUMNS)

    def data(self, index: IndexLike, role: int = Qt.ItemDataRole.DisplayRole) -> Any:
        if not index.isValid() or not 0 <= index.row() < len(self._persons):
            return None
        person = self._persons[index.row()]
        if role == Qt.ItemDataRole.DisplayRole:
            value = getattr(person, COLUMNS[index.column()].attribute)
            if value is None:
                return ""
            if isinstance(value, date):
                return value.isoformat()
            return str(value)
        if role == Qt.ItemDataRole.ToolTipRole:
            return f"Age category: {person.get_age_category().name}"
        return None

    def headerData(  # noqa: N802
        self,
        section: int,
        orientation: Qt.Orientation,
        role: int = Qt.ItemDataRole.DisplayRole,
    ) -> Any:
        if role != Qt.ItemDataRole.DisplayRole:
            return None
        if orientation == Qt.Orientation.Horizontal and 0 <= section < len(COLUMNS):
            return COLUMNS[section].title
        if orientation == Qt.Orientation.Vertical:
            return str(section + 1)
        return None

    def flags(self, index: IndexLike) -> Qt.ItemFlag:
        if not index.isValid():
            return Qt.ItemFlag.NoItemFlags
        # Read-only projections; edits go through the form.
        return Qt.ItemFlag.ItemIsEnabled | Qt.ItemFlag.ItemIsSelectable

    # Sequence operations

    def append(self, person: Person) -> None:
        row = len(self._persons)
        self.beginInsertRows(QModelIndex(), row, row)
        self._persons.append(person)
        self.endInsertRows()

    def extend(self, persons: Iterable[Person]) -> None:
        items = list(persons)
        if not items:
            return
        first = len(self._persons)
        self.beginInsertRows(QModelIndex(), first, first + len(items) - 1)
        self._persons.extend(items)
        self.endInsertRows()

    def remove(self, row: int) -> Person:
        if not 0 <= row < len(self._persons):
            raise IndexError(f"row {row} out of range for {len(self._persons)} rows")
        self.beginRemoveRows(QModelIndex(), row, row)
        person = self._persons.pop(row)
        self.endRemoveRows()
        return person

    def clear(self) -> None:
        self.beginResetModel()
        self._persons.clear()
        self.endResetModel()

    def person_at(self, row: int) -> Person:
        return self._persons[row]

    def persons(self) -> List[Person]:
        return list(self._persons)

    def __len__(self) -> int:
        return len(self._persons)

    def __iter__(self) -> Iterator[Person]:
        return iter(list(self._persons))

    def __getitem__(self, row: int) -> Person:
        return self._persons[row]


def seed_persons() -> List[Person]:
    """Fresh seed records, each with a newly minted id."""
    return [
        Person(first, last, birth, person_id=person_sequence.next_id())
        for first, last, birth in SEED_RECORDS
    ]


def get_person_list(parent: Optional[QObject] = None) -> PersonTableModel:
    return PersonTableModel(seed_persons(), parent)
