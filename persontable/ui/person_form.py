from __future__ import annotations

from datetime import date
from typing import Optional

from PySide6.QtCore import QDate, Signal
from PySide6.QtWidgets import QDateEdit, QGridLayout, QLabel, QLineEdit, QPushButton, QWidget

# Shown as a blank field; selecting it means "no date".
UNSET_DATE = QDate(1752, 9, 14)


class OptionalDateEdit(QDateEdit):
    """Date editor with a calendar popup that can also hold no date."""

    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.setCalendarPopup(True)
        self.setDisplayFormat("yyyy-MM-dd")
        self.setMinimumDate(UNSET_DATE)
        self.setMaximumDate(QDate.currentDate())
        self.setSpecialValueText(" ")
        self.setDate(UNSET_DATE)

    def optional_date(self) -> Optional[date]:
        current = self.date()
        if current == self.minimumDate():
            return None
        return current.toPython()

    def set_optional_date(self, value: Optional[date]) -> None:
        if value is None:
            self.setDate(self.minimumDate())
        else:
            self.setDate(QDate(value.year, value.month, value.day))


class PersonFormWidget(QWidget):
    """Entry form for a new person: first name, last name, birth date."""

    add_requested = Signal()

    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.first_name_field = QLineEdit()
        self.last_name_field = QLineEdit()
        self.birth_date_field = OptionalDateEdit()
        self.add_button = QPushButton("Add")

        layout = QGridLayout(self)
        layout.setHorizontalSpacing(10)
        layout.setVerticalSpacing(5)
        layout.addWidget(QLabel("First Name:"), 0, 0)
        layout.addWidget(self.first_name_field, 0, 1)
        layout.addWidget(QLabel("Last Name:"), 1, 0)
        layout.addWidget(self.last_name_field, 1, 1)
        layout.addWidget(QLabel("Birth Date:"), 2, 0)
        layout.addWidget(self.birth_date_field, 2, 1)
        layout.addWidget(self.add_button, 0, 2)

        self.add_button.clicked.connect(lambda: self.add_requested.emit())
        self.first_name_field.returnPressed.connect(lambda: self.add_requested.emit())
        self.last_name_field.returnPressed.connect(lambda: self.add_requested.emit())

    def first_name(self) -> Optional[str]:
        return self.first_name_field.text() or None

    def last_name(self) -> Optional[str]:
        return self.last_name_field.text() or None

    def birth_date(self) -> Optional[date]:
        return self.birth_date_field.optional_date()

    def set_values(self, first_name: str | None, last_name: str | None, birth_date: date | None) -> None:
        self.first_name_field.setText(first_name or "")
        self.last_name_field.setText(last_name or "")
        self.birth_date_field.set_optional_date(birth_date)

    def clear(self) -> None:
        self.set_values(None, None, None)
