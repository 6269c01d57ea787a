from __future__ import annotations

import threading
from dataclasses import dataclass
from datetime import date
from enum import Enum
from typing import List, Optional

FIRST_NAME_ERROR = "First name must contain minimum one character."
LAST_NAME_ERROR = "Last name must contain minimum one character."
BIRTH_DATE_ERROR = "Birth date must not be in future."


class AgeCategory(Enum):
    BABY = "BABY"
    CHILD = "CHILD"
    TEEN = "TEEN"
    ADULT = "ADULT"
    SENIOR = "SENIOR"
    UNKNOWN = "UNKNOWN"


class PersonSequence:
    """Process-wide id source. Ids start at 1; 0 means "unassigned"."""

    def __init__(self, start: int = 0) -> None:
        self._value = start
        self._lock = threading.Lock()

    def next_id(self) -> int:
        with self._lock:
            self._value += 1
            return self._value

    @property
    def current(self) -> int:
        with self._lock:
            return self._value


person_sequence = PersonSequence()


def _blank(value: Optional[str]) -> bool:
    return value is None or not value.strip()


@dataclass
class Person:
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    birth_date: Optional[date] = None
    person_id: int = 0

    def __post_init__(self) -> None:
        if self.person_id < 0:
            raise ValueError(f"person_id must be non-negative, got {self.person_id}")

    @staticmethod
    def is_valid_birth_date(
        bdate: Optional[date],
        error_list: Optional[List[str]] = None,
        today: Optional[date] = None,
    ) -> bool:
        # A missing date is fine here; presence is checked by the editor.
        if bdate is None:
            return True
        if bdate > (today or date.today()):
            if error_list is not None:
                error_list.append(BIRTH_DATE_ERROR)
            return False
        return True

    def is_valid_person(self, error_list: List[str], today: Optional[date] = None) -> bool:
        """Run every field check, appending one message per failure."""
        valid = True
        if _blank(self.first_name):
            error_list.append(FIRST_NAME_ERROR)
            valid = False
        if _blank(self.last_name):
            error_list.append(LAST_NAME_ERROR)
            valid = False
        if not self.is_valid_birth_date(self.birth_date, error_list, today=today):
            valid = False
        return valid

    def age(self, today: Optional[date] = None) -> Optional[int]:
        """Completed years between the birth date and today, negative for future dates."""
        if self.birth_date is None:
            return None
        today = today or date.today()
        birth = self.birth_date
        return today.year - birth.year - ((today.month, today.day) < (birth.month, birth.day))

    def get_age_category(self, today: Optional[date] = None) -> AgeCategory:
        years = self.age(today)
        if years is None:
            return AgeCategory.UNKNOWN
        # 19 and 50 are inclusive upper bounds, 2 and 13 are exclusive.
        if 0 <= years < 2:
            return AgeCategory.BABY
        if 2 <= years < 13:
            return AgeCategory.CHILD
        if 13 <= years <= 19:
            return AgeCategory.TEEN
        if 19 < years <= 50:
            return AgeCategory.ADULT
        if years > 50:
            return AgeCategory.SENIOR
        return AgeCategory.UNKNOWN

    def save(self, error_list: List[str], today: Optional[date] = None) -> bool:
        """Validate and, when valid, print the record. Nothing is persisted."""
        if not self.is_valid_person(error_list, today=today):
            return False
        print(self)
        return True

    def __str__(self) -> str:
        return (
            f"[personId={self.person_id}, firstName={_text(self.first_name)}, "
            f"lastName={_text(self.last_name)}, birthDate={_text(self.birth_date)}]"
        )


def _text(value) -> str:
    if value is None:
        return "null"
    if isinstance(value, date):
        return value.isoformat()
    return str(value)
