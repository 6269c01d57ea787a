from __future__ import annotations

from datetime import date, timedelta

import pytest

from persontable.core.person import (
    BIRTH_DATE_ERROR,
    FIRST_NAME_ERROR,
    LAST_NAME_ERROR,
    AgeCategory,
    Person,
    PersonSequence,
)

TODAY = date(2024, 6, 15)


def years_ago(years: int) -> date:
    return TODAY.replace(year=TODAY.year - years)


def test_person_defaults():
    p = Person()
    assert p.person_id == 0
    assert p.first_name is None
    assert p.last_name is None
    assert p.birth_date is None


def test_negative_person_id_rejected():
    with pytest.raises(ValueError):
        Person("Ada", "Lovelace", person_id=-1)


def test_str_with_all_fields():
    p = Person("Ada", "Lovelace", date(1815, 12, 10), person_id=7)
    assert str(p) == "[personId=7, firstName=Ada, lastName=Lovelace, birthDate=1815-12-10]"


def test_str_with_absent_values():
    assert str(Person()) == "[personId=0, firstName=null, lastName=null, birthDate=null]"


def test_absent_birth_date_is_unknown():
    assert Person("Ada", "Lovelace").get_age_category(today=TODAY) is AgeCategory.UNKNOWN
    assert Person("Ada", "Lovelace").get_age_category() is AgeCategory.UNKNOWN


@pytest.mark.parametrize(
    "age, expected",
    [
        (0, AgeCategory.BABY),
        (1, AgeCategory.BABY),
        (2, AgeCategory.CHILD),
        (12, AgeCategory.CHILD),
        (13, AgeCategory.TEEN),
        (19, AgeCategory.TEEN),
        (20, AgeCategory.ADULT),
        (50, AgeCategory.ADULT),
        (51, AgeCategory.SENIOR),
    ],
)
def test_age_category_boundaries(age, expected):
    p = Person("X", "Y", years_ago(age))
    assert p.age(today=TODAY) == age
    assert p.get_age_category(today=TODAY) is expected


def test_age_counts_completed_anniversaries_only():
    # Birthday tomorrow: the 13th anniversary has not happened yet.
    birth = years_ago(13) + timedelta(days=1)
    p = Person("X", "Y", birth)
    assert p.age(today=TODAY) == 12
    assert p.get_age_category(today=TODAY) is AgeCategory.CHILD


def test_birth_date_tomorrow_is_unknown():
    p = Person("X", "Y", TODAY + timedelta(days=1))
    assert p.age(today=TODAY) == -1
    assert p.get_age_category(today=TODAY) is AgeCategory.UNKNOWN


def test_age_category_is_recomputed_each_call():
    p = Person("X", "Y", years_ago(1))
    assert p.get_age_category(today=TODAY) is AgeCategory.BABY
    p.birth_date = years_ago(60)
    assert p.get_age_category(today=TODAY) is AgeCategory.SENIOR


def test_future_birth_date_is_invalid():
    errors = []
    assert Person.is_valid_birth_date(TODAY + timedelta(days=1), errors, today=TODAY) is False
    assert errors == [BIRTH_DATE_ERROR]


def test_today_and_absent_birth_dates_are_valid():
    errors = []
    assert Person.is_valid_birth_date(TODAY, errors, today=TODAY) is True
    assert Person.is_valid_birth_date(None, errors, today=TODAY) is True
    assert errors == []


def test_is_valid_birth_date_without_collector():
    assert Person().is_valid_birth_date(date.today() + timedelta(days=30)) is False


def test_is_valid_person_accumulates_all_errors_in_order():
    p = Person("", "   ", TODAY + timedelta(days=1))
    errors = []
    assert p.is_valid_person(errors, today=TODAY) is False
    assert errors == [FIRST_NAME_ERROR, LAST_NAME_ERROR, BIRTH_DATE_ERROR]


def test_is_valid_person_none_names():
    errors = []
    assert Person(None, None, None).is_valid_person(errors) is False
    assert errors == [FIRST_NAME_ERROR, LAST_NAME_ERROR]


def test_is_valid_person_ok():
    errors = []
    assert Person("Ada", "Lovelace", date(1815, 12, 10)).is_valid_person(errors) is True
    assert errors == []


def test_save_invalid_prints_nothing(capsys):
    errors = []
    tomorrow = date.today() + timedelta(days=1)
    assert Person("", "", tomorrow).save(errors) is False
    assert len(errors) == 3
    assert capsys.readouterr().out == ""


def test_save_valid_prints_textual_form(capsys):
    errors = []
    p = Person("Ada", "Lovelace", date(1815, 12, 10))
    assert p.save(errors) is True
    assert errors == []
    assert capsys.readouterr().out.splitlines() == [str(p)]


def test_person_sequence_increments_from_one():
    seq = PersonSequence()
    assert [seq.next_id(), seq.next_id(), seq.next_id()] == [1, 2, 3]
    assert seq.current == 3
