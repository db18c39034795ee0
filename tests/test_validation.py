"""Tests for field validators: invalid input becomes a sentinel, never an error."""

from phonebook.domain import (
    NO_DATA,
    NO_NUMBER,
    check_birth_date,
    check_gender,
    check_number,
    validate_field,
)


def test_number_accepts_common_formats():
    assert check_number("+1 (555) 123-4567") == "+1 (555) 123-4567"
    assert check_number("555-1234") == "555-1234"
    assert check_number("(123) 234 345-456") == "(123) 234 345-456"
    assert check_number("+0 (123) 456-789-ABcd") == "+0 (123) 456-789-ABcd"


def test_number_rejects_to_sentinel():
    assert check_number("abc") == NO_NUMBER
    assert check_number("") == NO_NUMBER
    assert check_number("123 4") == NO_NUMBER  # trailing group too short
    assert check_number("+(123) (456)") == NO_NUMBER
    assert check_number("555--1234") == NO_NUMBER


def test_birth_date_accepts_dash_and_slash():
    assert check_birth_date("15-06-1990") == "15-06-1990"
    assert check_birth_date("15/06/1990") == "15/06/1990"


def test_birth_date_rejects_to_sentinel():
    assert check_birth_date("1990-06-15") == NO_DATA
    assert check_birth_date("32-01-2000") == NO_DATA
    assert check_birth_date("01-13-2000") == NO_DATA
    assert check_birth_date("1-1-2000") == NO_DATA


def test_gender_only_m_or_f():
    assert check_gender("M") == "M"
    assert check_gender("F") == "F"
    assert check_gender("m") == NO_DATA
    assert check_gender("X") == NO_DATA


def test_on_invalid_called_only_on_substitution():
    seen = []
    assert check_number("555-1234", seen.append) == "555-1234"
    assert seen == []
    assert check_number("abc", seen.append) == NO_NUMBER
    assert seen == ["abc"]


def test_validate_field_passes_other_fields_through():
    assert validate_field("name", "abc") == "abc"
    assert validate_field("address", "") == ""
    assert validate_field("number", "abc") == NO_NUMBER
    assert validate_field("birth", "nope") == NO_DATA
    assert validate_field("gender", "?") == NO_DATA


def test_sentinels_are_stable_under_revalidation():
    assert check_number(NO_NUMBER) == NO_NUMBER
    assert check_birth_date(NO_DATA) == NO_DATA
    assert check_gender(NO_DATA) == NO_DATA
