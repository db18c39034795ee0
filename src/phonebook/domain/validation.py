"""Field validators. Invalid input is replaced with a sentinel, never rejected."""

import re
from collections.abc import Callable

NO_DATA = "[no data]"
NO_NUMBER = "[no number]"

GENDERS = ("M", "F")

_NUMBER_PATTERN = re.compile(
    r"\+?([0-9a-zA-Z]+([ -]\([0-9a-zA-Z]{2,}\))?|\([0-9a-zA-Z]+\))([ -][0-9a-zA-Z]{2,})*"
)
_BIRTH_DATE_PATTERN = re.compile(r"(([0-2][0-9])|(3[0-1]))[-/]((0[0-9])|(1[0-2]))[-/]\d{4}")
_DIGIT = re.compile(r"\d")


def is_valid_number(raw: str) -> bool:
    """Groups of letters or digits, optionally parenthesized, joined by space or dash.

    At least one digit is required, so a bare word like "abc" is not a number.
    """
    return bool(_NUMBER_PATTERN.fullmatch(raw)) and bool(_DIGIT.search(raw))


def is_valid_birth_date(raw: str) -> bool:
    return bool(_BIRTH_DATE_PATTERN.fullmatch(raw))


def _check(
    raw: str,
    valid: bool,
    sentinel: str,
    on_invalid: Callable[[str], None] | None,
) -> str:
    if valid:
        return raw
    if on_invalid is not None:
        on_invalid(raw)
    return sentinel


def check_number(raw: str, on_invalid: Callable[[str], None] | None = None) -> str:
    return _check(raw, is_valid_number(raw), NO_NUMBER, on_invalid)


def check_birth_date(raw: str, on_invalid: Callable[[str], None] | None = None) -> str:
    return _check(raw, is_valid_birth_date(raw), NO_DATA, on_invalid)


def check_gender(raw: str, on_invalid: Callable[[str], None] | None = None) -> str:
    return _check(raw, raw in GENDERS, NO_DATA, on_invalid)


_VALIDATORS: dict[str, Callable[..., str]] = {
    "number": check_number,
    "birth": check_birth_date,
    "gender": check_gender,
}


def validate_field(
    field_name: str, raw: str, on_invalid: Callable[[str], None] | None = None
) -> str:
    """Apply the validator for number, birth or gender; other fields pass through."""
    validator = _VALIDATORS.get(field_name)
    if validator is None:
        return raw
    return validator(raw, on_invalid)
