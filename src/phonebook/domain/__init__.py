"""Domain layer: record variants, validators and errors. No dependencies on outer layers."""

from phonebook.domain.entities import (
    TIMESTAMP_FORMAT,
    Contact,
    Organization,
    Person,
    now_stamp,
)
from phonebook.domain.errors import (
    PhoneBookError,
    RecordNotFoundError,
    UnknownPropertyError,
)
from phonebook.domain.validation import (
    NO_DATA,
    NO_NUMBER,
    check_birth_date,
    check_gender,
    check_number,
    validate_field,
)

__all__ = [
    "NO_DATA",
    "NO_NUMBER",
    "TIMESTAMP_FORMAT",
    "Contact",
    "Organization",
    "Person",
    "PhoneBookError",
    "RecordNotFoundError",
    "UnknownPropertyError",
    "check_birth_date",
    "check_gender",
    "check_number",
    "now_stamp",
    "validate_field",
]
