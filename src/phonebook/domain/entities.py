"""Domain entities: Person and Organization, the two phone book record variants."""

from collections.abc import Callable
from dataclasses import dataclass
from datetime import datetime
from typing import ClassVar

from phonebook.domain.errors import UnknownPropertyError

# Persisted timestamp format: local time, minute resolution.
TIMESTAMP_FORMAT = "%Y-%m-%dT%H:%M"


def now_stamp(clock: Callable[[], datetime] | None = None) -> str:
    """Return the current local time (or the clock's time) as a persisted timestamp."""
    moment = clock() if clock is not None else datetime.now()
    return moment.strftime(TIMESTAMP_FORMAT)


@dataclass
class _ContactBase:
    """
    Fields shared by every record variant.
    Only the names in PROPERTIES can be read or written by name; timestamps are not editable.
    """

    PROPERTIES: ClassVar[tuple[str, ...]] = ("name", "number")

    name: str
    number: str
    time_created: str
    time_edit: str

    def list_of_properties(self) -> list[str]:
        return list(self.PROPERTIES)

    def get_property(self, field_name: str) -> str | None:
        if field_name not in self.PROPERTIES:
            return None
        return getattr(self, field_name)

    def set_property(self, field_name: str, value: str) -> None:
        if field_name not in self.PROPERTIES:
            raise UnknownPropertyError(field_name, self.list_of_properties())
        setattr(self, field_name, value)

    def display_contact_info(self) -> str:
        lines = self._variant_lines() + [
            f"Number: {self.number}",
            f"Time created: {self.time_created}",
            f"Time last edit: {self.time_edit}",
        ]
        return "\n".join(lines)

    def _variant_lines(self) -> list[str]:
        raise NotImplementedError


@dataclass
class Person(_ContactBase):
    """A person: name and surname, birth date and gender may be the "[no data]" sentinel."""

    PROPERTIES: ClassVar[tuple[str, ...]] = ("name", "number", "surname", "birth", "gender")

    surname: str
    birth: str
    gender: str

    def _variant_lines(self) -> list[str]:
        return [
            f"Name: {self.name}",
            f"Surname: {self.surname}",
            f"Birth date: {self.birth}",
            f"Gender: {self.gender}",
        ]

    def __str__(self) -> str:
        return f"{self.name} {self.surname}"


@dataclass
class Organization(_ContactBase):
    """An organization with a free-form address."""

    PROPERTIES: ClassVar[tuple[str, ...]] = ("name", "number", "address")

    address: str

    def _variant_lines(self) -> list[str]:
        return [
            f"Organization name: {self.name}",
            f"Address: {self.address}",
        ]

    def __str__(self) -> str:
        return self.name


# Closed set of record variants. Code that dispatches on the variant matches both.
Contact = Person | Organization
