"""Phone book use cases: add, list, search, edit, delete, count. Holds the in-memory record list."""

import logging
from collections.abc import Callable
from datetime import datetime

from phonebook.application.dto import SearchHit
from phonebook.application.ports import ContactRepository
from phonebook.domain import (
    Contact,
    Organization,
    Person,
    RecordNotFoundError,
    UnknownPropertyError,
    now_stamp,
    validate_field,
)

logger = logging.getLogger(__name__)

InvalidFieldCallback = Callable[[str, str], None]


class PhoneBookService:
    """
    Core flow: load once -> add / edit / delete in memory -> save once.
    New records go to the front. Positions are 1-based and only valid until the list changes;
    edit and delete take the record itself and re-check that it is still in the list.
    """

    def __init__(
        self,
        repository: ContactRepository,
        *,
        clock: Callable[[], datetime] | None = None,
    ) -> None:
        self._repo = repository
        self._clock = clock
        self._records: list[Contact] = []

    def load(self) -> None:
        self._records = list(self._repo.load())

    def save(self) -> None:
        self._repo.save(list(self._records))

    def add_person(
        self,
        name: str,
        surname: str,
        birth: str,
        gender: str,
        number: str,
        *,
        on_invalid: InvalidFieldCallback | None = None,
    ) -> Person:
        """Add a person. Invalid birth, gender or number are stored as sentinels."""
        stamp = now_stamp(self._clock)
        person = Person(
            name=name,
            number=_validated("number", number, on_invalid),
            time_created=stamp,
            time_edit=stamp,
            surname=surname,
            birth=_validated("birth", birth, on_invalid),
            gender=_validated("gender", gender, on_invalid),
        )
        self._records.insert(0, person)
        logger.debug("Added person %s", person)
        return person

    def add_organization(
        self,
        name: str,
        address: str,
        number: str,
        *,
        on_invalid: InvalidFieldCallback | None = None,
    ) -> Organization:
        """Add an organization. An invalid number is stored as a sentinel."""
        stamp = now_stamp(self._clock)
        organization = Organization(
            name=name,
            number=_validated("number", number, on_invalid),
            time_created=stamp,
            time_edit=stamp,
            address=address,
        )
        self._records.insert(0, organization)
        logger.debug("Added organization %s", organization)
        return organization

    def list_contacts(self) -> list[Contact]:
        """Return a snapshot of all records, most recently added first."""
        return list(self._records)

    def count(self) -> int:
        return len(self._records)

    def get(self, position: int) -> Contact:
        """Return the record at a 1-based position."""
        if not 1 <= position <= len(self._records):
            raise RecordNotFoundError(f"No record number {position}.")
        return self._records[position - 1]

    def search(self, query: str) -> list[SearchHit]:
        """Case-insensitive substring search. At most one hit per record, in list order."""
        needle = query.lower()
        hits = []
        for record in self._records:
            label = _match_label(record, needle)
            if label is not None:
                hits.append(SearchHit(contact=record, label=label))
        return hits

    def edit(self, contact: Contact, field_name: str, value: str) -> Contact:
        """Set one editable field and stamp time_edit. Number, birth and gender are validated."""
        if field_name not in contact.list_of_properties():
            raise UnknownPropertyError(field_name, contact.list_of_properties())
        self._position_of(contact)
        contact.set_property(field_name, validate_field(field_name, value))
        contact.time_edit = max(now_stamp(self._clock), contact.time_created)
        logger.debug("Edited %s of %s", field_name, contact)
        return contact

    def delete(self, contact: Contact) -> None:
        del self._records[self._position_of(contact)]
        logger.debug("Deleted %s", contact)

    def _position_of(self, contact: Contact) -> int:
        # Identity, not equality: two records may hold the same values.
        for index, record in enumerate(self._records):
            if record is contact:
                return index
        raise RecordNotFoundError("The record no longer exists.")


def _validated(
    field_name: str, raw: str, on_invalid: InvalidFieldCallback | None
) -> str:
    if on_invalid is None:
        return validate_field(field_name, raw)
    return validate_field(field_name, raw, lambda bad: on_invalid(field_name, bad))


def _match_label(record: Contact, needle: str) -> str | None:
    if isinstance(record, Person):
        if needle in record.name.lower() or needle in record.surname.lower():
            return f"{record.name} {record.surname}"
        candidates = [record.number]
    else:
        candidates = [record.name, record.address, record.number]
    for value in candidates:
        if needle in value.lower():
            return value
    return None
