"""Result types returned by the phone book service."""

from dataclasses import dataclass

from phonebook.domain import Contact


@dataclass(frozen=True)
class SearchHit:
    """One search result: the matching record and the value shown for it."""

    contact: Contact
    label: str
