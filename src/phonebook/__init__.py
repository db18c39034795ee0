"""
Phone book core: clean-architecture layout.

- domain: record variants (Person, Organization), validators, errors. No outer dependencies.
- application: use cases (PhoneBookService), ports (ContactRepository), DTOs.
- infrastructure: JSON codec and adapters (JsonFileContactRepository, InMemoryContactRepository).
"""

from phonebook.application import ContactRepository, PhoneBookService, SearchHit
from phonebook.domain import (
    Contact,
    Organization,
    Person,
    PhoneBookError,
    RecordNotFoundError,
    UnknownPropertyError,
)
from phonebook.infrastructure import (
    ContactDecodeError,
    InMemoryContactRepository,
    JsonFileContactRepository,
    UnclassifiableRecordError,
)

__all__ = [
    "Contact",
    "ContactDecodeError",
    "ContactRepository",
    "InMemoryContactRepository",
    "JsonFileContactRepository",
    "Organization",
    "Person",
    "PhoneBookError",
    "PhoneBookService",
    "RecordNotFoundError",
    "SearchHit",
    "UnclassifiableRecordError",
    "UnknownPropertyError",
]
