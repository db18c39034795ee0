"""Infrastructure layer: the JSON codec and concrete repositories."""

from phonebook.infrastructure.codec import (
    ContactDecodeError,
    UnclassifiableRecordError,
    classify,
    decode_contacts,
    encode_contacts,
)
from phonebook.infrastructure.json_repository import JsonFileContactRepository
from phonebook.infrastructure.memory_repository import InMemoryContactRepository

__all__ = [
    "ContactDecodeError",
    "InMemoryContactRepository",
    "JsonFileContactRepository",
    "UnclassifiableRecordError",
    "classify",
    "decode_contacts",
    "encode_contacts",
]
