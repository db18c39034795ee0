"""Application layer: use cases, ports, and DTOs. Depends only on domain."""

from phonebook.application.dto import SearchHit
from phonebook.application.phonebook_service import PhoneBookService
from phonebook.application.ports import ContactRepository

__all__ = [
    "ContactRepository",
    "PhoneBookService",
    "SearchHit",
]
