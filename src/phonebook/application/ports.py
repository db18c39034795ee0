"""Application ports (interfaces). Implemented by infrastructure adapters."""

from typing import Protocol

from phonebook.domain import Contact


class ContactRepository(Protocol):
    """Loads and saves the whole ordered record list at once."""

    def load(self) -> list[Contact]:
        """Return all stored records in order. An empty store returns []."""
        ...

    def save(self, contacts: list[Contact]) -> None:
        """Replace the stored records with the given list."""
        ...
