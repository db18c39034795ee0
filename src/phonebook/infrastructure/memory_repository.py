"""In-memory implementation of ContactRepository (no file)."""

import copy

from phonebook.domain import Contact


class InMemoryContactRepository:
    """Keeps a private copy of the last saved list. Order preserved."""

    def __init__(self, contacts: list[Contact] | None = None) -> None:
        self._contacts: list[Contact] = copy.deepcopy(contacts or [])
        self.save_count = 0

    def load(self) -> list[Contact]:
        return copy.deepcopy(self._contacts)

    def save(self, contacts: list[Contact]) -> None:
        self._contacts = copy.deepcopy(contacts)
        self.save_count += 1
