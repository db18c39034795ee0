"""JSON-file implementation of ContactRepository. Read once at startup, written once on exit."""

import logging
from pathlib import Path

from phonebook.domain import Contact
from phonebook.infrastructure.codec import ContactDecodeError, decode_contacts, encode_contacts

logger = logging.getLogger(__name__)


class JsonFileContactRepository:
    """Stores the whole record list as one JSON array. A missing or empty file is an empty phone book."""

    def __init__(self, path: Path | str) -> None:
        self._path = Path(path)

    @property
    def path(self) -> Path:
        return self._path

    def load(self) -> list[Contact]:
        if not self._path.exists() or self._path.stat().st_size == 0:
            logger.info("No records at %s; starting empty", self._path)
            return []
        try:
            text = self._path.read_text(encoding="utf-8")
        except UnicodeDecodeError as exc:
            raise ContactDecodeError(f"Not a UTF-8 file: {exc}") from exc
        contacts = decode_contacts(text)
        logger.info("Loaded %d records from %s", len(contacts), self._path)
        return contacts

    def save(self, contacts: list[Contact]) -> None:
        self._path.parent.mkdir(parents=True, exist_ok=True)
        self._path.write_text(encode_contacts(contacts), encoding="utf-8")
        logger.info("Saved %d records to %s", len(contacts), self._path)
