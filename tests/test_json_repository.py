"""Tests for the JSON-file repository: empty files, load/save, decode failures."""

import pytest

from phonebook.domain import Organization, Person
from phonebook.infrastructure import ContactDecodeError, JsonFileContactRepository


def _records() -> list:
    return [
        Person(
            name="Ann",
            number="123-4567",
            time_created="2024-05-01T10:30",
            time_edit="2024-05-01T10:45",
            surname="Lee",
            birth="01-01-2000",
            gender="F",
        ),
        Organization(
            name="Pizza Shop",
            number="555-1234",
            time_created="2024-04-01T08:00",
            time_edit="2024-04-01T08:00",
            address="Wall St. 1",
        ),
    ]


def test_missing_file_loads_empty(tmp_path):
    repo = JsonFileContactRepository(tmp_path / "contacts.json")
    assert repo.load() == []


def test_zero_length_file_loads_empty(tmp_path):
    path = tmp_path / "contacts.json"
    path.write_text("")
    assert JsonFileContactRepository(path).load() == []


def test_save_then_load_keeps_records_and_timestamps(tmp_path):
    path = tmp_path / "nested" / "contacts.json"
    repo = JsonFileContactRepository(path)
    repo.save(_records())
    assert path.exists()
    loaded = JsonFileContactRepository(path).load()
    assert loaded == _records()
    assert loaded[0].time_edit == "2024-05-01T10:45"


def test_malformed_file_raises(tmp_path):
    path = tmp_path / "contacts.json"
    path.write_text("[{")
    with pytest.raises(ContactDecodeError):
        JsonFileContactRepository(path).load()


def test_non_utf8_file_raises_decode_error(tmp_path):
    path = tmp_path / "contacts.json"
    path.write_bytes(b'[{"name": "\xff"}]')
    with pytest.raises(ContactDecodeError, match="UTF-8"):
        JsonFileContactRepository(path).load()


def test_save_empty_list_writes_empty_array(tmp_path):
    path = tmp_path / "contacts.json"
    JsonFileContactRepository(path).save([])
    assert path.read_text(encoding="utf-8") == "[]"
    assert JsonFileContactRepository(path).load() == []
