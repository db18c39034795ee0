"""JSON codec for the record list.

No type tag is stored: each object's variant is inferred from its keys.
"address" means Organization, otherwise "surname" means Person. An object with both
is an Organization. An object with neither cannot be decoded and fails the whole load.
"""

import json
from collections.abc import Iterable
from dataclasses import asdict

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from phonebook.domain import Contact, Organization, Person, PhoneBookError


class ContactDecodeError(PhoneBookError, ValueError):
    """The document is not valid JSON, or an element does not fit a record variant."""

    def __init__(self, message: str, index: int | None = None) -> None:
        if index is not None:
            message = f"Record {index}: {message}"
        super().__init__(message)
        self.index = index


class UnclassifiableRecordError(ContactDecodeError):
    """Element has neither "address" nor "surname"."""


class _RecordSchema(BaseModel):
    """Fields common to both variants, as persisted (camelCase timestamps)."""

    model_config = ConfigDict(
        populate_by_name=True,
        coerce_numbers_to_str=True,
        extra="ignore",
    )

    name: str
    number: str
    time_created: str = Field(alias="timeCreated")
    time_edit: str = Field(alias="timeEdit")


class PersonRecord(_RecordSchema):
    surname: str
    birth: str
    gender: str


class OrganizationRecord(_RecordSchema):
    address: str


_SCHEMAS: dict[type, type[_RecordSchema]] = {
    Person: PersonRecord,
    Organization: OrganizationRecord,
}


def classify(obj: dict) -> type[Person] | type[Organization]:
    """Return the record variant for a decoded JSON object, from its keys only."""
    if "address" in obj:
        return Organization
    if "surname" in obj:
        return Person
    raise UnclassifiableRecordError('expected an "address" or "surname" field')


def _decode_one(obj: object, index: int) -> Contact:
    if not isinstance(obj, dict):
        raise ContactDecodeError("expected a JSON object", index)
    try:
        variant = classify(obj)
    except UnclassifiableRecordError as exc:
        raise UnclassifiableRecordError(str(exc), index) from exc
    try:
        record = _SCHEMAS[variant].model_validate(obj)
    except ValidationError as exc:
        details = "; ".join(
            f"{'.'.join(str(part) for part in err['loc'])}: {err['msg']}"
            for err in exc.errors()
        )
        raise ContactDecodeError(f"invalid {variant.__name__}: {details}", index) from exc
    return variant(**record.model_dump())


def decode_contacts(text: str) -> list[Contact]:
    """Parse a JSON array of records. Any bad element fails the whole document."""
    try:
        data = json.loads(text)
    except json.JSONDecodeError as exc:
        raise ContactDecodeError(f"Malformed JSON: {exc}") from exc
    if not isinstance(data, list):
        raise ContactDecodeError("Expected a JSON array of records")
    return [_decode_one(obj, index) for index, obj in enumerate(data)]


def encode_contacts(contacts: Iterable[Contact]) -> str:
    """Serialize records in order. Key order is fixed per variant: common fields first."""
    out = []
    for contact in contacts:
        schema = _SCHEMAS.get(type(contact))
        if schema is None:
            raise TypeError(f"Unknown record type: {type(contact).__name__}")
        out.append(schema.model_validate(asdict(contact)).model_dump(by_alias=True))
    return json.dumps(out, ensure_ascii=False, indent=2)
