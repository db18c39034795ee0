"""Domain errors. Invalid field input is never an error: it is stored as a sentinel."""


class PhoneBookError(Exception):
    """Base for all phone book errors."""


class UnknownPropertyError(PhoneBookError, KeyError):
    """Field name is not one of the record's editable properties."""

    def __init__(self, field_name: str, allowed: list[str]) -> None:
        super().__init__(field_name)
        self.field_name = field_name
        self.allowed = allowed

    def __str__(self) -> str:
        return f"Unknown property {self.field_name!r}; expected one of {', '.join(self.allowed)}."


class RecordNotFoundError(PhoneBookError, LookupError):
    """Position out of range, or the record was removed since it was shown."""
