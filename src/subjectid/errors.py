"""Exception taxonomy for subjectid.

Nested aliases have no entry here: the model cannot represent them, so an
attempt surfaces as a pydantic ``ValidationError`` at construction.
"""

from __future__ import annotations


class SubjectIdError(Exception):
    """Base class for all subjectid errors."""


class InvalidAccessError(SubjectIdError):
    """A payload member was read from an identifier format that lacks it."""

    def __init__(self, format: str, name: str) -> None:
        self.format = format
        self.name = name
        super().__init__(f"'{format}' identifier has no member '{name}'")


class EmptyAliasesError(SubjectIdError):
    """An empty aliases set was built under the reject policy."""

    def __init__(self) -> None:
        super().__init__("aliases identifier requires at least one identifier")


class InvalidPhoneNumberError(SubjectIdError):
    """A phone number is not E.164 formatted."""

    def __init__(self, value: str) -> None:
        self.value = value
        super().__init__(f"invalid E.164 formatted phone number: {value!r}")
