"""Domain-level exceptions.

All business rule violations are expressed as subclasses of DomainException
so the CLI layer can catch them uniformly and display user-friendly messages.
Each subclass carries an ``ErrorKind`` so callers can branch on the kind of
failure without matching on message text.
"""

from __future__ import annotations

from enum import Enum


class ErrorKind(Enum):
    INVALID_FORMAT = "INVALID_FORMAT"
    OUT_OF_RANGE = "OUT_OF_RANGE"
    PARSE_ERROR = "PARSE_ERROR"
    DUPLICATE_KEY = "DUPLICATE_KEY"
    NOT_FOUND = "NOT_FOUND"


class DomainException(Exception):
    """Base class for all domain errors."""

    kind: ErrorKind


class ValidationError(DomainException):
    """A value failed validation before it could become part of the domain."""

    kind = ErrorKind.INVALID_FORMAT


class InvalidFormatError(ValidationError):
    """A value does not have the required shape (email, product name...)."""

    kind = ErrorKind.INVALID_FORMAT


class OutOfRangeError(ValidationError):
    """A numeric value is outside its allowed range."""

    kind = ErrorKind.OUT_OF_RANGE


class ParseError(ValidationError):
    """A textual literal could not be parsed into a number."""

    kind = ErrorKind.PARSE_ERROR


class DuplicateKeyError(DomainException):
    """An entity with the same key is already registered."""

    kind = ErrorKind.DUPLICATE_KEY


class EntityNotFoundError(DomainException):
    """A requested entity does not exist.

    ``entity`` names what was looked up (``"Customer"`` or ``"Product"``).
    """

    kind = ErrorKind.NOT_FOUND

    def __init__(self, entity: str, key: str, message: str | None = None) -> None:
        self.entity = entity
        self.key = key
        super().__init__(message or f"{entity} not found: '{key}'")
