"""Domain-level exceptions.

All rule violations are expressed as subclasses of DomainException so
the CLI layer can catch them uniformly and display user-friendly messages.
"""

from __future__ import annotations


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """A business rule or invariant was violated."""


class EntityNotFoundError(DomainException):
    """A requested entity does not exist."""


class DuplicateEntityError(DomainException):
    """An entity with the same id is already stored."""


class InvalidQuantityError(ValidationError):
    """A stock quantity would become negative."""


class StorageError(DomainException):
    """Reading or writing a file failed."""


class RecordFormatError(DomainException):
    """A line of a flat record file could not be turned into a record.

    Carries the 1-based ``line_number`` and the raw ``line`` so callers
    can point the user at the offending input.
    """

    def __init__(
        self,
        message: str,
        line_number: int,
        line: str,
        field: str | None = None,
    ) -> None:
        super().__init__(message)
        self.line_number = line_number
        self.line = line
        self.field = field


class MissingFieldError(RecordFormatError):
    """Wrong number of fields, or a required field is blank."""


class InvalidFormatError(RecordFormatError):
    """A field could not be parsed into the expected type."""
