"""Domain layer errors."""

from typing import Optional


class DomainError(Exception):
    """Base domain error."""

    pass


class ValidationError(DomainError):
    """A raw field value was rejected by the validation kernel.

    Not a ``ValueError``: pydantic re-raises it from a field validator as is.

    Attributes:
        field: Human readable name of the rejected field
        entity: Name of the record being built, set when raised from a record
    """

    def __init__(self, message: str, field: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.field = field
        self.entity: Optional[str] = None

    def __str__(self) -> str:
        if self.entity:
            return f"{self.entity}: {self.message}"
        return self.message


class InvalidTypeError(ValidationError):
    """Raised when a value cannot be parsed as the expected type."""

    pass


class OutOfRangeError(ValidationError):
    """Raised when a parsed value lies outside its permitted range."""

    pass


class InvalidInputError(ValidationError):
    """Raised when text is empty or insecure after normalization."""

    pass


class InvalidFormatError(ValidationError):
    """Raised when a timestamp string does not match ``YYYY-MM-DD HH:MM:SS``."""

    pass


class InvalidCalendarDateError(ValidationError):
    """Raised when a timestamp names a date that does not exist."""

    pass


class InvalidTimeError(ValidationError):
    """Raised when a timestamp names an impossible wall clock time."""

    pass


class AlreadyExistsError(DomainError):
    """Raised when a record already carries a storage identity.

    Used both for inserting a persisted record and for reassigning the
    identity of a persisted record.
    """

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} already exists: {identifier}")
