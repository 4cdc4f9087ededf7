"""Persistence layer errors."""

from forum.domain.error import AlreadyExistsError


class PersistenceError(Exception):
    """Base persistence error."""

    pass


class PreconditionError(PersistenceError):
    """A repository call was rejected before any statement was issued."""

    pass


class InvalidHandleError(PreconditionError):
    """Raised when the storage handle is missing, of the wrong kind, or closed."""

    pass


class CannotUpdateUnpersistedError(PreconditionError):
    """Raised when updating a record that storage has never seen."""

    def __init__(self, resource: str):
        self.resource = resource
        super().__init__(f"unable to update a {resource} that does not exist")


class CannotDeleteUnpersistedError(PreconditionError):
    """Raised when deleting a record that storage has never seen."""

    def __init__(self, resource: str):
        self.resource = resource
        super().__init__(f"unable to delete a {resource} that does not exist")


class StorageError(PersistenceError):
    """Raised when preparing, binding, executing or fetching fails.

    The underlying driver or validation error is chained as ``__cause__``.
    """

    pass


__all__ = [
    "AlreadyExistsError",
    "PersistenceError",
    "PreconditionError",
    "InvalidHandleError",
    "CannotUpdateUnpersistedError",
    "CannotDeleteUnpersistedError",
    "StorageError",
]
