"""User repository interface."""

from abc import ABC, abstractmethod
from typing import Any

from forum.domain.model.user import User
from forum.domain.repository.common import Found
from forum.domain.repository.storage import StorageHandle


class UserRepository(ABC):
    """Repository for User records.

    Defines the contract for user persistence operations.
    Implementations live in the persistence layer.
    """

    @abstractmethod
    def insert(self, handle: StorageHandle, user: User) -> None:
        """Insert a new user and assign it the id chosen by storage.

        Args:
            handle: Storage handle to run the statement on
            user: User without an id

        Raises:
            InvalidHandleError: If the handle is missing or closed
            AlreadyExistsError: If the user already has an id
            StorageError: If the statement fails
        """
        pass

    @abstractmethod
    def update(self, handle: StorageHandle, user: User) -> None:
        """Write the user's email and username back to storage.

        Raises:
            InvalidHandleError: If the handle is missing or closed
            CannotUpdateUnpersistedError: If the user has no id
            StorageError: If the statement fails
        """
        pass

    @abstractmethod
    def delete(self, handle: StorageHandle, user: User) -> None:
        """Delete the user's row.

        The in-memory user keeps its id; callers discard it.

        Raises:
            InvalidHandleError: If the handle is missing or closed
            CannotDeleteUnpersistedError: If the user has no id
            StorageError: If the statement fails
        """
        pass

    @abstractmethod
    def find_by_id(self, handle: StorageHandle, user_id: Any) -> Found[User]:
        """Find a user by id.

        Returns:
            The user if found, None otherwise
        """
        pass

    @abstractmethod
    def find_by_username(self, handle: StorageHandle, username: Any) -> Found[User]:
        """Find users whose username contains the search text.

        Args:
            handle: Storage handle to run the query on
            username: Text to search for, normalized like a username

        Returns:
            None for no match, the user for one match, a list otherwise

        Raises:
            ValidationError: If the search text is rejected
            StorageError: If the query fails or a row is not a valid user
        """
        pass

    @abstractmethod
    def find_by_email(self, handle: StorageHandle, email: Any) -> Found[User]:
        """Find users whose email contains the search text."""
        pass
