"""Vote repository interface."""

from abc import ABC, abstractmethod
from typing import Any

from forum.domain.model.vote import Vote
from forum.domain.repository.common import Found
from forum.domain.repository.storage import StorageHandle


class VoteRepository(ABC):
    """Repository for Vote records.

    Votes are keyed by (user id, comment id).
    """

    @abstractmethod
    def insert(self, handle: StorageHandle, vote: Vote) -> None:
        """Insert a new vote and mark it persisted.

        Raises:
            InvalidHandleError: If the handle is missing or closed
            AlreadyExistsError: If the vote is already persisted
            StorageError: If the statement fails, including a duplicate key
        """
        pass

    @abstractmethod
    def update(self, handle: StorageHandle, vote: Vote) -> None:
        """Write the vote's value and time back to storage.

        Raises:
            InvalidHandleError: If the handle is missing or closed
            CannotUpdateUnpersistedError: If the vote is not persisted
            StorageError: If the statement fails
        """
        pass

    @abstractmethod
    def delete(self, handle: StorageHandle, vote: Vote) -> None:
        """Delete the vote's row.

        Raises:
            InvalidHandleError: If the handle is missing or closed
            CannotDeleteUnpersistedError: If the vote is not persisted
            StorageError: If the statement fails
        """
        pass

    @abstractmethod
    def find_by_value(self, handle: StorageHandle, value: Any) -> Found[Vote]:
        """Find votes with the given value (1 or -1).

        Returns:
            None for no match, the vote for one match, a list otherwise

        Raises:
            ValidationError: If the value is not 1 or -1
            StorageError: If the query fails or a row is not a valid vote
        """
        pass

    @abstractmethod
    def find_by_comment_id(
        self, handle: StorageHandle, comment_id: Any
    ) -> Found[Vote]:
        """Find votes cast on a comment."""
        pass

    @abstractmethod
    def find_by_user_id(self, handle: StorageHandle, user_id: Any) -> Found[Vote]:
        """Find votes cast by a user."""
        pass
