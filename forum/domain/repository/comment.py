"""Comment repository interface."""

from abc import ABC, abstractmethod
from typing import Any

from forum.domain.model.comment import Comment
from forum.domain.repository.common import Found
from forum.domain.repository.storage import StorageHandle


class CommentRepository(ABC):
    """Repository for Comment records.

    Defines the contract for comment persistence operations.
    Implementations live in the persistence layer.
    """

    @abstractmethod
    def insert(self, handle: StorageHandle, comment: Comment) -> None:
        """Insert a new comment and assign it the id chosen by storage.

        Args:
            handle: Storage handle to run the statement on
            comment: Comment without an id

        Raises:
            InvalidHandleError: If the handle is missing or closed
            AlreadyExistsError: If the comment already has an id
            StorageError: If the statement fails
        """
        pass

    @abstractmethod
    def update(self, handle: StorageHandle, comment: Comment) -> None:
        """Write the comment's author, content and date back to storage.

        Raises:
            InvalidHandleError: If the handle is missing or closed
            CannotUpdateUnpersistedError: If the comment has no id
            StorageError: If the statement fails
        """
        pass

    @abstractmethod
    def delete(self, handle: StorageHandle, comment: Comment) -> None:
        """Delete the comment's row (hard delete).

        Raises:
            InvalidHandleError: If the handle is missing or closed
            CannotDeleteUnpersistedError: If the comment has no id
            StorageError: If the statement fails
        """
        pass

    @abstractmethod
    def find_by_id(self, handle: StorageHandle, comment_id: Any) -> Found[Comment]:
        """Find a comment by id.

        Returns:
            The comment if found, None otherwise
        """
        pass

    @abstractmethod
    def find_by_content(
        self, handle: StorageHandle, content: Any
    ) -> Found[Comment]:
        """Find comments whose content contains the search text.

        Args:
            handle: Storage handle to run the query on
            content: Text to search for, normalized like comment content

        Returns:
            None for no match, the comment for one match, a list otherwise

        Raises:
            ValidationError: If the search text is rejected
            StorageError: If the query fails or a row is not a valid comment
        """
        pass

    @abstractmethod
    def find_by_author_id(
        self, handle: StorageHandle, author_id: Any
    ) -> Found[Comment]:
        """Find comments written by a user."""
        pass
