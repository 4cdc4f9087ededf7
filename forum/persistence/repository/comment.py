"""SQL implementation of Comment repository."""

from typing import Any

import logfire
from sqlalchemy import bindparam, delete, insert, select, update

from forum.domain.model import Comment
from forum.domain.repository import CommentRepository, Found, StorageHandle
from forum.domain.value import (
    COMMENT_CONTENT_MAX_LENGTH,
    bounded_text,
    escape_like,
    positive_identifier,
)
from forum.persistence.error import (
    AlreadyExistsError,
    CannotDeleteUnpersistedError,
    CannotUpdateUnpersistedError,
)
from forum.persistence.mappers import comment_to_params, row_to_comment
from forum.persistence.repository.base import SqlRepository
from forum.persistence.tables import comments_table


class SqlCommentRepository(SqlRepository, CommentRepository):
    """SQL implementation of CommentRepository."""

    resource = "comment"

    def insert(self, handle: StorageHandle, comment: Comment) -> None:
        """Insert a comment and write the assigned id back into it."""
        self._check_handle(handle)
        if comment.is_persisted:
            raise AlreadyExistsError("comment", str(comment.id))

        stmt = insert(comments_table).values(
            userId=bindparam("author_id"),
            commentContent=bindparam("content"),
            commentDate=bindparam("created_at"),
        )
        with logfire.span("insert comment", author_id=comment.author_id):
            with self._statement(handle, stmt, comment_to_params(comment)) as statement:
                comment_id = handle.inserted_identity(statement)
            comment.id = comment_id
            logfire.info("Comment inserted", comment_id=comment_id)

    def update(self, handle: StorageHandle, comment: Comment) -> None:
        """Update a comment's author, content and date."""
        self._check_handle(handle)
        if not comment.is_persisted:
            raise CannotUpdateUnpersistedError("comment")

        stmt = (
            update(comments_table)
            .where(comments_table.c.commentId == bindparam("comment_id"))
            .values(
                userId=bindparam("author_id"),
                commentContent=bindparam("content"),
                commentDate=bindparam("created_at"),
            )
        )
        params = {**comment_to_params(comment), "comment_id": comment.id}
        with logfire.span("update comment", comment_id=comment.id):
            with self._statement(handle, stmt, params):
                pass

    def delete(self, handle: StorageHandle, comment: Comment) -> None:
        """Delete a comment (hard delete; the record itself is left untouched)."""
        self._check_handle(handle)
        if not comment.is_persisted:
            raise CannotDeleteUnpersistedError("comment")

        stmt = delete(comments_table).where(
            comments_table.c.commentId == bindparam("comment_id")
        )
        with logfire.span("delete comment", comment_id=comment.id):
            with self._statement(handle, stmt, {"comment_id": comment.id}):
                pass

    def find_by_id(self, handle: StorageHandle, comment_id: Any) -> Found[Comment]:
        """Find a comment by id."""
        self._check_handle(handle)
        comment_id = positive_identifier(comment_id, field="comment id")

        stmt = select(comments_table).where(
            comments_table.c.commentId == bindparam("comment_id")
        )
        return self._find(handle, stmt, {"comment_id": comment_id}, row_to_comment)

    def find_by_content(self, handle: StorageHandle, content: Any) -> Found[Comment]:
        """Find comments whose content contains the search text."""
        self._check_handle(handle)
        content = bounded_text(
            content, COMMENT_CONTENT_MAX_LENGTH, field="comment content"
        )

        stmt = select(comments_table).where(
            comments_table.c.commentContent.like(bindparam("pattern"), escape="\\")
        )
        params = {"pattern": f"%{escape_like(content)}%"}
        return self._find(handle, stmt, params, row_to_comment)

    def find_by_author_id(
        self, handle: StorageHandle, author_id: Any
    ) -> Found[Comment]:
        """Find comments written by a user."""
        self._check_handle(handle)
        author_id = positive_identifier(author_id, field="user id")

        stmt = select(comments_table).where(
            comments_table.c.userId == bindparam("author_id")
        )
        return self._find(handle, stmt, {"author_id": author_id}, row_to_comment)
