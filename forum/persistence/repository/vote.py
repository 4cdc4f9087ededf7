"""SQL implementation of Vote repository."""

from typing import Any

import logfire
from sqlalchemy import and_, bindparam, delete, insert, select, update

from forum.domain.model import Vote
from forum.domain.repository import Found, StorageHandle, VoteRepository
from forum.domain.error import InvalidInputError
from forum.domain.value import positive_identifier, signed_unit_vote
from forum.persistence.error import (
    AlreadyExistsError,
    CannotDeleteUnpersistedError,
    CannotUpdateUnpersistedError,
)
from forum.persistence.mappers import row_to_vote, vote_identity_params, vote_to_params
from forum.persistence.repository.base import SqlRepository
from forum.persistence.tables import votes_table

_matches_identity = and_(
    votes_table.c.userId == bindparam("user_id"),
    votes_table.c.commentId == bindparam("comment_id"),
)


class SqlVoteRepository(SqlRepository, VoteRepository):
    """SQL implementation of VoteRepository."""

    resource = "vote"

    def insert(self, handle: StorageHandle, vote: Vote) -> None:
        """Insert a vote and mark it persisted.

        A second vote by the same user on the same comment violates the
        primary key and surfaces as StorageError.
        """
        self._check_handle(handle)
        if vote.is_persisted:
            raise AlreadyExistsError("vote", str(vote.identity))

        stmt = insert(votes_table).values(
            userId=bindparam("user_id"),
            commentId=bindparam("comment_id"),
            timeRecorded=bindparam("recorded_at"),
            vote=bindparam("value"),
        )
        with logfire.span(
            "insert vote", user_id=vote.user_id, comment_id=vote.comment_id
        ):
            with self._statement(handle, stmt, vote_to_params(vote)):
                pass
            vote.persisted = True
            logfire.info(
                "Vote inserted", user_id=vote.user_id, comment_id=vote.comment_id
            )

    def update(self, handle: StorageHandle, vote: Vote) -> None:
        """Update a vote's value and time recorded."""
        self._check_handle(handle)
        if not vote.is_persisted:
            raise CannotUpdateUnpersistedError("vote")

        stmt = (
            update(votes_table)
            .where(_matches_identity)
            .values(
                timeRecorded=bindparam("recorded_at"),
                vote=bindparam("value"),
            )
        )
        with logfire.span(
            "update vote", user_id=vote.user_id, comment_id=vote.comment_id
        ):
            with self._statement(handle, stmt, vote_to_params(vote)):
                pass

    def delete(self, handle: StorageHandle, vote: Vote) -> None:
        """Delete a vote (the record itself is left untouched)."""
        self._check_handle(handle)
        if not vote.is_persisted:
            raise CannotDeleteUnpersistedError("vote")

        stmt = delete(votes_table).where(_matches_identity)
        with logfire.span(
            "delete vote", user_id=vote.user_id, comment_id=vote.comment_id
        ):
            with self._statement(handle, stmt, vote_identity_params(vote)):
                pass

    def find_by_value(self, handle: StorageHandle, value: Any) -> Found[Vote]:
        """Find votes with the given value."""
        self._check_handle(handle)
        value = signed_unit_vote(value)
        if value is None:
            raise InvalidInputError("vote to search for is missing", field="vote")

        stmt = select(votes_table).where(votes_table.c.vote == bindparam("value"))
        return self._find(handle, stmt, {"value": value}, row_to_vote)

    def find_by_comment_id(
        self, handle: StorageHandle, comment_id: Any
    ) -> Found[Vote]:
        """Find votes cast on a comment."""
        self._check_handle(handle)
        comment_id = positive_identifier(comment_id, field="comment id")

        stmt = select(votes_table).where(
            votes_table.c.commentId == bindparam("comment_id")
        )
        return self._find(handle, stmt, {"comment_id": comment_id}, row_to_vote)

    def find_by_user_id(self, handle: StorageHandle, user_id: Any) -> Found[Vote]:
        """Find votes cast by a user."""
        self._check_handle(handle)
        user_id = positive_identifier(user_id, field="user id")

        stmt = select(votes_table).where(votes_table.c.userId == bindparam("user_id"))
        return self._find(handle, stmt, {"user_id": user_id}, row_to_vote)
