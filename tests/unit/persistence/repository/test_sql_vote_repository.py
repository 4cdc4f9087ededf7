"""Unit tests for SqlVoteRepository driven through a recording handle."""

from datetime import datetime

import pytest

from forum.domain.error import InvalidInputError, OutOfRangeError
from forum.domain.model import Vote
from forum.persistence.error import (
    AlreadyExistsError,
    CannotDeleteUnpersistedError,
    CannotUpdateUnpersistedError,
    StorageError,
)
from forum.persistence.repository import SqlVoteRepository
from tests.harness import RecordingHandle

RECORDED_AT = datetime(2024, 1, 1, 10, 0, 0)


@pytest.fixture
def repo():
    return SqlVoteRepository()


def vote_row(user_id=1, comment_id=1, value=1):
    return {
        "userId": user_id,
        "commentId": comment_id,
        "timeRecorded": RECORDED_AT,
        "vote": value,
    }


class TestInsert:
    """Tests for inserting votes."""

    def test_insert_marks_vote_persisted(self, repo):
        """Insert should bind every column and mark the vote persisted."""
        handle = RecordingHandle()
        vote = Vote(user_id=1, comment_id=2, recorded_at=RECORDED_AT, value=-1)

        repo.insert(handle, vote)

        assert vote.is_persisted is True
        assert handle.calls == ["prepare", "bind", "execute", "close"]
        assert handle.bound == {
            "user_id": 1,
            "comment_id": 2,
            "recorded_at": RECORDED_AT,
            "value": -1,
        }

    def test_second_insert_of_same_vote_touches_nothing(self, repo):
        """Inserting the same vote twice should fail before any statement."""
        handle = RecordingHandle()
        vote = Vote(user_id=1, comment_id=2, value=1)
        repo.insert(handle, vote)
        handle.calls.clear()

        with pytest.raises(AlreadyExistsError):
            repo.insert(handle, vote)

        assert handle.calls == []

    def test_failed_insert_keeps_vote_unpersisted(self, repo):
        """Failed insert should leave the vote unpersisted."""
        handle = RecordingHandle(fail_on="execute")
        vote = Vote(user_id=1, comment_id=2, value=1)

        with pytest.raises(StorageError):
            repo.insert(handle, vote)

        assert vote.is_persisted is False


class TestUpdateAndDelete:
    """Tests for updating and deleting votes."""

    def test_update_requires_persisted_vote(self, repo):
        """Updating an unpersisted vote should fail before any statement."""
        handle = RecordingHandle()

        with pytest.raises(CannotUpdateUnpersistedError):
            repo.update(handle, Vote(user_id=1, comment_id=2, value=1))

        assert handle.calls == []

    def test_update_binds_identity_and_value(self, repo):
        """Update should bind the identity pair and the new value."""
        handle = RecordingHandle()
        vote = Vote(
            user_id=1, comment_id=2, recorded_at=RECORDED_AT, value=1, persisted=True
        )
        vote.value = -1

        repo.update(handle, vote)

        assert handle.bound["value"] == -1
        assert handle.bound["user_id"] == 1
        assert handle.bound["comment_id"] == 2

    def test_delete_binds_identity_only(self, repo):
        """Delete should bind only the identity pair."""
        handle = RecordingHandle()
        vote = Vote(user_id=1, comment_id=2, value=1, persisted=True)

        repo.delete(handle, vote)

        assert handle.bound == {"user_id": 1, "comment_id": 2}
        assert vote.is_persisted is True

    def test_delete_requires_persisted_vote(self, repo):
        """Deleting an unpersisted vote should fail before any statement."""
        handle = RecordingHandle()

        with pytest.raises(CannotDeleteUnpersistedError):
            repo.delete(handle, Vote(user_id=1, comment_id=2, value=1))

        assert handle.calls == []


class TestFind:
    """Tests for the vote find operations."""

    def test_found_votes_are_persisted(self, repo):
        """Votes read from storage should be marked persisted."""
        handle = RecordingHandle(rows=[vote_row(1, 2, -1)])

        vote = repo.find_by_comment_id(handle, 2)

        assert vote.identity == (1, 2)
        assert vote.value == -1
        assert vote.is_persisted is True

    def test_find_by_user_returns_list(self, repo):
        """Several votes by one user should come back as a list."""
        handle = RecordingHandle(rows=[vote_row(1, 2), vote_row(1, 3)])

        votes = repo.find_by_user_id(handle, 1)

        assert [v.comment_id for v in votes] == [2, 3]

    def test_find_by_value_binds_value(self, repo):
        """Value given as text should be bound as an int."""
        handle = RecordingHandle()

        assert repo.find_by_value(handle, "-1") is None
        assert handle.bound == {"value": -1}

    def test_find_by_value_requires_a_value(self, repo):
        """Missing or zero value should fail before any statement."""
        handle = RecordingHandle()

        with pytest.raises(InvalidInputError):
            repo.find_by_value(handle, None)
        with pytest.raises(OutOfRangeError):
            repo.find_by_value(handle, 0)

        assert handle.calls == []

    def test_stored_zero_vote_fails_the_call(self, repo):
        """Stored zero vote should fail the find."""
        handle = RecordingHandle(rows=[vote_row(value=0)])

        with pytest.raises(StorageError):
            repo.find_by_value(handle, 1)
