"""Unit tests for the Vote record."""

import pytest

from forum.domain.error import AlreadyExistsError, InvalidTypeError, OutOfRangeError
from forum.domain.model import Vote


class TestVoteConstruction:
    """Tests for building votes."""

    @pytest.mark.parametrize("value", [1, -1])
    def test_unit_values_are_accepted(self, value, fixed_clock):
        """Upvote and downvote should both be accepted."""
        vote = Vote.model_validate(
            {"user_id": 1, "comment_id": 2, "value": value},
            context={"clock": fixed_clock},
        )

        assert vote.value == value
        assert vote.recorded_at == fixed_clock()
        assert vote.is_persisted is False

    def test_value_may_be_absent(self):
        """Vote without a value should hold None."""
        vote = Vote(user_id=1, comment_id=2)

        assert vote.value is None

    @pytest.mark.parametrize("value", [0, 2, -2])
    def test_other_values_are_rejected(self, value):
        """Anything but 1 or -1 should be out of range."""
        with pytest.raises(OutOfRangeError) as exc_info:
            Vote(user_id=1, comment_id=2, value=value)

        assert exc_info.value.entity == "Vote"
        assert exc_info.value.field == "vote"

    def test_composite_identity_is_required(self):
        """Comment id given as None should be an invalid type."""
        with pytest.raises(InvalidTypeError):
            Vote(user_id=1, comment_id=None, value=1)

    def test_omitted_comment_id_is_rejected(self):
        """Leaving out the comment id should fail like None."""
        with pytest.raises(InvalidTypeError) as exc_info:
            Vote(user_id=1, value=1)

        assert exc_info.value.entity == "Vote"
        assert exc_info.value.field == "comment id"

    def test_omitted_user_id_is_rejected_first(self):
        """With no ids given, user id is the first field rejected."""
        with pytest.raises(InvalidTypeError) as exc_info:
            Vote(value=1)

        assert exc_info.value.field == "user id"

    def test_persisted_marker_is_not_dumped(self):
        """Persisted marker should stay out of model_dump."""
        vote = Vote(user_id=1, comment_id=2, value=1, persisted=True)

        assert "persisted" not in vote.model_dump()
        assert vote.is_persisted is True

    def test_identity_tuple(self):
        """Identity should be the (user id, comment id) pair."""
        vote = Vote(user_id=1, comment_id=2, value=1)

        assert vote.identity == (1, 2)


class TestVoteAssignment:
    """Tests for changing vote fields after construction."""

    def test_value_can_flip(self):
        """Persisted vote should accept a new value."""
        vote = Vote(user_id=1, comment_id=2, value=1, persisted=True)

        vote.value = -1

        assert vote.value == -1

    def test_zero_assignment_is_rejected(self):
        """Zero should be rejected and the old value kept."""
        vote = Vote(user_id=1, comment_id=2, value=1)

        with pytest.raises(OutOfRangeError):
            vote.value = 0

        assert vote.value == 1

    def test_identity_can_change_before_persisting(self):
        """Unpersisted vote should allow its ids to change."""
        vote = Vote(user_id=1, comment_id=2, value=1)

        vote.comment_id = 3

        assert vote.identity == (1, 3)

    def test_identity_is_frozen_once_persisted(self):
        """Persisted vote should refuse a different user id."""
        vote = Vote(user_id=1, comment_id=2, value=1, persisted=True)

        with pytest.raises(AlreadyExistsError):
            vote.user_id = 9

        assert vote.identity == (1, 2)

    def test_same_identity_as_text_is_allowed(self):
        """Persisted vote should accept its own comment id given as text."""
        vote = Vote(user_id=1, comment_id=2, value=1, persisted=True)

        vote.comment_id = "2"

        assert vote.identity == (1, 2)
