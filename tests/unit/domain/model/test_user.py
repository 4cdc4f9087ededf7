"""Unit tests for the User record."""

import pytest

from forum.domain.error import (
    AlreadyExistsError,
    InvalidInputError,
    InvalidTypeError,
    OutOfRangeError,
)
from forum.domain.model import User


class TestUserConstruction:
    """Tests for building users."""

    def test_new_user_is_normalized_and_unpersisted(self):
        """New user should be trimmed, stripped of markup and have no id."""
        user = User(email="  jay@example.com ", username="<i>jay</i>")

        assert user.id is None
        assert user.email == "jay@example.com"
        assert user.username == "jay"
        assert user.is_persisted is False

    def test_user_with_id_is_persisted(self):
        """User built with an id should count as persisted."""
        user = User(id="12", email="jay@example.com", username="jay")

        assert user.id == 12
        assert user.is_persisted is True

    def test_rejection_carries_entity_and_field(self):
        """Rejection should name the record and the field."""
        with pytest.raises(InvalidInputError) as exc_info:
            User(email="   ", username="jay")

        assert exc_info.value.entity == "User"
        assert exc_info.value.field == "email"
        assert str(exc_info.value).startswith("User: ")

    def test_first_rejection_wins(self):
        """Fields are checked in declaration order: id, email, username."""
        with pytest.raises(OutOfRangeError) as exc_info:
            User(id=0, email="", username="x" * 100)

        assert exc_info.value.field == "user id"

    def test_omitted_username_is_rejected_as_empty(self):
        """Leaving out username should fail like an empty username."""
        with pytest.raises(InvalidInputError) as exc_info:
            User(email="jay@example.com")

        assert exc_info.value.entity == "User"
        assert exc_info.value.field == "username"

    def test_omitted_email_is_rejected_before_username(self):
        """With nothing given, email is the first field rejected."""
        with pytest.raises(InvalidInputError) as exc_info:
            User()

        assert exc_info.value.field == "email"

    def test_email_over_128_characters_is_rejected(self):
        """Email longer than its column should be out of range."""
        with pytest.raises(OutOfRangeError):
            User(email="a" * 129, username="jay")

    def test_username_over_32_characters_is_rejected(self):
        """Username longer than its column should be out of range."""
        with pytest.raises(OutOfRangeError):
            User(email="jay@example.com", username="j" * 33)

    def test_non_integer_id_is_rejected(self):
        """Id that is not an integer should be an invalid type."""
        with pytest.raises(InvalidTypeError):
            User(id="seven", email="jay@example.com", username="jay")


class TestUserAssignment:
    """Tests for changing user fields after construction."""

    def test_assignment_is_normalized(self):
        """Assigned username should be trimmed like at construction."""
        user = User(email="jay@example.com", username="jay")

        user.username = "  renamed  "

        assert user.username == "renamed"

    def test_rejected_assignment_keeps_old_value(self):
        """Failed assignment should leave the previous value in place."""
        user = User(email="jay@example.com", username="jay")

        with pytest.raises(OutOfRangeError) as exc_info:
            user.username = "x" * 33

        assert exc_info.value.entity == "User"
        assert user.username == "jay"

    def test_id_can_be_assigned_once(self):
        """Unpersisted user should accept an id."""
        user = User(email="jay@example.com", username="jay")

        user.id = 5

        assert user.id == 5
        assert user.is_persisted is True

    def test_assigned_id_cannot_change(self):
        """Persisted user should refuse a different id or None."""
        user = User(id=5, email="jay@example.com", username="jay")

        with pytest.raises(AlreadyExistsError):
            user.id = 6
        with pytest.raises(AlreadyExistsError):
            user.id = None

        assert user.id == 5

    def test_reassigning_same_id_is_allowed(self):
        """Assigning the current id again should be a no-op."""
        user = User(id=5, email="jay@example.com", username="jay")

        user.id = 5

        assert user.id == 5

    def test_reassigning_same_id_as_text_is_allowed(self):
        """Id is compared after normalization, so "3" equals 3."""
        user = User(id=3, email="jay@example.com", username="jay")

        user.id = " 3 "

        assert user.id == 3

    def test_reassigning_invalid_id_is_rejected_by_its_rule(self):
        """Malformed id on a persisted user should fail validation."""
        user = User(id=3, email="jay@example.com", username="jay")

        with pytest.raises(InvalidTypeError):
            user.id = "three"

        assert user.id == 3
