"""Domain value objects and validation rules for the forum."""

from forum.domain.value.identifiers import CommentId, UserId
from forum.domain.value.validation import (
    COMMENT_CONTENT_MAX_LENGTH,
    EMAIL_MAX_LENGTH,
    USERNAME_MAX_LENGTH,
    Clock,
    bounded_text,
    escape_like,
    positive_identifier,
    signed_unit_vote,
    system_clock,
    timestamp_or_now,
)

__all__ = [
    # Identifiers
    "UserId",
    "CommentId",
    # Limits
    "EMAIL_MAX_LENGTH",
    "USERNAME_MAX_LENGTH",
    "COMMENT_CONTENT_MAX_LENGTH",
    # Rules
    "Clock",
    "system_clock",
    "positive_identifier",
    "bounded_text",
    "timestamp_or_now",
    "signed_unit_vote",
    "escape_like",
]
