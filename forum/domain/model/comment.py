"""Comment record.

Comments belong to a user by foreign key only; the author is never held as a
record, so no reference cycles can form between records.
"""

from datetime import datetime
from typing import Any, ClassVar, Optional

from pydantic import Field, ValidationInfo, field_validator

from forum.domain.model.common import DomainModel
from forum.domain.value import (
    COMMENT_CONTENT_MAX_LENGTH,
    CommentId,
    UserId,
    bounded_text,
    positive_identifier,
    system_clock,
    timestamp_or_now,
)


class Comment(DomainModel):
    """Comment record.

    Represents one comment written by a user. ``id`` is None until the
    comment is inserted. ``created_at`` defaults to the current time; pass a
    clock in the validation context to control it::

        Comment.model_validate(data, context={"clock": fixed_clock})
    """

    identity_fields: ClassVar[tuple[str, ...]] = ("id",)

    id: Optional[CommentId] = None
    author_id: UserId = Field(default=None, validate_default=True)
    content: str = Field(default=None, validate_default=True)
    created_at: datetime = Field(default=None, validate_default=True)

    @field_validator("id", mode="before")
    @classmethod
    def validate_id(cls, v: Any) -> Optional[int]:
        return cls._normalize(
            positive_identifier, v, field="comment id", nullable=True
        )

    @field_validator("author_id", mode="before")
    @classmethod
    def validate_author_id(cls, v: Any) -> int:
        return cls._normalize(positive_identifier, v, field="user id")

    @field_validator("content", mode="before")
    @classmethod
    def validate_content(cls, v: Any) -> str:
        return cls._normalize(
            bounded_text, v, COMMENT_CONTENT_MAX_LENGTH, field="comment content"
        )

    @field_validator("created_at", mode="before")
    @classmethod
    def validate_created_at(cls, v: Any, info: ValidationInfo) -> datetime:
        clock = (info.context or {}).get("clock", system_clock)
        return cls._normalize(timestamp_or_now, v, field="comment date", clock=clock)
