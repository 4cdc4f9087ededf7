"""Vote record.

A vote is one user's +1 or -1 on one comment. The pair of ids is the
record's identity, chosen by the caller rather than assigned by storage, so
persistence state is kept in an explicit ``persisted`` marker instead of
being inferred from a missing id or value.
"""

from datetime import datetime
from typing import Any, ClassVar, Optional

from pydantic import Field, ValidationInfo, field_validator

from forum.domain.model.common import DomainModel
from forum.domain.value import (
    CommentId,
    UserId,
    positive_identifier,
    signed_unit_vote,
    system_clock,
    timestamp_or_now,
)


class Vote(DomainModel):
    """Vote record.

    Business rules:
    - One vote per user per comment (enforced by the storage primary key)
    - ``value`` is exactly 1 or -1 once cast; None means no value yet
    - ``user_id`` and ``comment_id`` are frozen once the vote is persisted
    """

    identity_fields: ClassVar[tuple[str, ...]] = ("user_id", "comment_id")

    user_id: UserId = Field(default=None, validate_default=True)
    comment_id: CommentId = Field(default=None, validate_default=True)
    recorded_at: datetime = Field(default=None, validate_default=True)
    value: Optional[int] = None
    persisted: bool = Field(default=False, exclude=True)

    @property
    def is_persisted(self) -> bool:
        return self.persisted

    @field_validator("user_id", mode="before")
    @classmethod
    def validate_user_id(cls, v: Any) -> int:
        return cls._normalize(positive_identifier, v, field="user id")

    @field_validator("comment_id", mode="before")
    @classmethod
    def validate_comment_id(cls, v: Any) -> int:
        return cls._normalize(positive_identifier, v, field="comment id")

    @field_validator("recorded_at", mode="before")
    @classmethod
    def validate_recorded_at(cls, v: Any, info: ValidationInfo) -> datetime:
        clock = (info.context or {}).get("clock", system_clock)
        return cls._normalize(timestamp_or_now, v, field="time recorded", clock=clock)

    @field_validator("value", mode="before")
    @classmethod
    def validate_value(cls, v: Any) -> Optional[int]:
        return cls._normalize(signed_unit_vote, v, field="vote")
