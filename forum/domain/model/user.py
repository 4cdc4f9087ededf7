"""User record.

Users are identified by a storage-assigned integer and carry the email and
username they signed up with.
"""

from typing import Any, ClassVar, Optional

from pydantic import Field, field_validator

from forum.domain.model.common import DomainModel
from forum.domain.value import (
    EMAIL_MAX_LENGTH,
    USERNAME_MAX_LENGTH,
    UserId,
    bounded_text,
    positive_identifier,
)


class User(DomainModel):
    """User record.

    ``id`` is None until the user is inserted; after that it never changes.
    """

    identity_fields: ClassVar[tuple[str, ...]] = ("id",)

    id: Optional[UserId] = None
    email: str = Field(default=None, validate_default=True)
    username: str = Field(default=None, validate_default=True)

    @field_validator("id", mode="before")
    @classmethod
    def validate_id(cls, v: Any) -> Optional[int]:
        return cls._normalize(positive_identifier, v, field="user id", nullable=True)

    @field_validator("email", mode="before")
    @classmethod
    def validate_email(cls, v: Any) -> str:
        return cls._normalize(bounded_text, v, EMAIL_MAX_LENGTH, field="email")

    @field_validator("username", mode="before")
    @classmethod
    def validate_username(cls, v: Any) -> str:
        return cls._normalize(bounded_text, v, USERNAME_MAX_LENGTH, field="username")
