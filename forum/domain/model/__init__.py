"""Domain records for the forum."""

from forum.domain.model.comment import Comment
from forum.domain.model.user import User
from forum.domain.model.vote import Vote

__all__ = [
    "User",
    "Comment",
    "Vote",
]
