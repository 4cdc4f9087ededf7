"""SQL repository implementations."""

from forum.persistence.repository.comment import SqlCommentRepository
from forum.persistence.repository.user import SqlUserRepository
from forum.persistence.repository.vote import SqlVoteRepository

__all__ = [
    "SqlUserRepository",
    "SqlCommentRepository",
    "SqlVoteRepository",
]
