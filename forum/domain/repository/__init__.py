"""Repository interfaces for the forum domain.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the persistence layer.
"""

from forum.domain.repository.comment import CommentRepository
from forum.domain.repository.storage import StorageHandle
from forum.domain.repository.common import Found
from forum.domain.repository.user import UserRepository
from forum.domain.repository.vote import VoteRepository

__all__ = [
    "Found",
    "StorageHandle",
    "UserRepository",
    "CommentRepository",
    "VoteRepository",
]
