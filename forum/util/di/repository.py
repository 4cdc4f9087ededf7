"""Repository and storage handle providers (non-mockable)."""

from collections.abc import Iterator

from dishka import Scope, provide
from sqlalchemy import Engine

from forum.domain.repository import (
    CommentRepository,
    StorageHandle,
    UserRepository,
    VoteRepository,
)
from forum.persistence.database import open_handle
from forum.persistence.repository import (
    SqlCommentRepository,
    SqlUserRepository,
    SqlVoteRepository,
)
from forum.util.di.base import ProviderBase


class RepositoryProvider(ProviderBase):
    """Repositories are stateless and shared; handles live for one request."""

    @provide(scope=Scope.REQUEST)
    def get_storage_handle(self, engine: Engine) -> Iterator[StorageHandle]:
        """Provide a storage handle for request scope.

        The handle's transaction commits when the request scope closes.
        """
        with open_handle(engine) as handle:
            yield handle

    @provide(scope=Scope.APP)
    def get_user_repository(self) -> UserRepository:
        """Provide User repository."""
        return SqlUserRepository()

    @provide(scope=Scope.APP)
    def get_comment_repository(self) -> CommentRepository:
        """Provide Comment repository."""
        return SqlCommentRepository()

    @provide(scope=Scope.APP)
    def get_vote_repository(self) -> VoteRepository:
        """Provide Vote repository."""
        return SqlVoteRepository()
