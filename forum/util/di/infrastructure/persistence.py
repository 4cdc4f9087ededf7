"""Database engine providers."""

from collections.abc import Iterator

from dishka import Scope, provide
from sqlalchemy import Engine

from forum.config import Settings
from forum.persistence.database import create_engine
from forum.util.di.base import ProviderBase
from forum.util.observability import instrument_sqlalchemy


class PersistenceProvider(ProviderBase):
    """Swappable component that provides the ``Engine``."""

    __mock_component__ = "persistence"


class ProdPersistenceProvider(PersistenceProvider):
    """Engine for ``DATABASE__URL``, traced by logfire."""

    __is_mock__ = False

    @provide(scope=Scope.APP)
    def get_engine(self, settings: Settings) -> Iterator[Engine]:
        """Provide the engine; it is disposed when the container closes."""
        engine = create_engine(settings)
        instrument_sqlalchemy(engine)
        yield engine
        engine.dispose()
