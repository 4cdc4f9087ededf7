"""Database connection management.

Provides the engine, schema creation and per-unit-of-work storage handles.
"""

from contextlib import contextmanager
from typing import Any, Iterator

from sqlalchemy import Engine, event
from sqlalchemy import create_engine as sa_create_engine
from sqlalchemy.pool import StaticPool

from forum.config import Settings
from forum.persistence.handle import SqlAlchemyHandle
from forum.persistence.tables import metadata


def create_engine(settings: Settings) -> Engine:
    """Create database engine.

    In-memory SQLite shares a single connection so every handle sees the same
    database. Foreign keys are switched on for SQLite, which leaves them off
    by default.

    Args:
        settings: Forum settings

    Returns:
        Configured engine
    """
    database = settings.database
    kwargs: dict[str, Any] = {"echo": database.echo, "pool_pre_ping": True}
    if database.is_in_memory:
        kwargs["poolclass"] = StaticPool
        kwargs["connect_args"] = {"check_same_thread": False}
    elif not database.is_sqlite:
        kwargs["pool_size"] = database.pool_size
        kwargs["max_overflow"] = database.max_overflow

    engine = sa_create_engine(database.url, **kwargs)

    if database.is_sqlite:

        @event.listens_for(engine, "connect")
        def _enable_foreign_keys(dbapi_connection, connection_record):
            cursor = dbapi_connection.cursor()
            cursor.execute("PRAGMA foreign_keys=ON")
            cursor.close()

    return engine


def create_schema(engine: Engine) -> None:
    """Create the users, comments and votes tables if they are missing."""
    metadata.create_all(engine)


@contextmanager
def open_handle(engine: Engine) -> Iterator[SqlAlchemyHandle]:
    """Open a storage handle inside a transaction.

    The transaction commits when the block exits normally and rolls back
    when it raises.

    Args:
        engine: Database engine

    Yields:
        Storage handle bound to a fresh connection
    """
    with engine.begin() as connection:
        yield SqlAlchemyHandle(connection)
