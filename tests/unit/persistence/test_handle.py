"""Unit tests for SqlAlchemyHandle against in-memory SQLite."""

import pytest
from sqlalchemy import bindparam, insert, select
from sqlalchemy.exc import ArgumentError, ResourceClosedError

from forum.config import DatabaseSettings, Settings
from forum.domain.repository import StorageHandle
from forum.persistence.database import create_engine, create_schema, open_handle
from forum.persistence.handle import SqlAlchemyHandle
from forum.persistence.tables import users_table

INSERT_USER = insert(users_table).values(
    email=bindparam("user_email"), username=bindparam("user_name")
)
SELECT_USER = select(users_table).where(users_table.c.userId == bindparam("user_id"))


@pytest.fixture
def engine():
    settings = Settings(environment="test", database=DatabaseSettings(url="sqlite://"))
    engine = create_engine(settings)
    create_schema(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def handle(engine):
    with open_handle(engine) as handle:
        yield handle


class TestSqlAlchemyHandle:
    """Tests for the SQLAlchemy storage handle."""

    def test_satisfies_storage_handle_protocol(self, handle):
        """Handle should satisfy StorageHandle and start open."""
        assert isinstance(handle, StorageHandle)
        assert handle.closed is False

    def test_prepare_collects_placeholders(self, handle):
        """Prepared statement should know its placeholder names."""
        statement = handle.prepare(INSERT_USER)

        assert statement.placeholders == frozenset({"user_email", "user_name"})

    def test_insert_then_fetch(self, handle):
        """Inserted row should be readable through the same handle."""
        # Arrange
        inserted = handle.prepare(INSERT_USER)
        handle.bind(inserted, {"user_email": "jay@example.com", "user_name": "jay"})

        # Act
        handle.execute(inserted)
        user_id = handle.inserted_identity(inserted)
        handle.close(inserted)

        selected = handle.prepare(SELECT_USER)
        handle.bind(selected, {"user_id": user_id})
        handle.execute(selected)
        rows = handle.fetch_rows(selected)
        handle.close(selected)

        # Assert
        assert rows == [{"userId": user_id, "email": "jay@example.com", "username": "jay"}]

    def test_bind_rejects_missing_placeholder(self, handle):
        """Binding without every placeholder should fail."""
        statement = handle.prepare(INSERT_USER)

        with pytest.raises(ArgumentError):
            handle.bind(statement, {"user_email": "jay@example.com"})

    def test_bind_rejects_unexpected_name(self, handle):
        """Binding an unknown name should fail."""
        statement = handle.prepare(SELECT_USER)

        with pytest.raises(ArgumentError):
            handle.bind(statement, {"user_id": 1, "extra": 2})

    def test_closed_statement_cannot_execute(self, handle):
        """Closed statement should refuse to execute."""
        statement = handle.prepare(SELECT_USER)
        handle.bind(statement, {"user_id": 1})
        handle.close(statement)
        handle.close(statement)

        with pytest.raises(ResourceClosedError):
            handle.execute(statement)

    def test_handle_reports_closed_connection(self, engine):
        """Handle on a closed connection should report closed and refuse work."""
        connection = engine.connect()
        handle = SqlAlchemyHandle(connection)
        connection.close()

        assert handle.closed is True
        with pytest.raises(ResourceClosedError):
            handle.prepare(SELECT_USER)
