"""SQLAlchemy implementation of the storage handle."""

from dataclasses import dataclass, field
from typing import Any, Mapping, Optional

from sqlalchemy import Connection, CursorResult
from sqlalchemy.exc import ArgumentError, InvalidRequestError, ResourceClosedError
from sqlalchemy.sql.expression import Executable


@dataclass
class PreparedStatement:
    """A compiled query together with its bound values and result."""

    query: Executable
    placeholders: frozenset[str]
    params: dict[str, Any] = field(default_factory=dict)
    result: Optional[CursorResult] = None
    closed: bool = False


class SqlAlchemyHandle:
    """Storage handle over a SQLAlchemy connection.

    The handle does not manage transactions; whoever opened the connection
    decides when to commit.
    """

    def __init__(self, connection: Connection) -> None:
        """Initialize handle with a database connection.

        Args:
            connection: Open SQLAlchemy connection
        """
        self.connection = connection

    @property
    def closed(self) -> bool:
        return self.connection.closed or self.connection.invalidated

    def prepare(self, query: Executable) -> PreparedStatement:
        """Compile the query for this connection's dialect."""
        if self.closed:
            raise ResourceClosedError("This Connection is closed")
        compiled = query.compile(dialect=self.connection.dialect)  # type: ignore[attr-defined]
        return PreparedStatement(query=query, placeholders=frozenset(compiled.params))

    def bind(self, statement: PreparedStatement, params: Mapping[str, Any]) -> None:
        """Bind values, requiring exactly one value per placeholder."""
        self._check_open(statement)
        supplied = set(params)
        missing = statement.placeholders - supplied
        unexpected = supplied - statement.placeholders
        if missing or unexpected:
            raise ArgumentError(
                f"unable to bind parameters: missing={sorted(missing)} "
                f"unexpected={sorted(unexpected)}"
            )
        statement.params = dict(params)

    def execute(self, statement: PreparedStatement) -> None:
        self._check_open(statement)
        statement.result = self.connection.execute(statement.query, statement.params)

    def inserted_identity(self, statement: PreparedStatement) -> int:
        result = self._result(statement)
        primary_key = result.inserted_primary_key
        if not primary_key or primary_key[0] is None:
            raise InvalidRequestError("storage did not assign an identity")
        return int(primary_key[0])

    def fetch_rows(self, statement: PreparedStatement) -> list[dict[str, Any]]:
        result = self._result(statement)
        return [dict(row) for row in result.mappings()]

    def close(self, statement: PreparedStatement) -> None:
        if statement.closed:
            return
        if statement.result is not None:
            statement.result.close()
        statement.closed = True

    def _check_open(self, statement: PreparedStatement) -> None:
        if statement.closed:
            raise ResourceClosedError("This statement is closed")
        if self.closed:
            raise ResourceClosedError("This Connection is closed")

    def _result(self, statement: PreparedStatement) -> CursorResult:
        self._check_open(statement)
        if statement.result is None:
            raise InvalidRequestError("statement has not been executed")
        return statement.result
