"""Storage handle contract.

Repositories never talk to a driver directly. They receive a handle that can
prepare a query, bind parameters to it, execute it, and hand back either the
identity assigned by an insert or the fetched rows. Statements are scoped
resources: every statement a repository prepares is closed before the
repository returns, on error paths too.
"""

from typing import Any, Mapping, Protocol, runtime_checkable

from sqlalchemy.sql.expression import Executable


@runtime_checkable
class StorageHandle(Protocol):
    """Capabilities a repository needs from a database connection.

    Every method raises ``sqlalchemy.exc.SQLAlchemyError`` on failure.
    """

    @property
    def closed(self) -> bool:
        """Whether the underlying connection can no longer be used."""
        ...

    def prepare(self, query: Executable) -> Any:
        """Prepare a query template and return an open statement."""
        ...

    def bind(self, statement: Any, params: Mapping[str, Any]) -> None:
        """Bind values to the statement's named placeholders."""
        ...

    def execute(self, statement: Any) -> None:
        """Execute a prepared, bound statement."""
        ...

    def inserted_identity(self, statement: Any) -> int:
        """Return the primary key assigned by an executed insert."""
        ...

    def fetch_rows(self, statement: Any) -> list[dict[str, Any]]:
        """Return the rows of an executed query as column-name mappings."""
        ...

    def close(self, statement: Any) -> None:
        """Release the statement. Closing twice is a no-op."""
        ...
