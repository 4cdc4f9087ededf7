"""Shared statement handling for SQL repositories."""

from contextlib import contextmanager
from typing import Any, Callable, ClassVar, Dict, Iterator, List, Mapping, TypeVar

import logfire
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.sql.expression import Executable

from forum.domain.error import ValidationError
from forum.domain.repository import Found, StorageHandle
from forum.persistence.error import InvalidHandleError, StorageError

R = TypeVar("R")


class SqlRepository:
    """Base class for repositories that run statements through a handle.

    Subclasses set ``resource`` to the record name used in errors and logs.
    """

    resource: ClassVar[str] = "record"

    def _check_handle(self, handle: Any) -> None:
        """Reject missing, foreign or closed handles.

        Raises:
            InvalidHandleError: If the handle cannot be used
        """
        if handle is None or not isinstance(handle, StorageHandle):
            raise InvalidHandleError("input is not a storage handle")
        if handle.closed:
            raise InvalidHandleError("storage handle is closed")

    @contextmanager
    def _statement(
        self, handle: StorageHandle, query: Executable, params: Mapping[str, Any]
    ) -> Iterator[Any]:
        """Prepare, bind and execute a statement, closing it on every exit.

        Driver failures raised while running the statement, or inside the
        ``with`` block, surface as StorageError.

        Yields:
            The executed statement
        """
        statement = None
        try:
            statement = handle.prepare(query)
            handle.bind(statement, params)
            handle.execute(statement)
            yield statement
        except SQLAlchemyError as e:
            logfire.warn(
                "Statement failed",
                resource=self.resource,
                error=str(e),
                error_type=type(e).__name__,
            )
            raise StorageError(f"unable to run {self.resource} statement: {e}") from e
        finally:
            if statement is not None:
                handle.close(statement)

    def _find(
        self,
        handle: StorageHandle,
        query: Executable,
        params: Dict[str, Any],
        row_to_record: Callable[[Dict[str, Any]], R],
    ) -> Found[R]:
        """Run a query and materialize its rows.

        A single row that fails validation fails the whole call.

        Raises:
            StorageError: If the query fails or any row is rejected
        """
        with self._statement(handle, query, params) as statement:
            rows = handle.fetch_rows(statement)

        try:
            records = [row_to_record(row) for row in rows]
        except ValidationError as e:
            logfire.warn(
                "Stored row failed validation", resource=self.resource, error=str(e)
            )
            raise StorageError(
                f"unable to convert row to {self.resource}: {e}"
            ) from e

        logfire.info("Rows fetched", resource=self.resource, count=len(records))
        return self._collapse(records)

    @staticmethod
    def _collapse(records: List[R]) -> Found[R]:
        """Return None, the only record, or the whole list."""
        if not records:
            return None
        if len(records) == 1:
            return records[0]
        return records
