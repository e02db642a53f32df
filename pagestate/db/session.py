"""Execution collaborator interfaces consumed by the paginator.

A session issues a parameterized statement and returns a handle that is
configured fluently before execution::

    rows = (
        session.query(statement, values)
        .with_page_size(100)
        .with_resume_cursor(cursor)
        .with_cancellation(timeout)
        .execute()
    )
    for row in rows:
        ...
    cursor = rows.continuation_cursor()
    rows.close()
"""

from typing import Any, Iterator, Mapping, Optional, Protocol, Sequence


class RowIterator(Protocol):
    """Iterator over the rows of one page."""

    def __iter__(self) -> Iterator[Mapping[str, Any]]:
        ...

    def __next__(self) -> Mapping[str, Any]:
        ...

    def continuation_cursor(self) -> Optional[bytes]:
        """Page state to resume from, empty or None once the results are exhausted."""
        ...

    def close(self) -> None:
        """Release the iterator, raising if the query failed."""
        ...


class Query(Protocol):
    """A statement handle that has not been executed yet."""

    def with_page_size(self, page_size: int) -> "Query":
        ...

    def with_resume_cursor(self, cursor: bytes) -> "Query":
        ...

    def with_cancellation(self, signal: Any) -> "Query":
        ...

    def execute(self) -> RowIterator:
        ...


class Session(Protocol):
    """Issues parameterized statements against the store."""

    def query(self, statement: str, values: Sequence[Any]) -> Query:
        ...
