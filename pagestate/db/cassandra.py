"""Cassandra session adapter for the paginator."""

import logging
import threading
from typing import TYPE_CHECKING, Any, Dict, Iterator, List, Mapping, Optional, Sequence

if TYPE_CHECKING:
    from cassandra.cluster import ResultSet, Session as CqlSession
    from cassandra.query import PreparedStatement

logger = logging.getLogger(__name__)


def row_to_dict(row: Any) -> Dict[str, Any]:
    """Convert a driver row (named tuple or mapping) into a plain dict."""
    if isinstance(row, Mapping):
        return dict(row)
    if hasattr(row, "_asdict"):
        return dict(row._asdict())
    raise TypeError(f"Unsupported row type: {type(row).__name__}")


class CassandraRows:
    """Rows of the single page held by a driver ResultSet."""

    def __init__(self, result: "ResultSet"):
        self._result = result
        self._rows = iter(result.current_rows)

    def __iter__(self) -> Iterator[Dict[str, Any]]:
        return self

    def __next__(self) -> Dict[str, Any]:
        return row_to_dict(next(self._rows))

    def continuation_cursor(self) -> Optional[bytes]:
        return self._result.paging_state

    def close(self) -> None:
        # The driver raises during execute(); there is nothing left to release.
        self._rows = iter(())


class CassandraQuery:
    """Fluent handle that binds and executes a prepared statement."""

    def __init__(self, session: "CassandraSession", statement: str, values: Sequence[Any]):
        self._session = session
        self._statement = statement
        self._values = list(values)
        self._page_size: Optional[int] = None
        self._paging_state: Optional[bytes] = None
        self._timeout: Optional[float] = None

    def with_page_size(self, page_size: int) -> "CassandraQuery":
        self._page_size = page_size
        return self

    def with_resume_cursor(self, cursor: bytes) -> "CassandraQuery":
        self._paging_state = cursor or None
        return self

    def with_cancellation(self, signal: Any) -> "CassandraQuery":
        """Use a numeric signal as the request timeout in seconds."""
        if isinstance(signal, (int, float)) and not isinstance(signal, bool):
            self._timeout = float(signal)
        else:
            logger.debug(f"Ignoring unsupported cancellation signal {signal!r}")
        return self

    def execute(self) -> CassandraRows:
        prepared = self._session.prepare(self._statement)
        bound = prepared.bind(self._values)
        if self._page_size:
            bound.fetch_size = self._page_size

        kwargs: Dict[str, Any] = {"paging_state": self._paging_state}
        if self._timeout is not None:
            kwargs["timeout"] = self._timeout

        result = self._session.cql_session.execute(bound, **kwargs)
        return CassandraRows(result)


class CassandraSession:
    """
    Session adapter over a cassandra-driver Session.

    Statements use "?" placeholders and are prepared once per adapter.
    """

    def __init__(self, cql_session: "CqlSession"):
        self.cql_session = cql_session
        self._prepared: Dict[str, "PreparedStatement"] = {}
        self._lock = threading.Lock()

    def prepare(self, statement: str) -> "PreparedStatement":
        """Get the prepared form of a statement, preparing it on first use."""
        with self._lock:
            prepared = self._prepared.get(statement)
        if prepared is not None:
            return prepared

        prepared = self.cql_session.prepare(statement)
        with self._lock:
            self._prepared.setdefault(statement, prepared)
            return self._prepared[statement]

    def query(self, statement: str, values: Sequence[Any]) -> CassandraQuery:
        return CassandraQuery(self, statement, values)

    def prepared_statements(self) -> List[str]:
        """Get the statements prepared so far."""
        with self._lock:
            return list(self._prepared)
