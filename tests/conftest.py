"""Pytest configuration and shared fixtures for the pagestate tests."""

import logging
from typing import Any, Dict, List, Optional, Sequence
from unittest.mock import Mock

import pytest

from pagestate.hooks.metrics import NoopMetrics


# Disable logging for cleaner test output
logging.getLogger("pagestate").setLevel(logging.WARNING)


class FakeRows:
    """Row iterator over one scripted page."""

    def __init__(self, rows: List[Dict[str, Any]], cursor: Optional[bytes], close_error: Optional[Exception] = None):
        self._rows = iter(rows)
        self._cursor = cursor
        self._close_error = close_error
        self.closed = False

    def __iter__(self):
        return self

    def __next__(self) -> Dict[str, Any]:
        return next(self._rows)

    def continuation_cursor(self) -> Optional[bytes]:
        return self._cursor

    def close(self) -> None:
        self.closed = True
        if self._close_error is not None:
            raise self._close_error


class FakeQuery:
    """Records how the paginator configures a statement."""

    def __init__(self, session: "InMemorySession", statement: str, values: Sequence[Any]):
        self.session = session
        self.statement = statement
        self.values = list(values)
        self.page_size: Optional[int] = None
        self.cursor: Optional[bytes] = None
        self.cancellation: Any = None

    def with_page_size(self, page_size: int) -> "FakeQuery":
        self.page_size = page_size
        return self

    def with_resume_cursor(self, cursor: bytes) -> "FakeQuery":
        self.cursor = cursor
        return self

    def with_cancellation(self, signal: Any) -> "FakeQuery":
        self.cancellation = signal
        return self

    def execute(self) -> FakeRows:
        self.session.executed.append(self)
        return self.session.page_for(self)


class InMemorySession:
    """Session serving a fixed list of rows, using the row offset as page state."""

    def __init__(
        self,
        rows: Optional[List[Dict[str, Any]]] = None,
        error: Optional[Exception] = None,
        close_error: Optional[Exception] = None
    ):
        self.rows = rows or []
        self.error = error
        self.close_error = close_error
        self.executed: List[FakeQuery] = []
        self.iterators: List[FakeRows] = []

    def query(self, statement: str, values: Sequence[Any]) -> FakeQuery:
        return FakeQuery(self, statement, values)

    def page_for(self, query: FakeQuery) -> FakeRows:
        if self.error is not None:
            raise self.error
        offset = int(query.cursor.decode()) if query.cursor else 0
        end = offset + (query.page_size or len(self.rows))
        cursor = str(end).encode() if end < len(self.rows) else None
        rows = FakeRows(self.rows[offset:end], cursor, self.close_error)
        self.iterators.append(rows)
        return rows


class ScriptedSession(InMemorySession):
    """Session returning scripted pages keyed by resume cursor."""

    def __init__(self, pages: Dict[Optional[bytes], tuple]):
        super().__init__()
        self.pages = pages

    def page_for(self, query: FakeQuery) -> FakeRows:
        rows, cursor = self.pages[query.cursor]
        result = FakeRows(list(rows), cursor)
        self.iterators.append(result)
        return result


class RecordingLogger:
    """Event hook that keeps every event."""

    def __init__(self):
        self.events: List[tuple] = []

    def __call__(self, event: str, fields: Dict[str, Any]) -> None:
        self.events.append((event, fields))

    @property
    def names(self) -> List[str]:
        return [event for event, _ in self.events]

    def fields(self, name: str) -> Dict[str, Any]:
        return next(fields for event, fields in self.events if event == name)


@pytest.fixture
def user_rows() -> List[Dict[str, Any]]:
    """Twenty-five sample user rows."""
    return [
        {"user_id": f"u{i:03d}", "name": f"User {i}", "age": 20 + i}
        for i in range(25)
    ]


@pytest.fixture
def memory_session(user_rows: List[Dict[str, Any]]) -> InMemorySession:
    """In-memory session over the sample users."""
    return InMemorySession(user_rows)


@pytest.fixture
def scripted_session() -> ScriptedSession:
    """One row with continuation X, then an empty final page."""
    return ScriptedSession({
        None: ([{"name": "Anukriti", "count": 1}], b"X"),
        b"X": ([], None),
    })


@pytest.fixture
def recording_logger() -> RecordingLogger:
    """Structured event hook that records events."""
    return RecordingLogger()


@pytest.fixture
def mock_metrics() -> Mock:
    """Metrics hook mock."""
    return Mock(spec=NoopMetrics)


# Pytest markers for test categorization
def pytest_configure(config):
    """Register custom pytest markers."""
    config.addinivalue_line("markers", "unit: Unit tests (fast, mocked)")
    config.addinivalue_line("markers", "integration: Integration tests (paginator over in-memory sessions)")


def pytest_collection_modifyitems(config, items):
    """Automatically mark tests based on their location."""
    for item in items:
        if "integration" in str(item.fspath):
            item.add_marker(pytest.mark.integration)

        if "unit" in str(item.fspath):
            item.add_marker(pytest.mark.unit)
