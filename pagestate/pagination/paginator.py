"""Token-based paginator over a wide-column store session."""

import logging
import time
from itertools import islice
from typing import Any, Dict, List, NamedTuple, NoReturn, Optional, Tuple

from ..db.session import Session
from ..errors.pagination import InvalidToken, NoPreviousPage, QueryFailed
from .filters import compile_filters
from .history import TokenHistory
from .options import PaginatorOptions
from .token import TokenEnvelope, decode_token, encode_token

logger = logging.getLogger(__name__)


class Page(NamedTuple):
    """One page of rows and the token for the page after it."""
    rows: List[Dict[str, Any]]
    next_token: str


class Paginator:
    """
    Walks a query's result set forward and backward in fixed-size pages.

    Every token handed out embeds the token that fetched the page before, so
    going back is a pure function of the token the caller holds. A TokenHistory
    can be attached as a local accelerator; it records every next token issued.

    The paginator keeps no per-call state, so one instance can serve concurrent
    calls.
    """

    def __init__(
        self,
        session: Session,
        query: str,
        options: Optional[PaginatorOptions] = None,
        history: Optional[TokenHistory] = None
    ):
        """
        Initialize the paginator.

        Args:
            session: Execution collaborator issuing the statements
            query: Base query, optionally with a * projection and a WHERE clause
            options: Page size, projection, filters and hooks
            history: Optional token history to record issued tokens in
        """
        self.session = session
        self.query = query
        self.options = options or PaginatorOptions()
        self.history = history

    @property
    def page_size(self) -> int:
        return self.options.page_size

    def next(self) -> Page:
        """Fetch the first page of the result set."""
        return self.fetch_with_token("")

    def fetch_with_token(self, token: str) -> Page:
        """
        Fetch the page a token points to.

        Args:
            token: Token returned with an earlier page, or empty for the first page

        Returns:
            The page's rows and the token for the following page ("" at the end)

        Raises:
            InvalidToken: If the token cannot be decoded; no query is issued
            QueryFailed: If the session fails to execute the query
        """
        envelope = self._decode(token)
        statement, values = self.build_statement()

        start = time.perf_counter()
        try:
            rows, continuation = self._execute(statement, values, envelope.cursor)
        except Exception as e:
            duration = time.perf_counter() - start
            self._emit("query_failed", {
                "query": statement,
                "error": str(e),
                "filters": self.options.filters,
                "duration_ms": round(duration * 1000, 3),
                "page_size": self.page_size
            })
            self.options.metrics.observe_error(QueryFailed.kind)
            logger.warning(f"Paginated query failed: {e}")
            raise QueryFailed(statement, str(e)) from e

        duration = time.perf_counter() - start

        # No continuation means the result set is exhausted
        next_token = encode_token(continuation, previous=token) if continuation else ""

        self._emit("page_fetched", {
            "rows_fetched": len(rows),
            "next_token": bool(next_token),
            "duration_ms": round(duration * 1000, 3),
            "filters": self.options.filters
        })
        self.options.metrics.observe_fetch(len(rows), duration)

        if self.history is not None:
            self.history.add(next_token)
            self.options.metrics.observe_active_tokens(self.history.size())

        return Page(rows, next_token)

    def previous(self, token: str) -> Page:
        """
        Fetch the page before the one fetched with the given token.

        Args:
            token: Token that fetched the page the caller is on

        Raises:
            InvalidToken: If the token cannot be decoded
            NoPreviousPage: If the token carries no backward link
            QueryFailed: If the session fails to execute the query
        """
        envelope = self._decode(token)
        if envelope.previous is None:
            self._no_previous_page(token)
        return self.fetch_with_token(envelope.previous)

    def previous_from_history(self, token: str) -> Page:
        """
        Fetch the page for the token recorded before the given one.

        Only tokens issued by this instance are known, so prefer previous().
        The first page is fetched with "", which is never recorded, so the
        history cannot lead back to the first page; previous() can.

        Raises:
            NoPreviousPage: If no history is attached or it has no earlier entry
            QueryFailed: If the session fails to execute the query
        """
        earlier = self.history.previous(token) if self.history is not None else None
        if earlier is None:
            self._no_previous_page(token)
        return self.fetch_with_token(earlier)

    def build_statement(self) -> Tuple[str, List[Any]]:
        """Resolve the projection and filters into a statement and bound values."""
        statement = self.query
        if self.options.columns:
            statement = statement.replace("*", ", ".join(self.options.columns), 1)
        return compile_filters(statement, self.options.filters)

    def _decode(self, token: str) -> TokenEnvelope:
        try:
            return decode_token(token)
        except InvalidToken as e:
            self._emit("invalid_token", {"token": token, "error": e.detail})
            self.options.metrics.observe_error(InvalidToken.kind)
            raise

    def _execute(
        self,
        statement: str,
        values: List[Any],
        cursor: bytes
    ) -> Tuple[List[Dict[str, Any]], Optional[bytes]]:
        query = self.session.query(statement, values).with_page_size(self.page_size)
        if cursor:
            query = query.with_resume_cursor(cursor)
        if self.options.cancellation is not None:
            query = query.with_cancellation(self.options.cancellation)

        iterator = query.execute()
        try:
            rows = [dict(row) for row in islice(iterator, self.page_size)]
            continuation = iterator.continuation_cursor()
        finally:
            iterator.close()
        return rows, continuation

    def _no_previous_page(self, token: str) -> NoReturn:
        self._emit("no_previous_page", {"token": token})
        self.options.metrics.observe_error(NoPreviousPage.kind)
        raise NoPreviousPage(token)

    def _emit(self, event: str, fields: Dict[str, Any]) -> None:
        logger.debug(f"{event}: {fields}")
        self.options.logger(event, fields)
