"""Pagination error taxonomy.

Every error carries a ``kind`` that is reported to the metrics hook before the
error reaches the caller:

- ``invalid_token``: the token is malformed or undecodable (client error).
- ``no_previous_page``: the token carries no backward link, or the local
  history has no record of it (client error).
- ``query_failed``: the execution collaborator failed (dependency error).
  Retrying is the caller's decision.
"""

from typing import Any, Optional

from .problem_details import BadRequestError, BadGatewayError


class PaginationError(Exception):
    """Mixin marking errors raised by the paginator."""

    kind: str = "pagination_error"


class InvalidToken(PaginationError, BadRequestError):
    """Raised when a page token cannot be decoded."""

    kind = "invalid_token"

    def __init__(self, token: str, reason: Optional[str] = None, **extensions: Any):
        self.token = token
        self.reason = reason
        detail = "Invalid page token"
        if reason:
            detail = f"{detail}: {reason}"
        super().__init__(detail, **extensions)


class NoPreviousPage(PaginationError, BadRequestError):
    """Raised when there is no earlier page to navigate back to."""

    kind = "no_previous_page"

    def __init__(self, token: str = "", **extensions: Any):
        self.token = token
        super().__init__("No previous page for the given token", **extensions)


class QueryFailed(PaginationError, BadGatewayError):
    """Raised when the execution collaborator reports a failure."""

    kind = "query_failed"

    def __init__(self, statement: str, reason: Optional[str] = None, **extensions: Any):
        self.statement = statement
        self.reason = reason
        detail = "Failed to execute paginated query"
        if reason:
            detail = f"{detail}: {reason}"
        super().__init__(detail, **extensions)
