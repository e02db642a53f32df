"""Error handling module for pagestate."""

from .problem_details import (
    ProblemDetail,
    ProblemDetailException,
    BadRequestError,
    BadGatewayError,
    create_problem_response
)
from .pagination import (
    PaginationError,
    InvalidToken,
    NoPreviousPage,
    QueryFailed
)
from .handlers import register_exception_handlers

__all__ = [
    "ProblemDetail",
    "ProblemDetailException",
    "BadRequestError",
    "BadGatewayError",
    "create_problem_response",
    "PaginationError",
    "InvalidToken",
    "NoPreviousPage",
    "QueryFailed",
    "register_exception_handlers"
]
