"""Cursor-based pagination over wide-column store page state."""

from .errors import InvalidToken, NoPreviousPage, QueryFailed
from .pagination import (
    Page,
    Paginator,
    PaginatorOptions,
    TokenEnvelope,
    TokenHistory,
    compile_filters,
    decode_token,
    encode_token
)

__version__ = "0.1.0"

__all__ = [
    "InvalidToken",
    "NoPreviousPage",
    "QueryFailed",
    "Page",
    "Paginator",
    "PaginatorOptions",
    "TokenEnvelope",
    "TokenHistory",
    "compile_filters",
    "decode_token",
    "encode_token"
]
