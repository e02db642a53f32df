"""Pagination module for token-based pagination."""

from .token import (
    TokenEnvelope,
    encode_token,
    decode_token
)
from .filters import (
    Scalar,
    Members,
    parse_filters,
    compile_filters
)
from .history import TokenHistory
from .options import PaginatorOptions
from .paginator import Page, Paginator

__all__ = [
    "TokenEnvelope",
    "encode_token",
    "decode_token",
    "Scalar",
    "Members",
    "parse_filters",
    "compile_filters",
    "TokenHistory",
    "PaginatorOptions",
    "Page",
    "Paginator"
]
