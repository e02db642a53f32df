"""Execution collaborators for the paginator."""

from .session import Session, Query, RowIterator

__all__ = ["Session", "Query", "RowIterator"]
