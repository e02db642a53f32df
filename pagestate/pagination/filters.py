"""Dynamic filter compilation for paginated queries.

Filters map a descriptor, a column name optionally followed by an operator, to
a value::

    {"age >": 25, "region IN": ["US", "CA"], "active": True}

compiles ``SELECT * FROM users`` into::

    SELECT * FROM users WHERE age > ? AND region IN (?, ?) AND active = ?

with bound values ``[25, "US", "CA", True]``.
"""

import logging
from dataclasses import dataclass
from typing import Any, Dict, List, Mapping, Optional, Tuple, Union

logger = logging.getLogger(__name__)

# Checked in order, so the two-character operators win over their prefixes.
OPERATORS = (">=", "<=", ">", "<", "IN")
MEMBERSHIP = "IN"


@dataclass(frozen=True)
class Scalar:
    """A single bound value."""
    value: Any


@dataclass(frozen=True)
class Members:
    """An ordered collection of bound values."""
    values: Tuple[Any, ...]


FilterTerm = Union[Scalar, Members]


def tag_value(value: Any) -> FilterTerm:
    """Wrap a raw filter value in its tag."""
    if isinstance(value, (Scalar, Members)):
        return value
    if isinstance(value, (list, tuple)):
        return Members(tuple(value))
    return Scalar(value)


def parse_filters(filters: Optional[Mapping[str, Any]]) -> Dict[str, FilterTerm]:
    """Tag every value of a filter mapping."""
    if not filters:
        return {}
    return {descriptor: tag_value(value) for descriptor, value in filters.items()}


def split_descriptor(descriptor: str) -> Tuple[str, str]:
    """Split a descriptor into (column, operator).

    Args:
        descriptor: Column name with an optional operator suffix, e.g. "age >="

    Returns:
        Tuple of (column, operator); the operator defaults to "="
    """
    key = descriptor.strip()
    upper = key.upper()

    for op in OPERATORS:
        if not upper.endswith(op):
            continue
        column = key[:-len(op)]
        # IN must stand on its own so that a column such as "login" stays a column
        if op == MEMBERSHIP and column and not column[-1].isspace():
            continue
        column = column.strip()
        if column:
            return column, op

    return key, "="


def compile_predicate(descriptor: str, term: FilterTerm) -> Optional[Tuple[str, List[Any]]]:
    """Compile one descriptor into a predicate and its bound values.

    Returns:
        Tuple of (predicate, values), or None when the predicate is dropped
    """
    column, operator = split_descriptor(descriptor)

    if operator == MEMBERSHIP:
        if not isinstance(term, Members) or not term.values:
            logger.debug(f"Skipping membership filter '{descriptor}' without values")
            return None
        placeholders = ", ".join("?" for _ in term.values)
        return f"{column} IN ({placeholders})", list(term.values)

    if isinstance(term, Members):
        # Bound as one collection value, e.g. a list column
        return f"{column} {operator} ?", [list(term.values)]

    return f"{column} {operator} ?", [term.value]


def compile_filters(
    base_query: str,
    filters: Optional[Mapping[str, Any]]
) -> Tuple[str, List[Any]]:
    """Append WHERE/AND predicates for the given filters to a query.

    Args:
        base_query: Query text, with or without an existing WHERE clause
        filters: Mapping of descriptor to raw or tagged value

    Returns:
        Tuple of (query, bound_values)
    """
    terms = parse_filters(filters)
    if not terms:
        return base_query, []

    predicates = []
    values: List[Any] = []

    for descriptor, term in terms.items():
        compiled = compile_predicate(descriptor, term)
        if compiled is None:
            continue
        predicate, bound = compiled
        predicates.append(predicate)
        values.extend(bound)

    if not predicates:
        return base_query, []

    joined = " AND ".join(predicates)
    if "where" in base_query.lower():
        return f"{base_query} AND {joined}", values
    return f"{base_query} WHERE {joined}", values
