"""Query parameter normalisation shared by request building and cache keys.

A query is either a pre-encoded string, used verbatim, or a mapping of
parameters.  :func:`query_pairs` flattens a mapping into the ordered
``(name, value)`` string pairs that go on the wire, and
:func:`canonical_query` orders those pairs so that equal queries compare
equal whatever mapping type or insertion order they came from.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Union
from urllib.parse import quote, urlencode

from contentful_core.exceptions import InvalidArgumentError

QueryType = Union[str, Mapping[str, Any]]


def query_pairs(query: Mapping[Any, Any]) -> list[tuple[str, str]]:
    """Flatten a parameter mapping into ``(name, value)`` pairs.

    ``None`` values are dropped, booleans become ``true``/``false`` and lists
    or tuples repeat the name once per item.  Names are converted with
    :class:`str`.
    """
    pairs: list[tuple[str, str]] = []
    for key, value in query.items():
        if value is None:
            continue
        if isinstance(value, (list, tuple)):
            pairs.extend((str(key), _query_value(item)) for item in value)
        else:
            pairs.append((str(key), _query_value(value)))
    return pairs


def encode_query(query: QueryType) -> str:
    """Return *query* as a query string.

    Mappings are encoded with RFC 3986 rules (``%20``, never ``+``).

    Raises:
        InvalidArgumentError: If *query* is neither a string nor a mapping.
    """
    if isinstance(query, str):
        return query
    _require_mapping(query)
    return urlencode(query_pairs(query), quote_via=quote, safe="")


def canonical_query(query: QueryType) -> Union[str, list[tuple[str, str]]]:
    """Return an order-independent form of *query* for hashing.

    Pairs are sorted by name only, so repeated values of one parameter keep
    their relative order.
    """
    if isinstance(query, str):
        return query
    _require_mapping(query)
    return sorted(query_pairs(query), key=lambda pair: pair[0])


def _require_mapping(query: Any) -> None:
    if not isinstance(query, Mapping):
        raise InvalidArgumentError(
            f"query must be a string or a mapping, got {type(query).__name__}"
        )


def _query_value(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)
