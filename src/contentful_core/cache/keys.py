"""Cache-key derivation for GET requests.

Keys are namespaced by the space id and end in a SHA-256 digest of the
query, base URI and path::

    <space_id>_<sha256(json(query) + base_uri + path)>

The query is reduced to its canonical form first
(:func:`~contentful_core.query.canonical_query`), so equal queries share a
key whatever mapping type or insertion order they came from.  A leading
``/`` on the path is ignored, as it is when the request URL is resolved.

Collisions are not detected; with a 256-bit digest over a single space's
requests this is an accepted tradeoff.
"""

from __future__ import annotations

import hashlib
import json
import re
from typing import Optional

from contentful_core.exceptions import ConfigError
from contentful_core.query import QueryType, canonical_query

_SPACE_RE = re.compile(r"spaces/([^/]+)/")


def extract_space_id(base_uri: str) -> str:
    """Return the id found in the ``spaces/<id>/`` segment of *base_uri*.

    Raises:
        ConfigError: If the URI has no such segment.
    """
    match = _SPACE_RE.search(base_uri)
    if match is None:
        raise ConfigError(
            f"Base URI '{base_uri}' does not contain a 'spaces/<id>/' segment"
        )
    return match.group(1)


def make_cache_key(
    space_id: str,
    base_uri: str,
    path: str,
    query: Optional[QueryType] = None,
) -> str:
    """Derive the deterministic cache key of a request.

    Raises:
        InvalidArgumentError: If *query* is neither a string nor a mapping.
    """
    normalized = None if query is None else canonical_query(query)
    # an empty query sends the same URL as no query
    serialized = json.dumps(normalized or None)
    path = path.lstrip("/")
    digest = hashlib.sha256((serialized + base_uri + path).encode("utf-8")).hexdigest()
    return f"{space_id}_{digest}"
