"""Exception hierarchy for contentful_core.

All errors raised by the library itself inherit from :class:`ContentfulError`.
Transport failures other than HTTP 404 are *not* wrapped: they reach the
caller as the original :mod:`httpx` exception, exposed here under the
:data:`TransportError` alias so callers can catch them without importing
httpx.

Hierarchy::

    ContentfulError
    +-- InvalidArgumentError   (also a ValueError)
    +-- ResourceNotFoundError  (HTTP 404, wraps httpx.HTTPStatusError)
    +-- DecodeError            (body is not JSON, or decodes to null)
    +-- ConfigError            (bad settings, missing space id, credentials)

    TransportError = httpx.HTTPError
"""

from __future__ import annotations

from typing import Optional

import httpx

TransportError = httpx.HTTPError
"""Alias for :class:`httpx.HTTPError`, the base of every non-404 transport failure."""


class ContentfulError(Exception):
    """Base exception for all contentful_core errors."""


class InvalidArgumentError(ContentfulError, ValueError):
    """Raised when a caller passes an argument of the wrong type (e.g. a query that is neither str nor mapping)."""


class ResourceNotFoundError(ContentfulError):
    """Raised when the API answers HTTP 404.

    The originating :class:`httpx.HTTPStatusError` is chained as
    ``__cause__``.

    Args:
        message: Human-readable error description.
        response: The 404 response, when available.
    """

    def __init__(self, message: str, response: Optional[httpx.Response] = None):
        super().__init__(message)
        self.response = response


class DecodeError(ContentfulError):
    """Raised when a response body cannot be decoded into a JSON value.

    Args:
        message: The parser diagnostic.
        code: Failure category: ``"empty"``, ``"syntax"``, ``"encoding"``
            or ``"null"``.
        position: Character offset of a syntax error, if known.
    """

    def __init__(self, message: str, code: str, position: Optional[int] = None):
        super().__init__(message)
        self.code = code
        self.position = position


class ConfigError(ContentfulError):
    """Raised for configuration problems (missing space id, unresolvable credentials, invalid settings files)."""
