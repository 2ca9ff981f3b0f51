"""Construction of outbound requests.

:class:`RequestBuilder` turns ``(method, path, query)`` into a ready-to-send
:class:`httpx.Request`:

- the path is resolved against the configured base URI with RFC 3986
  reference resolution (:meth:`httpx.URL.join`);
- a query mapping is encoded with RFC 3986 percent-encoding (``%20``, never
  ``+``), while a string query is used as-is;
- ``Content-Type`` comes from the operating mode and ``User-Agent``
  identifies the application, httpx, the TLS library and Python.

No body is attached and no credentials are added here; the bearer token is
applied by the transport (see :class:`~contentful_core.auth.BearerAuth`).
"""

from __future__ import annotations

import platform
from typing import Optional

import httpx

from contentful_core.models import ClientConfig
from contentful_core.query import QueryType, encode_query


class RequestBuilder:
    """Build requests for one client configuration.

    Args:
        config: The client configuration supplying base URI and mode.
        app_name: Application identifier placed first in ``User-Agent``.
    """

    def __init__(self, config: ClientConfig, app_name: str) -> None:
        self._base_url = httpx.URL(config.base_uri)
        self._content_type = config.api.content_type
        self._user_agent = build_user_agent(app_name)

    @property
    def user_agent(self) -> str:
        return self._user_agent

    def build(
        self,
        method: str,
        path: str,
        query: Optional[QueryType] = None,
    ) -> httpx.Request:
        """Assemble the request for *method* and *path*.

        Args:
            method: HTTP method, any case.
            path: Path relative to the base URI.  A leading ``/`` is ignored,
                so ``"/entries"`` and ``"entries"`` are equivalent.
            query: Pre-encoded query string or a mapping of parameters.

        Returns:
            A new :class:`httpx.Request` without a body.

        Raises:
            InvalidArgumentError: If *query* is neither a string nor a mapping.
        """
        url = self.resolve(path)
        if query is not None:
            encoded = encode_query(query)
            if encoded:
                url = url.copy_with(query=encoded.encode("utf-8"))

        return httpx.Request(
            method.upper(),
            url,
            headers={
                "User-Agent": self._user_agent,
                "Content-Type": self._content_type,
            },
        )

    def resolve(self, path: str) -> httpx.URL:
        """Resolve *path* beneath the base URI."""
        return self._base_url.join(path.lstrip("/"))


def build_user_agent(app_name: str) -> str:
    """Compose the ``User-Agent`` header value.

    Example result: ``"contentful.py/1.0.0 httpx/0.27.0 OpenSSL/3.0.13 Python/3.12.2"``.
    """
    agent = f"{app_name} httpx/{httpx.__version__}"
    tls_library = _tls_library()
    if tls_library:
        agent += f" {tls_library}"
    agent += f" Python/{platform.python_version()}"
    return agent


def _tls_library() -> Optional[str]:
    """Name and version of the linked TLS library, e.g. ``"LibreSSL/3.3.6"``.

    Returns ``None`` when :mod:`ssl` is unavailable.
    """
    try:
        import ssl
    except ImportError:
        return None
    parts = ssl.OPENSSL_VERSION.split()
    if len(parts) < 2:
        return None
    return f"{parts[0]}/{parts[1]}"
