"""Bearer token authentication.

:class:`BearerAuth` is an :class:`httpx.Auth` installed on the client's
:class:`httpx.Client`, so the ``Authorization: Bearer <token>`` header is
attached to every request the transport sends, whatever the caller put in
the request's own headers.  Requests answered from the cache never reach
the transport and are therefore never authenticated.
"""

from __future__ import annotations

from typing import Generator

import httpx

from contentful_core.exceptions import ConfigError


class BearerAuth(httpx.Auth):
    """Inject a fixed bearer token into every outgoing request.

    Args:
        token: The access token.  Must be non-empty.

    Example::

        client = httpx.Client(auth=BearerAuth("b4c0n73n7fu1"))
    """

    def __init__(self, token: str) -> None:
        if not token:
            raise ConfigError("Bearer auth requires a non-empty token")
        self._header = f"Bearer {token}"

    def auth_flow(self, request: httpx.Request) -> Generator[httpx.Request, httpx.Response, None]:
        request.headers["Authorization"] = self._header
        yield request
