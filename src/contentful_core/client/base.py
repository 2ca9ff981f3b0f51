"""Abstract client with the cache-first request pipeline.

:class:`Client` is the request-dispatch core shared by the Delivery,
Preview and Management clients.  One call to :meth:`Client.request` goes
through these steps:

1. **Build** -- :class:`~contentful_core.client.request_builder.RequestBuilder`
   assembles the request; a bad query type fails here, before any I/O.
2. **Key** -- the space id is taken from the base URI and the cache key is
   derived (:func:`~contentful_core.cache.keys.make_cache_key`).
3. **Cache lookup** (GET only) -- a non-empty hit is decoded and returned
   without touching the network.
4. **Send** -- :class:`~contentful_core.client.transport.TransportExecutor`
   sends the request through the bearer-authenticated :class:`httpx.Client`
   and reports transfer statistics.
5. **Decode** -- :func:`~contentful_core.client.response.decode_json`.
6. **Cache store** (GET only) -- the raw body is saved for
   :data:`CACHE_TIMEOUT` seconds.

Cache reads and writes are best-effort: a failing adapter is logged and the
call carries on as if there were no cache.

Subclasses only provide :meth:`Client.user_agent_app_name`.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Any, Optional

import httpx

from contentful_core.auth.bearer import BearerAuth
from contentful_core.cache.keys import make_cache_key
from contentful_core.client.request_builder import QueryType, RequestBuilder
from contentful_core.client.response import decode_json
from contentful_core.client.transport import TransportExecutor
from contentful_core.exceptions import DecodeError
from contentful_core.log.stats import LoggingStatsHandler, StatsHandler
from contentful_core.log.timer import StandardTimer
from contentful_core.models import ClientConfig

logger = logging.getLogger(__name__)

CACHE_TIMEOUT = 600
"""Seconds a cached GET response stays valid."""


class Client(ABC):
    """Base class for API clients.

    The configuration is fixed at construction, so one instance can be
    shared between threads.  The client owns an :class:`httpx.Client`;
    use it as a context manager or call :meth:`close` when done.

    Args:
        config: Token, base URI, operating mode, optional logger and cache.
        transport: Optional :class:`httpx.BaseTransport` for the underlying
            :class:`httpx.Client` (e.g. :class:`httpx.MockTransport` in tests).

    Example::

        class MyClient(Client):
            def user_agent_app_name(self) -> str:
                return "my-app/1.0"

        with MyClient(config) as client:
            entries = client.request("GET", "entries", query={"limit": 5})
    """

    def __init__(
        self,
        config: ClientConfig,
        transport: Optional[httpx.BaseTransport] = None,
    ) -> None:
        self._config = config
        self._builder = RequestBuilder(config, self.user_agent_app_name())
        self._http_client = httpx.Client(
            auth=BearerAuth(config.token),
            timeout=config.timeout,
            verify=config.verify_ssl,
            follow_redirects=True,
            transport=transport,
        )
        stats_handler: Optional[StatsHandler] = None
        if config.logger is not None:
            stats_handler = LoggingStatsHandler(config.logger)
        self._executor = TransportExecutor(self._http_client, stats_handler)

    @abstractmethod
    def user_agent_app_name(self) -> str:
        """Name and version of the library, placed first in ``User-Agent``."""
        ...

    @property
    def config(self) -> ClientConfig:
        return self._config

    @property
    def user_agent(self) -> str:
        return self._builder.user_agent

    # ------------------------------------------------------------------ #
    # Lifecycle
    # ------------------------------------------------------------------ #

    def close(self) -> None:
        """Close the underlying HTTP connection pool.

        The configured cache is left open; it may be shared with other
        clients and is closed by whoever created it.
        """
        self._http_client.close()

    def __enter__(self) -> Client:
        return self

    def __exit__(self, *args: object) -> None:
        self.close()

    # ------------------------------------------------------------------ #
    # Requests
    # ------------------------------------------------------------------ #

    def request(
        self,
        method: str,
        path: str,
        query: Optional[QueryType] = None,
        on_stats: Optional[StatsHandler] = None,
    ) -> Any:
        """Perform an API call and return the decoded JSON body.

        Args:
            method: HTTP method.
            path: Path relative to the base URI (e.g. ``"entries"``).
            query: Query string or mapping of query parameters.
            on_stats: Transfer-statistics handler for this call only.

        Returns:
            The decoded body, usually a ``dict`` or ``list``.

        Raises:
            InvalidArgumentError: If *query* has an unsupported type.
            ConfigError: If the base URI has no ``spaces/<id>/`` segment.
            ResourceNotFoundError: On HTTP 404.
            DecodeError: If the body is not valid JSON or is ``null``.
            httpx.HTTPError: On any other transport or HTTP failure.
        """
        method = method.upper()
        timer = StandardTimer()
        timer.start()
        source = "network"
        try:
            request = self._builder.build(method, path, query)
            key = make_cache_key(self._config.space_id, self._config.base_uri, path, query)
            use_cache = method == "GET" and self._config.cache is not None

            if use_cache:
                cached = self._cache_fetch(key)
                if cached is not None:
                    source = "cache"
                    return cached

            response = self._executor.send(request, on_stats=on_stats)
            result = decode_json(response.content)

            if use_cache:
                self._cache_save(key, response.text)
            return result
        finally:
            timer.stop()
            logger.debug(
                "%s %s completed in %.3fs (%s)", method, path, timer.elapsed, source
            )

    def get(self, path: str, query: Optional[QueryType] = None) -> Any:
        """Shorthand for ``request("GET", path, query)``."""
        return self.request("GET", path, query=query)

    # ------------------------------------------------------------------ #
    # Cache helpers
    # ------------------------------------------------------------------ #

    def _cache_fetch(self, key: str) -> Optional[Any]:
        """Return the decoded cached body for *key*, or ``None`` on a miss.

        Adapter errors and undecodable entries count as misses.
        """
        assert self._config.cache is not None
        try:
            data = self._config.cache.fetch(key)
        except Exception as exc:
            logger.warning("Cache fetch failed for %s: %s", key, exc)
            return None
        if not data:
            return None
        try:
            return decode_json(data)
        except DecodeError as exc:
            logger.warning("Discarding undecodable cache entry %s: %s", key, exc)
            return None

    def _cache_save(self, key: str, body: str) -> None:
        assert self._config.cache is not None
        try:
            self._config.cache.save(key, body, CACHE_TIMEOUT)
        except Exception as exc:
            logger.warning("Cache save failed for %s: %s", key, exc)
