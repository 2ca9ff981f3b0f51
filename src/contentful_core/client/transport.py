"""Sending built requests and normalising transport failures.

:class:`TransportExecutor` owns no connection state of its own: it sends
through the :class:`httpx.Client` it was given (which carries the bearer
auth, timeout and TLS settings), reports a
:class:`~contentful_core.log.stats.TransferStats` for every physical send,
and translates HTTP 404 into
:class:`~contentful_core.exceptions.ResourceNotFoundError`.  Every other
failure propagates as the original :mod:`httpx` exception.
"""

from __future__ import annotations

import logging
import time
from typing import Optional

import httpx

from contentful_core.exceptions import ResourceNotFoundError
from contentful_core.log.stats import (
    StatsHandler,
    TransferStats,
    format_request,
    format_response,
)

logger = logging.getLogger(__name__)


class TransportExecutor:
    """Execute requests through an instrumented :class:`httpx.Client`.

    Args:
        http_client: The configured client used for every send.
        stats_handler: Default receiver of transfer statistics.  A handler
            passed to :meth:`send` takes precedence over it.
    """

    def __init__(
        self,
        http_client: httpx.Client,
        stats_handler: Optional[StatsHandler] = None,
    ) -> None:
        self._http_client = http_client
        self._stats_handler = stats_handler

    def send(
        self,
        request: httpx.Request,
        on_stats: Optional[StatsHandler] = None,
    ) -> httpx.Response:
        """Send *request* and return the successful response.

        Args:
            request: A request produced by
                :class:`~contentful_core.client.request_builder.RequestBuilder`.
            on_stats: Handler for this call only; overrides the default.

        Returns:
            The fully-read 2xx :class:`httpx.Response`.

        Raises:
            ResourceNotFoundError: On HTTP 404.
            httpx.HTTPStatusError: On any other non-2xx status.
            httpx.TransportError: On network failures and timeouts.
        """
        handler = on_stats if on_stats is not None else self._stats_handler

        started = time.perf_counter()
        try:
            response = self._http_client.send(request)
        except httpx.TransportError as exc:
            if handler is not None:
                _emit(
                    handler,
                    TransferStats(
                        effective_uri=str(request.url),
                        transfer_time=time.perf_counter() - started,
                        request=format_request(request),
                        handler_error=f"{type(exc).__name__}: {exc}",
                    ),
                )
            raise

        if handler is not None:
            _emit(
                handler,
                TransferStats(
                    effective_uri=str(response.url),
                    transfer_time=time.perf_counter() - started,
                    request=format_request(response.request),
                    response=format_response(response),
                ),
            )

        try:
            response.raise_for_status()
        except httpx.HTTPStatusError as exc:
            if response.status_code == 404:
                raise ResourceNotFoundError(
                    f"Resource not found: {response.request.url}",
                    response=response,
                ) from exc
            raise
        return response


def _emit(handler: StatsHandler, stats: TransferStats) -> None:
    try:
        handler.on_stats(stats)
    except Exception as exc:
        logger.warning("Stats handler %r failed: %s", handler, exc)
