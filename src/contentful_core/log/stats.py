"""Per-send transfer statistics and the handlers that consume them.

Each physical HTTP send made by
:class:`~contentful_core.client.transport.TransportExecutor` produces one
:class:`TransferStats` record, which is passed to a :class:`StatsHandler`
and then discarded.  :class:`LoggingStatsHandler` renders the record as
text and forwards it to a :class:`~contentful_core.log.logger.NoticeLogger`.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional, Protocol, runtime_checkable

import httpx

from contentful_core.log.logger import NoticeLogger

logger = logging.getLogger(__name__)

_REDACTED_HEADERS = frozenset({"authorization"})


@dataclass
class TransferStats:
    """What happened during one physical send.

    Attributes:
        effective_uri: The URL the request was sent to.
        transfer_time: Seconds spent on the send, or ``None`` if unknown.
        request: The request rendered as HTTP/1.1 text.
        response: The response rendered as HTTP/1.1 text, or ``None`` if
            no response was received.
        handler_error: Description of the transport error, if any.
    """

    effective_uri: str
    transfer_time: Optional[float]
    request: str
    response: Optional[str] = None
    handler_error: Optional[str] = None


@runtime_checkable
class StatsHandler(Protocol):
    """Receives a :class:`TransferStats` after every physical send."""

    def on_stats(self, stats: TransferStats) -> None:
        ...


class LoggingStatsHandler:
    """Format transfer statistics and send them to a notice logger.

    Errors raised while formatting or logging are reported on this
    module's logger and never reach the request pipeline.

    Args:
        notice_logger: Destination of the formatted record.
    """

    def __init__(self, notice_logger: NoticeLogger) -> None:
        self._notice_logger = notice_logger

    def on_stats(self, stats: TransferStats) -> None:
        try:
            self._notice_logger.notice(format_stats(stats))
        except Exception as exc:
            logger.debug("Failed to log transfer statistics: %s", exc)


def format_stats(stats: TransferStats) -> str:
    """Render *stats* as the multi-line notice record."""
    return "URL: {}\n Duration: {} \n>>>>>>>>\n{}\n<<<<<<<<\n{}\n--------\n{}".format(
        stats.effective_uri,
        stats.transfer_time if stats.transfer_time is not None else "",
        stats.request,
        stats.response or "",
        stats.handler_error or "",
    )


def format_request(request: httpx.Request) -> str:
    """Render *request* as HTTP/1.1 text with credentials redacted."""
    target = request.url.raw_path.decode("ascii", errors="replace")
    lines = [f"{request.method} {target} HTTP/1.1"]
    lines.extend(_header_lines(request.headers))
    return "\r\n".join(lines) + "\r\n\r\n" + _body_text(request.content)


def format_response(response: httpx.Response) -> str:
    """Render a fully-read *response* as HTTP/1.1 text."""
    lines = [f"HTTP/1.1 {response.status_code} {response.reason_phrase}".rstrip()]
    lines.extend(_header_lines(response.headers))
    return "\r\n".join(lines) + "\r\n\r\n" + _body_text(response.content)


def _header_lines(headers: httpx.Headers) -> list[str]:
    # raw keeps the name casing the headers were set with
    lines = []
    for raw_name, raw_value in headers.raw:
        name = raw_name.decode(headers.encoding)
        value = raw_value.decode(headers.encoding)
        if name.lower() in _REDACTED_HEADERS:
            scheme = value.split(" ", 1)[0] if " " in value else ""
            value = f"{scheme} [REDACTED]".strip()
        lines.append(f"{name}: {value}")
    return lines


def _body_text(content: bytes) -> str:
    return content.decode("utf-8", errors="replace")
