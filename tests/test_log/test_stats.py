"""Tests for transfer-statistics formatting and the logging handler."""

from __future__ import annotations

import httpx

from contentful_core.log.stats import (
    LoggingStatsHandler,
    StatsHandler,
    TransferStats,
    format_request,
    format_response,
    format_stats,
)

from conftest import RecordingLogger


def _stats(**overrides) -> TransferStats:
    values = {
        "effective_uri": "https://cdn.contentful.com/spaces/abc/entries",
        "transfer_time": 0.25,
        "request": "GET /spaces/abc/entries HTTP/1.1",
        "response": "HTTP/1.1 200 OK",
    }
    values.update(overrides)
    return TransferStats(**values)


class TestFormatStats:
    def test_layout(self) -> None:
        assert format_stats(_stats()) == (
            "URL: https://cdn.contentful.com/spaces/abc/entries\n"
            " Duration: 0.25 \n"
            ">>>>>>>>\nGET /spaces/abc/entries HTTP/1.1\n"
            "<<<<<<<<\nHTTP/1.1 200 OK\n"
            "--------\n"
        )

    def test_error_without_response(self) -> None:
        text = format_stats(_stats(response=None, handler_error="ConnectError: refused"))
        assert text.endswith("<<<<<<<<\n\n--------\nConnectError: refused")


class TestFormatHttp:
    def test_request_text(self) -> None:
        request = httpx.Request(
            "GET",
            "https://cdn.contentful.com/spaces/abc/entries?limit=1",
            headers={"Authorization": "Bearer secret", "User-Agent": "ua"},
        )
        text = format_request(request)
        assert text.startswith("GET /spaces/abc/entries?limit=1 HTTP/1.1\r\n")
        assert "Authorization: Bearer [REDACTED]" in text
        assert "secret" not in text
        assert "User-Agent: ua" in text

    def test_lowercase_authorization_is_redacted(self) -> None:
        request = httpx.Request(
            "GET", "https://cdn.contentful.com/", headers={"authorization": "Bearer secret"}
        )
        text = format_request(request)
        assert "authorization: Bearer [REDACTED]" in text
        assert "secret" not in text

    def test_response_text(self) -> None:
        response = httpx.Response(404, json={"sys": {"id": "NotFound"}})
        text = format_response(response)
        assert text.startswith("HTTP/1.1 404 Not Found\r\n")
        assert text.endswith('{"sys": {"id": "NotFound"}}') or text.endswith(
            '{"sys":{"id":"NotFound"}}'
        )


class TestLoggingStatsHandler:
    def test_forwards_formatted_record(self) -> None:
        logger = RecordingLogger()
        handler = LoggingStatsHandler(logger)
        handler.on_stats(_stats())
        assert logger.messages == [format_stats(_stats())]

    def test_swallows_logger_errors(self) -> None:
        class Broken:
            def notice(self, message: str) -> None:
                raise OSError("sink closed")

        LoggingStatsHandler(Broken()).on_stats(_stats())

    def test_is_a_stats_handler(self) -> None:
        assert isinstance(LoggingStatsHandler(RecordingLogger()), StatsHandler)
