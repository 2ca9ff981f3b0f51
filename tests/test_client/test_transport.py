"""Tests for the transport executor."""

from __future__ import annotations

import httpx
import pytest

from contentful_core.auth import BearerAuth
from contentful_core.client.transport import TransportExecutor
from contentful_core.exceptions import ResourceNotFoundError
from contentful_core.log.stats import TransferStats

from conftest import RecordingTransport, json_handler


class RecordingHandler:
    def __init__(self) -> None:
        self.stats: list[TransferStats] = []

    def on_stats(self, stats: TransferStats) -> None:
        self.stats.append(stats)


class ExplodingHandler:
    def on_stats(self, stats: TransferStats) -> None:
        raise RuntimeError("handler bug")


def _executor(handler, stats_handler=None) -> tuple[TransportExecutor, RecordingTransport]:
    transport = RecordingTransport(handler)
    http_client = httpx.Client(auth=BearerAuth("tok"), transport=transport)
    return TransportExecutor(http_client, stats_handler), transport


def _request(url: str = "https://api.example.com/spaces/abc123/entries") -> httpx.Request:
    return httpx.Request("GET", url, headers={"Content-Type": "application/json"})


class TestSend:
    def test_returns_successful_response(self) -> None:
        executor, _ = _executor(json_handler({"a": 1}))
        response = executor.send(_request())
        assert response.status_code == 200
        assert response.json() == {"a": 1}

    def test_bearer_header_attached(self) -> None:
        executor, transport = _executor(json_handler())
        executor.send(_request())
        assert transport.requests[0].headers["Authorization"] == "Bearer tok"

    def test_404_translated(self) -> None:
        executor, _ = _executor(json_handler({}, status_code=404))
        with pytest.raises(ResourceNotFoundError) as exc_info:
            executor.send(_request())
        assert isinstance(exc_info.value.__cause__, httpx.HTTPStatusError)

    @pytest.mark.parametrize("status", [400, 401, 409, 429, 500, 503])
    def test_other_statuses_propagate_unchanged(self, status: int) -> None:
        executor, _ = _executor(json_handler({}, status_code=status))
        with pytest.raises(httpx.HTTPStatusError) as exc_info:
            executor.send(_request())
        assert exc_info.value.response.status_code == status

    def test_timeout_propagates_unchanged(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ReadTimeout("timed out", request=request)

        executor, _ = _executor(handler)
        with pytest.raises(httpx.ReadTimeout):
            executor.send(_request())


class TestStats:
    def test_default_handler_receives_stats(self) -> None:
        handler = RecordingHandler()
        executor, _ = _executor(json_handler({"a": 1}), stats_handler=handler)
        executor.send(_request())

        assert len(handler.stats) == 1
        stats = handler.stats[0]
        assert stats.effective_uri == "https://api.example.com/spaces/abc123/entries"
        assert stats.transfer_time is not None and stats.transfer_time >= 0
        assert stats.request.startswith("GET /spaces/abc123/entries HTTP/1.1")
        assert stats.response is not None
        assert stats.response.startswith("HTTP/1.1 200 OK")
        assert stats.handler_error is None

    def test_credentials_are_redacted(self) -> None:
        handler = RecordingHandler()
        executor, _ = _executor(json_handler(), stats_handler=handler)
        executor.send(_request())
        request_text = handler.stats[0].request
        assert "Bearer [REDACTED]" in request_text
        assert "tok\r\n" not in request_text

    def test_per_call_handler_overrides_default(self) -> None:
        default, explicit = RecordingHandler(), RecordingHandler()
        executor, _ = _executor(json_handler(), stats_handler=default)
        executor.send(_request(), on_stats=explicit)
        assert default.stats == []
        assert len(explicit.stats) == 1

    def test_stats_emitted_for_error_status(self) -> None:
        handler = RecordingHandler()
        executor, _ = _executor(json_handler({}, status_code=500), stats_handler=handler)
        with pytest.raises(httpx.HTTPStatusError):
            executor.send(_request())
        assert handler.stats[0].response.startswith("HTTP/1.1 500")

    def test_stats_emitted_for_transport_failure(self) -> None:
        def failing(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("refused", request=request)

        handler = RecordingHandler()
        executor, _ = _executor(failing, stats_handler=handler)
        with pytest.raises(httpx.ConnectError):
            executor.send(_request())

        stats = handler.stats[0]
        assert stats.response is None
        assert stats.handler_error == "ConnectError: refused"

    def test_handler_errors_are_contained(self) -> None:
        executor, _ = _executor(json_handler({"a": 1}), stats_handler=ExplodingHandler())
        assert executor.send(_request()).json() == {"a": 1}

    def test_handler_errors_do_not_mask_transport_failure(self) -> None:
        def failing(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("refused", request=request)

        executor, _ = _executor(failing, stats_handler=ExplodingHandler())
        with pytest.raises(httpx.ConnectError):
            executor.send(_request())
