"""Shared test fixtures for contentful_core.

Provides a minimal concrete :class:`Client`, a recording notice logger, a
cache adapter that counts calls, and a mock transport that records every
request it receives.  These fixtures are discovered by pytest and are
available to all test modules without explicit imports.
"""

from __future__ import annotations

import json
from typing import Any, Callable, Optional, Union

import httpx
import pytest

from contentful_core.cache import MemoryCache
from contentful_core.client.base import Client
from contentful_core.models import ApiMode, ClientConfig

BASE_URI = "https://api.example.com/spaces/abc123/"


class DummyClient(Client):
    """Concrete client used throughout the tests."""

    def user_agent_app_name(self) -> str:
        return "test-app/1.0"


class RecordingLogger:
    """Notice logger that keeps every message."""

    def __init__(self) -> None:
        self.messages: list[str] = []

    def notice(self, message: str) -> None:
        self.messages.append(message)


class CountingCache(MemoryCache):
    """MemoryCache that records fetch/save calls."""

    def __init__(self) -> None:
        super().__init__()
        self.fetches: list[str] = []
        self.saves: list[tuple[str, Union[str, bytes], int]] = []

    def fetch(self, key: str) -> Optional[Union[str, bytes]]:
        self.fetches.append(key)
        return super().fetch(key)

    def save(self, key: str, data: Union[str, bytes], ttl: int) -> None:
        self.saves.append((key, data, ttl))
        super().save(key, data, ttl)


class RecordingTransport(httpx.MockTransport):
    """MockTransport that remembers the requests it handled."""

    def __init__(self, handler: Callable[[httpx.Request], httpx.Response]) -> None:
        self.requests: list[httpx.Request] = []

        def _record(request: httpx.Request) -> httpx.Response:
            self.requests.append(request)
            return handler(request)

        super().__init__(_record)


def json_handler(
    data: Any = None, status_code: int = 200, text: Optional[str] = None
) -> Callable[[httpx.Request], httpx.Response]:
    """Return a transport handler answering every request with the same body."""
    body = text if text is not None else json.dumps(data if data is not None else {"items": []})

    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(
            status_code,
            content=body.encode("utf-8"),
            headers={"content-type": "application/json"},
        )

    return handler


def make_config(**overrides: Any) -> ClientConfig:
    values: dict[str, Any] = {
        "token": "secret-token",
        "base_uri": BASE_URI,
        "api": ApiMode.DELIVERY,
    }
    values.update(overrides)
    return ClientConfig(**values)


@pytest.fixture
def recording_logger() -> RecordingLogger:
    return RecordingLogger()


@pytest.fixture
def counting_cache() -> CountingCache:
    return CountingCache()


@pytest.fixture
def make_client():
    """Factory building a DummyClient around a RecordingTransport."""
    created: list[DummyClient] = []

    def _make(
        handler: Optional[Callable[[httpx.Request], httpx.Response]] = None,
        **config_overrides: Any,
    ) -> tuple[DummyClient, RecordingTransport]:
        transport = RecordingTransport(handler or json_handler())
        client = DummyClient(make_config(**config_overrides), transport=transport)
        created.append(client)
        return client, transport

    yield _make
    for client in created:
        client.close()
