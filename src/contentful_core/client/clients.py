"""Concrete clients for the Delivery/Preview and Management APIs.

Both are thin :class:`~contentful_core.client.base.Client` subclasses: they
name themselves in ``User-Agent``, check that the configured mode suits
them, and offer a :meth:`for_space` constructor that derives the base URI
from a space id.
"""

from __future__ import annotations

from typing import Optional

import httpx

from contentful_core import __version__
from contentful_core.cache.base import CacheAdapter
from contentful_core.client.base import Client
from contentful_core.exceptions import ConfigError
from contentful_core.log.logger import NoticeLogger
from contentful_core.models import ApiMode, ClientConfig, space_base_uri


class DeliveryClient(Client):
    """Read-only client for the Content Delivery API, or the Preview API.

    Example::

        client = DeliveryClient.for_space("b4c0n73n7fu1", "cfexampleapi")
        entries = client.get("entries", query={"content_type": "cat"})
    """

    def __init__(
        self,
        config: ClientConfig,
        transport: Optional[httpx.BaseTransport] = None,
    ) -> None:
        if config.api not in (ApiMode.DELIVERY, ApiMode.PREVIEW):
            raise ConfigError(
                f"DeliveryClient requires DELIVERY or PREVIEW mode, got {config.api.value}"
            )
        super().__init__(config, transport=transport)

    def user_agent_app_name(self) -> str:
        return f"contentful-core.delivery/{__version__}"

    @property
    def is_preview(self) -> bool:
        return self.config.api is ApiMode.PREVIEW

    @classmethod
    def for_space(
        cls,
        token: str,
        space_id: str,
        preview: bool = False,
        logger: Optional[NoticeLogger] = None,
        cache: Optional[CacheAdapter] = None,
        host: Optional[str] = None,
        timeout: float = 30.0,
        transport: Optional[httpx.BaseTransport] = None,
    ) -> DeliveryClient:
        """Create a client for *space_id* on the public delivery or preview host.

        Args:
            token: Delivery (or preview) access token.
            space_id: Id of the space to read from.
            preview: Use the Preview API instead of the Delivery API.
            logger: Receiver of transfer statistics.
            cache: Adapter for cache-first GET requests.
            host: Override of the default API host.
            timeout: Transport timeout in seconds.
            transport: Optional httpx transport.
        """
        api = ApiMode.PREVIEW if preview else ApiMode.DELIVERY
        config = ClientConfig(
            token=token,
            base_uri=space_base_uri(api, space_id, host),
            api=api,
            logger=logger,
            cache=cache,
            timeout=timeout,
        )
        return cls(config, transport=transport)


class ManagementClient(Client):
    """Client for the Content Management API."""

    def __init__(
        self,
        config: ClientConfig,
        transport: Optional[httpx.BaseTransport] = None,
    ) -> None:
        if config.api is not ApiMode.MANAGEMENT:
            raise ConfigError(
                f"ManagementClient requires MANAGEMENT mode, got {config.api.value}"
            )
        super().__init__(config, transport=transport)

    def user_agent_app_name(self) -> str:
        return f"contentful-core.management/{__version__}"

    @classmethod
    def for_space(
        cls,
        token: str,
        space_id: str,
        logger: Optional[NoticeLogger] = None,
        cache: Optional[CacheAdapter] = None,
        host: Optional[str] = None,
        timeout: float = 30.0,
        transport: Optional[httpx.BaseTransport] = None,
    ) -> ManagementClient:
        """Create a client for *space_id* on the management host."""
        config = ClientConfig(
            token=token,
            base_uri=space_base_uri(ApiMode.MANAGEMENT, space_id, host),
            api=ApiMode.MANAGEMENT,
            logger=logger,
            cache=cache,
            timeout=timeout,
        )
        return cls(config, transport=transport)


def create_client(
    config: ClientConfig,
    transport: Optional[httpx.BaseTransport] = None,
) -> Client:
    """Return the concrete client matching ``config.api``."""
    if config.api is ApiMode.MANAGEMENT:
        return ManagementClient(config, transport=transport)
    return DeliveryClient(config, transport=transport)
