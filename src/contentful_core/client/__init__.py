"""HTTP client module for contentful_core.

Provides the abstract :class:`Client` with the cache-first request
pipeline, the concrete :class:`DeliveryClient` and :class:`ManagementClient`,
and the building blocks they are assembled from.

Classes:
    :class:`Client` -- abstract base; subclasses name themselves for ``User-Agent``.
    :class:`DeliveryClient` -- Delivery and Preview APIs.
    :class:`ManagementClient` -- Management API.
    :class:`RequestBuilder` -- builds :class:`httpx.Request` objects.
    :class:`TransportExecutor` -- sends them and maps failures.

Example::

    from contentful_core.client import DeliveryClient

    with DeliveryClient.for_space(token, "cfexampleapi") as client:
        entries = client.get("entries")
"""

from contentful_core.client.base import CACHE_TIMEOUT, Client
from contentful_core.client.clients import DeliveryClient, ManagementClient, create_client
from contentful_core.client.request_builder import RequestBuilder, build_user_agent
from contentful_core.query import encode_query
from contentful_core.client.response import decode_json
from contentful_core.client.transport import TransportExecutor

__all__ = [
    "CACHE_TIMEOUT",
    "Client",
    "DeliveryClient",
    "ManagementClient",
    "RequestBuilder",
    "TransportExecutor",
    "build_user_agent",
    "create_client",
    "decode_json",
    "encode_query",
]
