"""contentful_core -- request-dispatch core for Contentful API clients.

Builds bearer-authenticated requests for the Delivery, Preview and
Management APIs, answers GET requests from a cache when it can, maps 404
responses to :class:`ResourceNotFoundError`, decodes JSON bodies, and
reports per-send transfer statistics to a logger.

Typical usage::

    from contentful_core import DeliveryClient, MemoryCache

    with DeliveryClient.for_space(token, "cfexampleapi", cache=MemoryCache()) as client:
        entries = client.get("entries", query={"limit": 10})

Modules:
    client: The request pipeline and concrete clients.
    cache: Cache adapter interface, key derivation, disk and memory adapters.
    auth: Bearer token authentication for httpx.
    log: Timer, notice loggers and transfer statistics.
    models: Pydantic configuration models.
    config: Settings files, environment and credential resolution.
    exceptions: Error hierarchy.
"""

__version__ = "0.1.0"

from contentful_core.cache import CacheAdapter, DiskCache, MemoryCache
from contentful_core.client import Client, DeliveryClient, ManagementClient, create_client
from contentful_core.exceptions import (
    ConfigError,
    ContentfulError,
    DecodeError,
    InvalidArgumentError,
    ResourceNotFoundError,
    TransportError,
)
from contentful_core.models import ApiMode, ClientConfig

__all__ = [
    "ApiMode",
    "CacheAdapter",
    "Client",
    "ClientConfig",
    "ConfigError",
    "ContentfulError",
    "DecodeError",
    "DeliveryClient",
    "DiskCache",
    "InvalidArgumentError",
    "ManagementClient",
    "MemoryCache",
    "ResourceNotFoundError",
    "TransportError",
    "__version__",
    "create_client",
]
