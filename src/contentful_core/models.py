"""Pydantic models shared across contentful_core.

Two groups of models live here:

**Runtime configuration** -- :class:`ClientConfig` is the frozen object a
:class:`~contentful_core.client.base.Client` is built from.  It carries live
collaborators (logger, cache adapter) and is never serialised.

**Settings** -- :class:`ClientSettings` and :class:`CacheSettings` are the
file/env-serialisable form loaded by :mod:`contentful_core.config` and turned
into a :class:`ClientConfig` by :func:`~contentful_core.config.build_config`.

:class:`ApiMode` selects one of the three API flavours and owns the
content-type and default-host lookups.
"""

from __future__ import annotations

import enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from contentful_core.cache.base import CacheAdapter
from contentful_core.cache.keys import extract_space_id
from contentful_core.log.logger import NoticeLogger

_DELIVERY_CONTENT_TYPE = "application/vnd.contentful.delivery.v1+json"
_MANAGEMENT_CONTENT_TYPE = "application/vnd.contentful.management.v1+json"


class ApiMode(str, enum.Enum):
    """Operating mode of a client.

    The mode only affects content negotiation and the default host; the
    request pipeline is identical for all three.
    """

    DELIVERY = "DELIVERY"
    PREVIEW = "PREVIEW"
    MANAGEMENT = "MANAGEMENT"

    @property
    def content_type(self) -> str:
        """Media type sent as ``Content-Type`` for this mode."""
        if self is ApiMode.MANAGEMENT:
            return _MANAGEMENT_CONTENT_TYPE
        return _DELIVERY_CONTENT_TYPE

    @property
    def default_host(self) -> str:
        """Public API host serving this mode."""
        return _DEFAULT_HOSTS[self]


_DEFAULT_HOSTS = {
    ApiMode.DELIVERY: "https://cdn.contentful.com",
    ApiMode.PREVIEW: "https://preview.contentful.com",
    ApiMode.MANAGEMENT: "https://api.contentful.com",
}


def space_base_uri(api: ApiMode, space_id: str, host: Optional[str] = None) -> str:
    """Return the base URI of *space_id* on the host serving *api*.

    The result always ends with a slash so relative paths resolve beneath
    the space.
    """
    root = (host or api.default_host).rstrip("/")
    return f"{root}/spaces/{space_id}/"


# --- Runtime configuration ---


class ClientConfig(BaseModel):
    """Immutable configuration of a single client.

    Example::

        config = ClientConfig(
            token="b4c0n73n7fu1",
            base_uri="https://cdn.contentful.com/spaces/cfexampleapi/",
            api=ApiMode.DELIVERY,
            cache=MemoryCache(),
        )
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    token: str = Field(min_length=1, description="Bearer access token")
    base_uri: str = Field(description="Base URI, containing a spaces/<id>/ segment")
    api: ApiMode = Field(default=ApiMode.DELIVERY)
    logger: Optional[NoticeLogger] = Field(
        default=None, description="Sink for transfer statistics"
    )
    cache: Optional[CacheAdapter] = Field(
        default=None, description="Adapter used for cache-first GET requests"
    )
    timeout: float = Field(default=30.0, gt=0, description="Transport timeout in seconds")
    verify_ssl: bool = Field(default=True, description="Verify TLS certificates")

    @property
    def space_id(self) -> str:
        """The space id encoded in :attr:`base_uri`.

        Raises:
            ConfigError: If the base URI has no ``spaces/<id>/`` segment.
        """
        return extract_space_id(self.base_uri)


# --- Settings ---


class CacheSettings(BaseModel):
    """Response cache settings stored in :class:`ClientSettings`."""

    enabled: bool = Field(default=False, description="Enable the disk cache")
    directory: Optional[str] = Field(
        default=None, description="Cache directory (defaults to the XDG cache dir)"
    )


class ClientSettings(BaseModel):
    """Serialisable client settings, as found in a settings file or the environment.

    ``token`` is a credential *source* (``env:VAR``, ``file:/path`` or the
    literal token) resolved by :func:`~contentful_core.config.resolve_credential`.
    Either ``base_uri`` or ``space_id`` must be given; when only ``space_id``
    is set the base URI is derived from ``api``.
    """

    token: str = Field(
        default="env:CONTENTFUL_ACCESS_TOKEN", description="Credential source"
    )
    space_id: Optional[str] = None
    base_uri: Optional[str] = None
    api: ApiMode = ApiMode.DELIVERY
    timeout: float = Field(default=30.0, gt=0)
    verify_ssl: bool = True
    cache: CacheSettings = Field(default_factory=CacheSettings)
