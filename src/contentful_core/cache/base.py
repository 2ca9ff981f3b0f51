"""The cache adapter interface consumed by the client.

Any object with ``fetch`` and ``save`` methods of the shapes below can be
passed as :attr:`~contentful_core.models.ClientConfig.cache`.  The client
never inspects entry metadata: it only asks whether a key is present and
hands over raw bodies with a TTL.
"""

from __future__ import annotations

from typing import Optional, Protocol, Union, runtime_checkable


@runtime_checkable
class CacheAdapter(Protocol):
    """Key/value store with per-entry expiry.

    Implementations provide their own atomicity; the client does not lock
    around reads or writes.
    """

    def fetch(self, key: str) -> Optional[Union[str, bytes]]:
        """Return the body stored under *key*, or ``None`` when absent or expired."""
        ...

    def save(self, key: str, data: Union[str, bytes], ttl: int) -> None:
        """Store *data* under *key* for *ttl* seconds."""
        ...
