"""Disk-backed cache adapter.

Uses :mod:`diskcache` to persist raw GET response bodies on the filesystem
with a per-entry time-to-live.  Entries survive process restarts and are
safe to share between threads and processes pointing at the same
directory.

See Also:
    :func:`~contentful_core.config.get_cache_dir` -- the default location.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Optional, Union

import diskcache


class DiskCache:
    """:class:`~contentful_core.cache.base.CacheAdapter` backed by :class:`diskcache.Cache`.

    Args:
        cache_dir: Root directory for the cache.  A ``responses/``
            subdirectory is created inside it.

    Example::

        from contentful_core.cache import DiskCache

        cache = DiskCache("/tmp/contentful-cache")
        cache.save("cfexampleapi_ab12...", '{"items": []}', 600)
        body = cache.fetch("cfexampleapi_ab12...")
    """

    def __init__(self, cache_dir: str | Path) -> None:
        self._cache_dir = Path(cache_dir)
        self._cache = diskcache.Cache(str(self._cache_dir / "responses"))

    def fetch(self, key: str) -> Optional[Union[str, bytes]]:
        """Return the stored body, or ``None`` on a miss or expired entry."""
        return self._cache.get(key)

    def save(self, key: str, data: Union[str, bytes], ttl: int) -> None:
        """Store *data* under *key*, expiring after *ttl* seconds (no expiry when ``ttl <= 0``)."""
        self._cache.set(key, data, expire=ttl if ttl > 0 else None)

    def delete(self, key: str) -> None:
        """Remove a single entry."""
        self._cache.delete(key)

    def clear(self) -> None:
        """Remove all entries from the cache."""
        self._cache.clear()

    def stats(self) -> dict[str, Any]:
        """Return the number of entries and the directory holding them."""
        return {
            "size": len(self._cache),
            "directory": str(self._cache_dir / "responses"),
        }

    def close(self) -> None:
        """Close the underlying :class:`diskcache.Cache` and release resources."""
        self._cache.close()
