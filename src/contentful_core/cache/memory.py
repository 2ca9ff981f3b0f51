"""In-process cache adapter with per-entry expiry."""

from __future__ import annotations

import threading
import time
from typing import Callable, Optional, Union


class MemoryCache:
    """Dict-backed :class:`~contentful_core.cache.base.CacheAdapter`.

    Entries live for the lifetime of the process (or until their TTL runs
    out).  Expired entries are dropped lazily on the next ``fetch``.  A TTL
    of ``0`` or less stores the entry without expiry.

    Args:
        clock: Monotonic time source, in seconds.
    """

    def __init__(self, clock: Callable[[], float] = time.monotonic) -> None:
        self._clock = clock
        self._entries: dict[str, tuple[Union[str, bytes], Optional[float]]] = {}
        self._lock = threading.Lock()

    def fetch(self, key: str) -> Optional[Union[str, bytes]]:
        with self._lock:
            entry = self._entries.get(key)
            if entry is None:
                return None
            data, expires_at = entry
            if expires_at is not None and self._clock() >= expires_at:
                del self._entries[key]
                return None
            return data

    def save(self, key: str, data: Union[str, bytes], ttl: int) -> None:
        expires_at = self._clock() + ttl if ttl > 0 else None
        with self._lock:
            self._entries[key] = (data, expires_at)

    def clear(self) -> None:
        """Remove every entry."""
        with self._lock:
            self._entries.clear()

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)
