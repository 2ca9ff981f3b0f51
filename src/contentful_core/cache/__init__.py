"""Response caching for contentful_core.

The client talks to caches only through :class:`CacheAdapter` (``fetch``
and ``save``).  Two adapters ship with the package:

- :class:`DiskCache` -- persistent, backed by :mod:`diskcache`.
- :class:`MemoryCache` -- per-process dictionary.

:func:`make_cache_key` derives the space-scoped key used for GET requests.
"""

from contentful_core.cache.base import CacheAdapter
from contentful_core.cache.disk import DiskCache
from contentful_core.cache.keys import extract_space_id, make_cache_key
from contentful_core.cache.memory import MemoryCache

__all__ = [
    "CacheAdapter",
    "DiskCache",
    "MemoryCache",
    "extract_space_id",
    "make_cache_key",
]
