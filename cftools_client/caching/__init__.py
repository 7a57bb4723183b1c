"""
Client-side caching package.

Provides the in-memory TTL store, cache key derivation and the caching
client that fronts another ``CFToolsClient``. Only idempotent lookups are
cached; writes always reach the wrapped client.
"""

from .cache_store import Cache, CacheEntry, InMemoryCache
from .caching_client import CachingCFToolsClient
from .ttl_config import DEFAULT_TTLS, CacheTTLConfig

__all__ = [
    "Cache",
    "CacheEntry",
    "InMemoryCache",
    "CachingCFToolsClient",
    "CacheTTLConfig",
    "DEFAULT_TTLS",
]
