"""
Process-local key/value cache with per-entry expiry.
"""

import threading
import time
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Callable, Dict, Optional


class Cache(ABC):
    """Store contract used by the caching client."""

    @abstractmethod
    def get(self, key: str, default: Any = None) -> Any:
        """Return the live value for ``key`` or ``default``."""

    @abstractmethod
    def set(self, key: str, value: Any, ttl_seconds: int) -> None:
        """Store ``value`` for ``ttl_seconds``, replacing any existing entry."""

    @abstractmethod
    def contains(self, key: str) -> bool:
        ...

    def __contains__(self, key: str) -> bool:
        return self.contains(key)


@dataclass(frozen=True)
class CacheEntry:
    value: Any
    expires_at: float

    def is_expired(self, now: float) -> bool:
        return now > self.expires_at


class InMemoryCache(Cache):
    """Dictionary-backed cache with lazy expiry.

    Expired entries are dropped when they are looked up or by an explicit
    ``purge_expired()`` call. There is no size bound.
    """

    def __init__(self, clock: Optional[Callable[[], float]] = None):
        self._clock = clock or time.monotonic
        self._entries: Dict[str, CacheEntry] = {}
        self._lock = threading.Lock()

    def get(self, key: str, default: Any = None) -> Any:
        with self._lock:
            entry = self._entries.get(key)
            if entry is None:
                return default
            if entry.is_expired(self._clock()):
                del self._entries[key]
                return default
            return entry.value

    def set(self, key: str, value: Any, ttl_seconds: int) -> None:
        with self._lock:
            self._entries[key] = CacheEntry(value=value, expires_at=self._clock() + ttl_seconds)

    def contains(self, key: str) -> bool:
        marker = object()
        return self.get(key, marker) is not marker

    def delete(self, key: str) -> bool:
        """Remove ``key``; returns whether an entry was stored."""
        with self._lock:
            return self._entries.pop(key, None) is not None

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()

    def purge_expired(self) -> int:
        """Drop all expired entries and return how many were removed."""
        with self._lock:
            now = self._clock()
            expired = [key for key, entry in self._entries.items() if entry.is_expired(now)]
            for key in expired:
                del self._entries[key]
            return len(expired)

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)
