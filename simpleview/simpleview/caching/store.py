"""Key-value stores backing the static cache write lock."""

from __future__ import annotations

import threading
import time
from typing import Callable, Protocol


class KeyValueStore(Protocol):
    def get(self, key: str) -> str | None:
        ...

    def set(self, key: str, value: str, ttl_seconds: int) -> None:
        ...


class InMemoryKeyValueStore:
    """Process-local store with per-key expiry.

    Shared by every thread of a process. Use a networked store (memcached,
    redis) behind the same interface when several processes write the same
    cache.
    """

    def __init__(self, clock: Callable[[], float] = time.monotonic) -> None:
        self._clock = clock
        self._items: dict[str, tuple[str, float]] = {}
        self._lock = threading.Lock()

    def get(self, key: str) -> str | None:
        with self._lock:
            item = self._items.get(key)
            if item is None:
                return None
            value, expires_at = item
            if self._clock() >= expires_at:
                del self._items[key]
                return None
            return value

    def __len__(self) -> int:
        with self._lock:
            return len(self._items)

    def set(self, key: str, value: str, ttl_seconds: int) -> None:
        with self._lock:
            now = self._clock()
            expired = [k for k, (_, expires_at) in self._items.items() if now >= expires_at]
            for k in expired:
                del self._items[k]
            self._items[key] = (value, now + ttl_seconds)
