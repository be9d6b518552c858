"""Static page caching guarded by a write lock."""

from .store import InMemoryKeyValueStore, KeyValueStore
from .writer import StaticCacheWriter

__all__ = ["InMemoryKeyValueStore", "KeyValueStore", "StaticCacheWriter"]
