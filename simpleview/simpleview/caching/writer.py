"""Static HTML cache for rendered pages.

Rendered output is written to ``<static_cache_root>/<location>/index.html``
where the location is the request path (or a configured override). A lock
key in a shared key-value store keeps concurrent identical requests from all
rewriting the same file: once a write starts, further writes to that file
are declined until the lock expires.
"""

from __future__ import annotations

import hashlib
import logging
from pathlib import Path

from ..core.config import ViewConfig
from ..core.errors import CacheWriteFailed
from ..core.models import RequestContext
from ..rendering.io import atomic_write_text, file_digest, text_digest
from .store import KeyValueStore

logger = logging.getLogger(__name__)

CACHE_FILE_NAME = "index.html"
LOCK_KEY_PREFIX = "static_cache_write_lock_v2_"
LOCK_VALUE = "locked"
LOCK_TTL_SECONDS = 10


def lock_key(cache_file: Path) -> str:
    """Return the store key guarding writes to ``cache_file``."""
    return hashlib.md5(f"{LOCK_KEY_PREFIX}{cache_file.as_posix()}".encode("utf-8")).hexdigest()


class StaticCacheWriter:
    """Writes rendered pages to static files, at most once per lock window."""

    def __init__(self, config: ViewConfig, store: KeyValueStore) -> None:
        self._config = config
        self._store = store

    @property
    def enabled(self) -> bool:
        return self._config.static_page_caching

    def location(self, request: RequestContext) -> str:
        """Cache sub-path for ``request``: the configured override or the URL path."""
        return self._config.custom_cache_location or request.path

    def cache_file(self, request: RequestContext) -> Path:
        """Full path of the cache file for ``request``."""
        root = self._config.static_cache_root
        cache_dir = root / self.location(request).strip("/")
        cache_file = cache_dir / CACHE_FILE_NAME

        if root.resolve() not in cache_file.resolve().parents:
            raise CacheWriteFailed(cache_file, "location resolves outside the cache root")
        return cache_file

    def write(self, content: str, request: RequestContext) -> bool:
        """Write ``content`` as the cached page for ``request``.

        Returns:
            True if a file was written, False if caching is disabled, another
            writer holds the lock, or the cached file is already identical
        """
        if not self.enabled:
            return False

        cache_file = self.cache_file(request)
        key = lock_key(cache_file)
        if self._store.get(key) == LOCK_VALUE:
            logger.debug(f"Static cache write locked: {cache_file}")
            return False

        try:
            cache_file.parent.mkdir(parents=True, exist_ok=True)
            if file_digest(cache_file) == text_digest(content):
                logger.debug(f"Static cache unchanged: {cache_file}")
                return False

            self._store.set(key, LOCK_VALUE, LOCK_TTL_SECONDS)
            atomic_write_text(cache_file, content)
        except OSError as e:
            raise CacheWriteFailed(cache_file, str(e)) from e

        logger.info(f"Static cache written: {cache_file}")
        return True
