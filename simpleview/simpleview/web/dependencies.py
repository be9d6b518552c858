"""FastAPI dependencies providing a request-scoped View."""

from __future__ import annotations

from functools import lru_cache

from fastapi import Depends, Request

from ..caching import InMemoryKeyValueStore, KeyValueStore, StaticCacheWriter
from ..core.config import ViewConfig
from ..core.models import RequestContext
from ..rendering.engine import View


@lru_cache(maxsize=1)
def get_config() -> ViewConfig:
    return ViewConfig()


@lru_cache(maxsize=1)
def get_lock_store() -> KeyValueStore:
    return InMemoryKeyValueStore()


def request_context(request: Request) -> RequestContext:
    # raw_path keeps percent-escapes, so an encoded "?" stays in the path
    raw_path = request.scope.get("raw_path")
    uri = raw_path.decode("latin-1") if raw_path else request.url.path
    if request.url.query:
        uri = f"{uri}?{request.url.query}"
    return RequestContext(uri=uri, host=request.headers.get("host"))


def get_view(
    context: RequestContext = Depends(request_context),
    config: ViewConfig = Depends(get_config),
    store: KeyValueStore = Depends(get_lock_store),
) -> View:
    """
    Fresh View per request, with static caching attached when enabled.
    """
    cache_writer = StaticCacheWriter(config, store) if config.static_page_caching else None
    return View(config, request=context, cache_writer=cache_writer)
