"""FastAPI dependencies providing a request-scoped View."""

from .dependencies import get_config, get_lock_store, get_view, request_context

__all__ = ["get_config", "get_lock_store", "get_view", "request_context"]
