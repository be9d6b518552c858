"""SimpleView - server-side views with layouts, partials and placeholders.

Templates are executed with Jinja2, fill named placeholders while they
render, and are wrapped in layouts that read those placeholders back.
"""

__version__ = "0.1.0"

# Configure logging for library use
import logging

logging.getLogger(__name__).addHandler(logging.NullHandler())

from .caching import InMemoryKeyValueStore, KeyValueStore, StaticCacheWriter
from .core.config import ViewConfig, load_config
from .core.errors import (
    CacheWriteFailed,
    CaptureAlreadyActive,
    ConfigurationError,
    InvalidArgument,
    NoActiveCapture,
    TemplateExecutionFailed,
    ViewError,
)
from .core.models import RequestContext
from .rendering.engine import View
from .rendering.placeholders import PlaceholderStore

# Re-export main CLI entry point
from .cli import main

__all__ = [
    "CacheWriteFailed",
    "CaptureAlreadyActive",
    "ConfigurationError",
    "InMemoryKeyValueStore",
    "InvalidArgument",
    "KeyValueStore",
    "NoActiveCapture",
    "PlaceholderStore",
    "RequestContext",
    "StaticCacheWriter",
    "TemplateExecutionFailed",
    "View",
    "ViewConfig",
    "ViewError",
    "load_config",
    "main",
]
