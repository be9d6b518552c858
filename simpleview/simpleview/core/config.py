"""View configuration."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Mapping

import yaml
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from .errors import ConfigurationError

logger = logging.getLogger(__name__)

# Option names, usable as keys for ViewConfig.merged()
CONFIG_VIEW_DIR = "view_directory"
CONFIG_LAYOUT_DIR = "layout_directory"
CONFIG_PARTS_DIR = "partials_directory"
CONFIG_STATIC_PAGE_CACHING = "static_page_caching"
CONFIG_STATIC_CACHE_DIR = "static_cache_root"
CONFIG_CUSTOM_CACHE_DIR = "custom_cache_location"


class ViewConfig(BaseSettings):
    """Process-wide view configuration.

    Values are read from ``SIMPLEVIEW_*`` environment variables, then from
    keyword arguments. Instances are immutable: use :meth:`merged` to derive
    a new configuration with some options replaced.
    """

    model_config = SettingsConfigDict(
        env_prefix="SIMPLEVIEW_",
        case_sensitive=False,
        frozen=True,
        extra="forbid",
    )

    view_directory: Path = Field(default=Path("./views/"), description="Template root")
    layout_directory: Path = Field(default=Path("./layouts/"), description="Layout root")
    partials_directory: Path = Field(default=Path("./parts/"), description="Partial root")
    template_extension: str = Field(
        default=".html", description="Extension appended to template and layout names"
    )
    static_page_caching: bool = Field(
        default=False, description="Write rendered pages to static HTML files"
    )
    static_cache_root: Path = Field(
        default=Path("_static_cache"), description="Root directory for static cache files"
    )
    custom_cache_location: str | None = Field(
        default=None, description="Cache sub-path used instead of the request path"
    )
    app_env: str = Field(default="PROD", description="Environment name used for host prefixing")

    def merged(self, properties: Mapping[str, Any]) -> ViewConfig:
        """Return a copy with ``properties`` merged over the current values."""
        return type(self)(**{**self.model_dump(), **properties})


def load_config(
    path: Path | None = None,
    overrides: Mapping[str, Any] | None = None,
    base: ViewConfig | None = None,
) -> ViewConfig:
    """Build a configuration from the environment, a YAML file and overrides.

    Args:
        path: Optional YAML file holding a flat mapping of option names
        overrides: Options applied last
        base: Starting configuration (default: read from the environment)

    Returns:
        Validated configuration
    """
    config = base if base is not None else ViewConfig()

    if path is not None:
        logger.debug(f"Loading view configuration from {path}")
        try:
            data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
        except (OSError, yaml.YAMLError) as e:
            raise ConfigurationError(f"Cannot read configuration {path}: {e}") from e
        if not isinstance(data, dict):
            raise ConfigurationError(f"Configuration {path} must be a mapping")
        config = config.merged(data)

    if overrides:
        config = config.merged(overrides)

    return config
