"""View rendering: templates, layouts and partials."""

from __future__ import annotations

import logging
from email.utils import formatdate
from pathlib import Path
from typing import Any, Mapping

from ..caching.writer import StaticCacheWriter
from ..core.config import ViewConfig
from ..core.errors import ExecutionKind, TemplateExecutionFailed, ViewError
from ..core.models import RequestContext
from ..links import build_link, prefix_host
from .executor import PLACEHOLDERS_BINDING, VIEW_BINDING, JinjaTemplateExecutor, TemplateExecutor
from .placeholders import TMPL_CONTENT, PlaceholderStore

logger = logging.getLogger(__name__)

VIEW_PREFIX = "view_"
PARTIAL_PREFIX = "parts_"


def prefixed(data: Mapping[str, Any] | None, prefix: str) -> dict[str, Any]:
    """Namespace ``data`` keys so templates can tell them from their own locals."""
    return {f"{prefix}{name}": value for name, value in (data or {}).items()}


class View:
    """Renders templates for a single request.

    A View owns the placeholder store its templates share, so create one per
    request and never share it between concurrent requests. Rendering
    appends to the template content placeholder: call :meth:`reset` before
    reusing a View for an unrelated render.

    Args:
        config: View configuration
        request: Current request, used for links and cache locations
        executor: Template executor (default: Jinja2)
        cache_writer: Static cache writer. When given, every render is
            offered to it and the result is followed by cache debug comments.
    """

    def __init__(
        self,
        config: ViewConfig,
        *,
        request: RequestContext | None = None,
        executor: TemplateExecutor | None = None,
        cache_writer: StaticCacheWriter | None = None,
    ) -> None:
        self.config = config
        self.request = request or RequestContext()
        self.placeholders = PlaceholderStore()
        self._executor = executor or JinjaTemplateExecutor()
        self._cache_writer = cache_writer

    def _execute(self, path: Path, bindings: dict[str, Any], kind: ExecutionKind) -> str:
        bindings[VIEW_BINDING] = self
        bindings[PLACEHOLDERS_BINDING] = self.placeholders
        try:
            return self._executor.execute(path, bindings)
        except ViewError:
            raise
        except Exception as e:
            raise TemplateExecutionFailed(path, kind) from e

    def template_path(self, script: str) -> Path:
        return self.config.view_directory / f"{script}{self.config.template_extension}"

    def layout_path(self, layout: str) -> Path:
        return self.config.layout_directory / f"{layout}{self.config.template_extension}"

    def partial_path(self, script: str) -> Path:
        return self.config.partials_directory / script

    def render(
        self,
        script: str,
        data: Mapping[str, Any] | None = None,
        layout: str | None = "default",
    ) -> str:
        """Render ``script`` with ``data``, optionally inside ``layout``.

        ``data`` is exposed to the template and the layout with a ``view_``
        prefix: ``{"foo": 1}`` becomes ``view_foo``. The template output is
        appended to the ``tmpl-content`` placeholder, which the layout reads
        back. Without a layout, the content of that placeholder is returned.

        Raises:
            TemplateExecutionFailed: The template or layout is missing or fails
        """
        bindings = prefixed(data, VIEW_PREFIX)

        content = self._execute(self.template_path(script), dict(bindings), "template")
        self.placeholders.set_content(TMPL_CONTENT, content)

        if isinstance(layout, str) and layout:
            result = self._execute(self.layout_path(layout), dict(bindings), "layout")
        else:
            result = self.placeholders.get_content(TMPL_CONTENT) or ""

        logger.debug(f"Rendered view {script!r} (layout: {layout!r})")

        if self._cache_writer is None:
            return result

        cache_written = self._cache_writer.write(result, self.request)
        return "\n".join(
            [
                result,
                f"<!-- Generated: {formatdate(localtime=True)} -->",
                f"<!-- Location: {self._cache_writer.location(self.request)} -->",
                f"<!-- cache Updated: {'true' if cache_written else 'false'} -->",
            ]
        )

    def partial(self, script: str, data: Mapping[str, Any] | None = None) -> str:
        """Render the partial ``script`` and return its output.

        ``script`` is relative to the partials directory, may contain
        sub-directories and must include its extension. ``data`` is exposed
        with a ``parts_`` prefix.
        """
        return self._execute(
            self.partial_path(script), prefixed(data, PARTIAL_PREFIX), "partial"
        )

    def link(
        self,
        query: Mapping[str, Any] | None = None,
        path: str | None = None,
        host: str | None = None,
    ) -> str:
        return build_link(self.request, query, path, host)

    def prefix_host(self, resource_path: str, host_type: str | None = None) -> str:
        return prefix_host(self.request, resource_path, host_type, self.config.app_env)

    def reset(self) -> None:
        """Clear every placeholder so the next render starts from scratch."""
        self.placeholders.reset()
