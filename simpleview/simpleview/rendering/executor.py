"""Template execution: turns a template file plus bindings into text."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Mapping, Protocol

from jinja2 import Environment, FileSystemLoader, StrictUndefined, Template, Undefined, nodes
from jinja2.ext import Extension
from jinja2.parser import Parser
from jinja2.runtime import Context

from ..core.errors import ViewError

logger = logging.getLogger(__name__)

# Binding under which every execution receives its PlaceholderStore
PLACEHOLDERS_BINDING = "placeholders"
# Binding under which every execution receives the View driving it
VIEW_BINDING = "view"


class TemplateExecutor(Protocol):
    def execute(self, path: Path, bindings: Mapping[str, Any]) -> str:
        ...


class CaptureExtension(Extension):
    """Adds ``{% capture "name" %}...{% endcapture %}`` to Jinja2.

    The body is rendered into the placeholder store found under the
    ``placeholders`` binding and nothing is emitted in place of the block.
    """

    tags = {"capture"}

    def parse(self, parser: Parser) -> nodes.Node:
        lineno = next(parser.stream).lineno
        args = [parser.parse_expression(), nodes.ContextReference()]
        body = parser.parse_statements(("name:endcapture",), drop_needle=True)
        return nodes.CallBlock(
            self.call_method("_capture", args), [], [], body
        ).set_lineno(lineno)

    def _capture(self, name: str, context: Context, caller: Any) -> str:
        store = context.get(PLACEHOLDERS_BINDING)
        if store is None:
            raise ViewError("{% capture %} used outside of a view render")
        with store.capture(name) as buffer:
            buffer.write(caller())
        return ""


class JinjaTemplateExecutor:
    """Executes template files with Jinja2.

    Each template directory gets its own environment so that ``include`` and
    ``extends`` inside a template resolve next to it.
    """

    def __init__(self, *, strict: bool = True) -> None:
        self._strict = strict
        self._environments: dict[Path, Environment] = {}

    def _environment(self, directory: Path) -> Environment:
        env = self._environments.get(directory)
        if env is None:
            env = Environment(
                loader=FileSystemLoader(str(directory)),
                undefined=StrictUndefined if self._strict else Undefined,
                autoescape=False,
                trim_blocks=True,
                lstrip_blocks=True,
                keep_trailing_newline=True,
                extensions=[CaptureExtension],
            )
            self._environments[directory] = env
        return env

    def load_template(self, path: Path) -> Template:
        """Load a Jinja2 template from a file path.

        Args:
            path: Path to the template file

        Returns:
            Compiled Jinja2 template
        """
        if not path.is_file():
            raise FileNotFoundError(f"Template not found: {path}")
        return self._environment(path.parent).get_template(path.name)

    def execute(self, path: Path, bindings: Mapping[str, Any]) -> str:
        logger.debug(f"Executing template: {path}")
        return self.load_template(path).render(**bindings)
