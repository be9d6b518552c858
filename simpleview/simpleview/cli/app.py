"""Main CLI application."""

from __future__ import annotations

import logging
from pathlib import Path

import typer
import yaml
from typing_extensions import Annotated

from ..caching import InMemoryKeyValueStore, StaticCacheWriter
from ..core.config import ViewConfig, load_config
from ..core.errors import ViewError
from ..core.models import RequestContext
from ..rendering.engine import View
from ..rendering.io import atomic_write_text
from .parsers import coerce_value, parse_assignment, parse_data, parse_file_mode

logger = logging.getLogger(__name__)

app = typer.Typer(
    name="simpleview",
    help="Render views with layouts, partials and placeholders.",
)

ConfigFileOption = Annotated[
    str,
    typer.Option(
        "--config",
        help="YAML file with view configuration options.",
        metavar="FILE",
    ),
]
SetOption = Annotated[
    list[str],
    typer.Option(
        "--set",
        help="Override a configuration option (format: KEY=VALUE). Repeatable.",
        metavar="KEY=VALUE",
    ),
]
VerboseOption = Annotated[
    bool,
    typer.Option(
        "--verbose",
        "-v",
        help="Enable verbose logging.",
    ),
]


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="[%(levelname)s] %(message)s",
    )


def _build_config(config_file: str, settings: list[str]) -> ViewConfig:
    overrides = dict(map(parse_assignment, settings))
    try:
        return load_config(Path(config_file) if config_file else None, overrides)
    except (ViewError, ValueError) as e:
        logger.error(f"Invalid configuration: {e}")
        raise typer.Exit(code=2) from e


@app.command()
def render(
    script: Annotated[
        str,
        typer.Argument(help="Template name, relative to the view directory, without extension."),
    ],
    data: Annotated[
        str,
        typer.Option(
            "--data",
            help="Template data as a JSON object. Exposed with a view_ prefix.",
            metavar="JSON",
        ),
    ] = "{}",
    variables: Annotated[
        list[str],
        typer.Option(
            "--var",
            help="Single template variable (format: KEY=VALUE, value type is inferred). Repeatable.",
            metavar="KEY=VALUE",
        ),
    ] = [],
    layout: Annotated[
        str,
        typer.Option(
            "--layout",
            help="Layout name, relative to the layout directory.",
            metavar="NAME",
        ),
    ] = "default",
    no_layout: Annotated[
        bool,
        typer.Option(
            "--no-layout",
            help="Return the template output without a layout.",
        ),
    ] = False,
    url: Annotated[
        str,
        typer.Option(
            "--url",
            help="Request URI the page is rendered for (path and query).",
            metavar="URI",
        ),
    ] = "/",
    host: Annotated[
        str,
        typer.Option(
            "--host",
            help="Request host used for host-prefixed links.",
            metavar="HOST",
        ),
    ] = "",
    output: Annotated[
        str,
        typer.Option(
            "--output",
            "-o",
            help="Write the page to FILE instead of stdout.",
            metavar="FILE",
        ),
    ] = "",
    file_mode: Annotated[
        str,
        typer.Option(
            "--mode",
            help="File permissions in octal for --output (default: 0644).",
            metavar="OCTAL",
        ),
    ] = "0644",
    config_file: ConfigFileOption = "",
    settings: SetOption = [],
    verbose: VerboseOption = False,
) -> None:
    """Render a view and print the resulting page."""
    _configure_logging(verbose)

    template_data = parse_data(data)
    template_data.update(
        {key: coerce_value(raw) for key, raw in map(parse_assignment, variables)}
    )
    mode = parse_file_mode(file_mode)
    config = _build_config(config_file, settings)

    cache_writer = None
    if config.static_page_caching:
        cache_writer = StaticCacheWriter(config, InMemoryKeyValueStore())
        logger.debug(f"Static page caching enabled under {config.static_cache_root}")

    view = View(
        config,
        request=RequestContext(uri=url, host=host or None),
        cache_writer=cache_writer,
    )

    try:
        page = view.render(script, template_data, None if no_layout else layout)
    except ViewError as e:
        logger.error(str(e))
        raise typer.Exit(code=1) from e

    if output:
        atomic_write_text(Path(output), page, mode=mode)
        logger.info(f"Rendered {script} → {output}")
    else:
        typer.echo(page)


@app.command("config")
def show_config(
    config_file: ConfigFileOption = "",
    settings: SetOption = [],
    verbose: VerboseOption = False,
) -> None:
    """Print the effective view configuration as YAML."""
    _configure_logging(verbose)

    config = _build_config(config_file, settings)
    typer.echo(yaml.safe_dump(config.model_dump(mode="json"), sort_keys=False), nl=False)


def main() -> None:
    """Entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
