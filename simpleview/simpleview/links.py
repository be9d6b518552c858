"""URL helpers built from the current request."""

from __future__ import annotations

from typing import Any, Iterator, Mapping
from urllib.parse import parse_qsl, urlencode

from .core.models import RequestContext

# Query parameters never carried over from the current URL
RESERVED_QUERY_PARAMS = ("cachewrite",)

# Host type meaning "the host of the current request"
HOST_WEBSITE = "current_hostname"


def _query_pairs(name: str, value: Any) -> Iterator[tuple[str, Any]]:
    # Mappings nest as name[key], the way PHP query strings do
    if value is None:
        return
    if isinstance(value, Mapping):
        for key, item in value.items():
            yield from _query_pairs(f"{name}[{key}]", item)
    elif isinstance(value, (list, tuple)):
        for item in value:
            yield from _query_pairs(name, item)
    elif isinstance(value, bool):
        yield name, int(value)
    else:
        yield name, value


def build_link(
    request: RequestContext,
    query: Mapping[str, Any] | None = None,
    path: str | None = None,
    host: str | None = None,
) -> str:
    """Return a URL built from the current request with some parts replaced.

    Args:
        request: Current request
        query: Parameters merged over the current query string. A value of
            None removes the parameter, sequences repeat it and mappings
            nest as ``name[key]``.
        path: Replacement URL path
        host: Host to prefix the URL with

    Returns:
        ``host + path`` followed by ``?query`` when there is one
    """
    params: dict[str, Any] = dict(parse_qsl(request.query, keep_blank_values=True))
    for name in RESERVED_QUERY_PARAMS:
        params.pop(name, None)
    params.update(query or {})

    encoded = urlencode(
        [pair for name, value in params.items() for pair in _query_pairs(name, value)]
    )
    url_path = path or request.path
    return f"{host or ''}{url_path}" + (f"?{encoded}" if encoded else "")


def prefix_host(
    request: RequestContext,
    resource_path: str,
    host_type: str | None = None,
    app_env: str = "PROD",
) -> str:
    """Prefix a resource path with a protocol-relative host.

    The current request's host is used unless an explicit ``host_type`` is
    given and the application runs in ``PROD``.
    """
    if host_type is None or host_type == HOST_WEBSITE or app_env != "PROD":
        return f"//{request.host or ''}{resource_path}"
    return f"//{host_type}{resource_path}"
