"""Shared fixtures: a small site of Jinja2 views, layouts and partials."""
from pathlib import Path

import pytest

from simpleview import RequestContext, View, ViewConfig

SITE_FILES = {
    "views/index.html": "Hello {{ view_name }}!",
    "views/scope.html": "{{ name is defined }}|{{ view_name }}",
    "views/page.html": (
        '{% capture "meta-title" %}About {{ view_name }}{% endcapture %}'
        "<p>{{ view_name }}</p>"
    ),
    "views/head.html": (
        '{% capture "head-content" %}<script src="a.js"></script>{% endcapture %}'
        '{% capture "head-content" %}<script src="b.js"></script>{% endcapture %}'
        "body"
    ),
    "views/nested_capture.html": (
        '{% capture "outer" %}a{% capture "inner" %}b{% endcapture %}{% endcapture %}'
    ),
    "views/broken.html": "{{ view_missing }}",
    "views/with_partial.html": (
        '<ul>{{ view.partial("nested/widget.html", {"foo": view_count}) }}</ul>'
    ),
    "views/missing_partial.html": '{{ view.partial("nope.html") }}',
    "views/link.html": '{{ view.link({"q": "2"}) }}',
    "views/admin/dashboard.html": "dashboard",
    "layouts/default.html": '{{ placeholders.get_content("tmpl-content") }}',
    "layouts/site.html": (
        '<title>{{ placeholders.get_content("meta-title") or "" }}</title>'
        '<head>{{ placeholders.get_content("head-content") or "" }}</head>'
        '<body>{{ placeholders.get_content("tmpl-content") }}</body>'
    ),
    "layouts/greet.html": '{{ view_name }}:{{ placeholders.get_content("tmpl-content") }}',
    "parts/nested/widget.html": "<li>{{ parts_foo }}</li>",
    "parts/scope.html": "{{ view_name is defined }}|{{ parts_name }}",
}


@pytest.fixture
def site(tmp_path: Path) -> Path:
    """Write the site files under a temporary directory."""
    for rel, text in SITE_FILES.items():
        path = tmp_path / rel
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(text, encoding="utf-8")
    return tmp_path


@pytest.fixture
def config(site: Path) -> ViewConfig:
    return ViewConfig(
        view_directory=site / "views",
        layout_directory=site / "layouts",
        partials_directory=site / "parts",
        static_cache_root=site / "_static_cache",
    )


@pytest.fixture
def request_context() -> RequestContext:
    return RequestContext(uri="/page?q=1&r=5", host="example.com")


@pytest.fixture
def view(config: ViewConfig, request_context: RequestContext) -> View:
    return View(config, request=request_context)
