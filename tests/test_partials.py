"""Tests for partial rendering."""
import pytest

from simpleview import TemplateExecutionFailed, View
from simpleview.rendering.placeholders import TMPL_CONTENT


def test_partial_in_subdirectory(view):
    assert view.partial("nested/widget.html", {"foo": 1}) == "<li>1</li>"


def test_partial_data_uses_parts_prefix(view):
    assert view.partial("scope.html", {"name": "y"}) == "False|y"


def test_partial_does_not_touch_placeholders(view):
    view.partial("nested/widget.html", {"foo": 1})
    assert view.placeholders.get_content(TMPL_CONTENT) is None


def test_partial_path_has_no_extension_appended(config):
    calls = []

    class Executor:
        def execute(self, path, bindings):
            calls.append((path, bindings))
            return ""

    View(config, executor=Executor()).partial("nested/widget", {"foo": 1})

    path, bindings = calls[0]
    assert path == config.partials_directory / "nested" / "widget"
    assert bindings["parts_foo"] == 1


def test_missing_partial(view, config):
    with pytest.raises(TemplateExecutionFailed) as exc_info:
        view.partial("nested/missing.html")

    assert exc_info.value.kind == "partial"
    assert exc_info.value.path == config.partials_directory / "nested" / "missing.html"
