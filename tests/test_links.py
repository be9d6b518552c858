"""Tests for link building and host prefixing."""
import pytest

from simpleview import RequestContext, View
from simpleview.links import HOST_WEBSITE, build_link, prefix_host

PAGE = RequestContext(uri="/page?q=1&r=5", host="www.example.com")


class TestBuildLink:
    def test_override_wins_and_others_preserved(self):
        assert build_link(PAGE, {"q": "2"}) == "/page?q=2&r=5"

    def test_no_changes_keeps_query(self):
        assert build_link(PAGE) == "/page?q=1&r=5"

    def test_new_parameter_appended(self):
        assert build_link(PAGE, {"s": "x"}) == "/page?q=1&r=5&s=x"

    def test_none_removes_parameter(self):
        assert build_link(PAGE, {"r": None}) == "/page?q=1"

    def test_no_query_left(self):
        assert build_link(RequestContext(uri="/page"), {}) == "/page"

    def test_path_override(self):
        assert build_link(PAGE, path="/other") == "/other?q=1&r=5"

    def test_host_override(self):
        assert build_link(PAGE, {"q": "3"}, host="//cdn.example.com") == "//cdn.example.com/page?q=3&r=5"

    def test_request_host_not_used_without_override(self):
        assert not build_link(PAGE).startswith("www.example.com")

    def test_cache_command_not_preserved(self):
        request = RequestContext(uri="/page?cachewrite=1&a=b")
        assert build_link(request) == "/page?a=b"

    def test_cache_command_can_be_set_explicitly(self):
        request = RequestContext(uri="/page?cachewrite=1")
        assert build_link(request, {"cachewrite": "0"}) == "/page?cachewrite=0"

    @pytest.mark.parametrize(
        "query, expected",
        [
            ({"flag": True}, "/page?flag=1"),
            ({"flag": False}, "/page?flag=0"),
            ({"tag": ["a", "b"]}, "/page?tag=a&tag=b"),
            ({"term": "two words"}, "/page?term=two+words"),
            ({"n": 3}, "/page?n=3"),
            ({"filter": {"color": "red"}}, "/page?filter%5Bcolor%5D=red"),
            ({"f": {"a": {"b": 1}, "c": [1, 2]}}, "/page?f%5Ba%5D%5Bb%5D=1&f%5Bc%5D=1&f%5Bc%5D=2"),
            ({"f": {"a": None, "b": True}}, "/page?f%5Bb%5D=1"),
        ],
    )
    def test_value_encoding(self, query, expected):
        assert build_link(RequestContext(uri="/page"), query) == expected

    def test_blank_values_kept(self):
        assert build_link(RequestContext(uri="/page?a=&b=1")) == "/page?a=&b=1"


class TestPrefixHost:
    def test_defaults_to_request_host(self):
        assert prefix_host(PAGE, "/img/logo.png") == "//www.example.com/img/logo.png"

    def test_website_host_type(self):
        assert prefix_host(PAGE, "/a.css", HOST_WEBSITE) == "//www.example.com/a.css"

    def test_explicit_host_in_prod(self):
        assert prefix_host(PAGE, "/a.css", "static.example.com") == "//static.example.com/a.css"

    def test_explicit_host_ignored_outside_prod(self):
        result = prefix_host(PAGE, "/a.css", "static.example.com", app_env="DEV")
        assert result == "//www.example.com/a.css"


def test_view_helpers_use_request_and_config(config):
    view = View(config.merged({"app_env": "DEV"}), request=PAGE)
    assert view.link({"q": "9"}) == "/page?q=9&r=5"
    assert view.prefix_host("/a.css", "static.example.com") == "//www.example.com/a.css"


def test_request_context_parts():
    assert PAGE.path == "/page"
    assert PAGE.query == "q=1&r=5"
    assert RequestContext().path == "/"
