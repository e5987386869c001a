"""Tests for fancypath.http.target — RequestTarget factories."""

import pytest

from fancypath.http.target import RequestTarget


class TestFromUrl:
    def test_absolute_url(self) -> None:
        target = RequestTarget.from_url("https://example.com/blog/article/?item=42#top")
        assert target == RequestTarget(path="/blog/article/", raw_query="item=42", fragment="top")

    def test_origin_form(self) -> None:
        target = RequestTarget.from_url("/edit/article/42")
        assert target.path == "/edit/article/42"
        assert target.raw_query == ""
        assert target.fragment == ""

    def test_empty_path_is_root(self) -> None:
        assert RequestTarget.from_url("https://example.com").path == "/"
        assert RequestTarget.from_url("").path == "/"

    def test_path_and_fragment_decoded(self) -> None:
        target = RequestTarget.from_url("/a%20b?q=a%20b#sec%201")
        assert target.path == "/a b"
        assert target.fragment == "sec 1"

    def test_query_left_raw(self) -> None:
        assert RequestTarget.from_url("/?q=a%20b").raw_query == "q=a%20b"


class TestFromAsgi:
    def test_http_scope(self) -> None:
        scope = {"type": "http", "path": "/posts/42", "query_string": b"page=2"}
        target = RequestTarget.from_asgi(scope)
        assert target == RequestTarget(path="/posts/42", raw_query="page=2", fragment="")

    def test_missing_query_string(self) -> None:
        assert RequestTarget.from_asgi({"type": "http", "path": "/"}).raw_query == ""

    def test_latin1_query(self) -> None:
        target = RequestTarget.from_asgi({"path": "/", "query_string": "q=é".encode("latin-1")})
        assert target.raw_query == "q=é"


class TestRequestTarget:
    def test_defaults(self) -> None:
        target = RequestTarget()
        assert target.path == "/"
        assert target.raw_query == ""
        assert target.fragment == ""

    def test_frozen(self) -> None:
        target = RequestTarget()
        with pytest.raises(AttributeError):
            target.path = "/other"  # type: ignore[misc]
