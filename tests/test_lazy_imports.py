"""Tests for fancypath.__init__ — the top-level API resolves lazily to its modules."""

import pytest

import fancypath
from fancypath.config import MatcherConfig
from fancypath.matching import matcher, segments, syntax
from fancypath.middleware.asgi import PathMatchMiddleware


@pytest.mark.parametrize(
    ("name", "expected"),
    [
        ("new_matcher", matcher.new_matcher),
        ("PathMatch", matcher.PathMatch),
        ("split_path", segments.split_path),
        ("normalize_pattern", segments.normalize_pattern),
        ("bind", syntax.bind),
        ("BracketSyntax", syntax.BracketSyntax),
        ("PlaceholderSyntax", syntax.PlaceholderSyntax),
        ("MatcherConfig", MatcherConfig),
        ("PathMatchMiddleware", PathMatchMiddleware),
    ],
)
def test_top_level_name_is_module_object(name: str, expected: object) -> None:
    assert getattr(fancypath, name) is expected


def test_registry_matches_all() -> None:
    assert set(fancypath._LAZY_IMPORTS) == set(fancypath.__all__)


@pytest.mark.parametrize("name", sorted(fancypath._LAZY_IMPORTS))
def test_registered_module_defines_name(name: str) -> None:
    assert getattr(fancypath, name).__module__ == fancypath._LAZY_IMPORTS[name]


def test_top_level_end_to_end() -> None:
    match = fancypath.new_matcher(
        "https://example.com/edit/article/42?tab=diff#top",
        "/any/{category}/{id}",
    )
    assert match.var("category") == "article"
    assert match.var_int("id") == (42, True)
    assert match.query("tab") == "diff"
    assert match.frag() == "top"


def test_unknown_name_raises_attribute_error() -> None:
    with pytest.raises(AttributeError, match="no attribute"):
        fancypath.__getattr__("ThisDoesNotExist")
