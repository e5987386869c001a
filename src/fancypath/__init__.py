"""Fancypath — bind URL path segments to named pattern variables.

One pattern, one request, one immutable result::

    from fancypath import new_matcher

    match = new_matcher("https://example.com/edit/article/42?tab=diff#top",
                        "/any/{category}/{id}")
    match.var("category")   # "article"
    match.var_int("id")     # (42, True)
    match.query("tab")      # "diff"
    match.frag()            # "top"

Placeholder syntax (every segment names a variable, ``*`` and empty
segments are skipped)::

    from fancypath import MatcherConfig

    match = new_matcher(url, "/*/category/id", MatcherConfig(syntax="placeholder"))
"""

__version__ = "0.1.0"
__all__ = [
    "BracketSyntax",
    "ConfigurationError",
    "FancypathError",
    "MatcherConfig",
    "MultiValueMapping",
    "PathMatch",
    "PathMatchMiddleware",
    "PatternSyntax",
    "PlaceholderSyntax",
    "QueryParams",
    "RequestTarget",
    "bind",
    "new_matcher",
    "normalize_pattern",
    "split_path",
]

# name -> defining module
_LAZY_IMPORTS: dict[str, str] = {
    "BracketSyntax": "fancypath.matching.syntax",
    "ConfigurationError": "fancypath.errors",
    "FancypathError": "fancypath.errors",
    "MatcherConfig": "fancypath.config",
    "MultiValueMapping": "fancypath._internal.multimap",
    "PathMatch": "fancypath.matching.matcher",
    "PathMatchMiddleware": "fancypath.middleware.asgi",
    "PatternSyntax": "fancypath.matching.syntax",
    "PlaceholderSyntax": "fancypath.matching.syntax",
    "QueryParams": "fancypath.http.query",
    "RequestTarget": "fancypath.http.target",
    "bind": "fancypath.matching.syntax",
    "new_matcher": "fancypath.matching.matcher",
    "normalize_pattern": "fancypath.matching.segments",
    "split_path": "fancypath.matching.segments",
}


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import fancypath`` fast while providing a clean top-level API.
    """
    module_name = _LAZY_IMPORTS.get(name)
    if module_name is None:
        msg = f"module {__name__!r} has no attribute {name!r}"
        raise AttributeError(msg)

    import importlib

    return getattr(importlib.import_module(module_name), name)
