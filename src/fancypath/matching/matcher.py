"""PathMatch — one pattern bound against one request target.

Built in a single step by ``new_matcher`` and immutable afterwards, so a
match can be read from any thread. Build one per request; never reuse
a match for another request.

Example: ``https://example.com/edit/article/42``::

    match = new_matcher(url, "/any/{category}/{id}")
    match.var("category")   # "article"
    match.var_int("id")     # (42, True)
    match.var("missing")    # ""
"""

from __future__ import annotations

import logging
import re
from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any

from fancypath._internal.multimap import MultiValueMapping
from fancypath.config import DEFAULT_CONFIG, MatcherConfig
from fancypath.http.query import QueryParams
from fancypath.http.target import RequestTarget
from fancypath.matching.segments import normalize_pattern, split_path
from fancypath.matching.syntax import bind

logger = logging.getLogger("fancypath.matching")

# Optional sign, ASCII digits only. int() alone would also accept
# surrounding whitespace, underscores and non-ASCII digits.
_DECIMAL = re.compile(r"[+-]?[0-9]+")


@dataclass(frozen=True, slots=True)
class PathMatch:
    """Variables, query parameters and fragment of one request.

    Lookups never raise: unknown variables and query keys read as ``""``.
    """

    pattern: str
    target: RequestTarget
    config: MatcherConfig
    pattern_segments: tuple[str, ...]
    path_segments: tuple[str, ...]
    vars: Mapping[str, str] = field(hash=False)
    query_params: MultiValueMapping = field(hash=False)

    @property
    def fragment(self) -> str:
        """The URL fragment, empty if the request had none."""
        return self.target.fragment

    def __contains__(self, key: object) -> bool:
        return key in self.vars

    def var(self, key: str) -> str:
        """Return the path segment bound to *key*, or ``""`` if unbound.

        Wildcard and empty placeholders are never bound, so
        ``var("*")`` is always ``""``.
        """
        return self.vars.get(key, "")

    def var_int(self, key: str) -> tuple[int, bool]:
        """Return the variable *key* as a base-10 int and a success flag.

        ``(0, False)`` when *key* is unbound or its value is not an
        integer. Callers must check the flag; ``0`` is also a valid value.
        """
        value = self.vars.get(key, "")
        if not _DECIMAL.fullmatch(value):
            return 0, False
        return int(value), True

    def query(self, key: str) -> str:
        """Return the first query value for *key*, or ``""`` if absent."""
        return self.query_params.get(key) or ""

    def query_list(self, key: str) -> list[str]:
        """Return every query value for *key*, in request order."""
        return self.query_params.get_list(key)

    def frag(self) -> str:
        """Return the fragment verbatim."""
        return self.target.fragment

    # -- Factories --

    @classmethod
    def from_url(cls, url: str, pattern: str, config: MatcherConfig | None = None) -> PathMatch:
        """Match *pattern* against an absolute or origin-form URL."""
        return new_matcher(RequestTarget.from_url(url), pattern, config)

    @classmethod
    def from_asgi(
        cls,
        scope: dict[str, Any],
        pattern: str,
        config: MatcherConfig | None = None,
    ) -> PathMatch:
        """Match *pattern* against the path of an ASGI scope."""
        return new_matcher(RequestTarget.from_asgi(scope), pattern, config)


def new_matcher(
    target: RequestTarget | str,
    pattern: str,
    config: MatcherConfig | None = None,
    query_params: MultiValueMapping | None = None,
) -> PathMatch:
    """Bind *pattern* against *target* and return the finished match.

    *target* is a ``RequestTarget`` or a URL string. The pattern is
    rooted at ``/`` if it is not already. Segment-count
    mismatches are not errors: pattern segments without a path segment
    stay unbound and extra path segments are ignored.

    Pass *query_params* to reuse a query view the caller already parsed
    (any ``MultiValueMapping``); otherwise ``target.raw_query`` is parsed.
    """
    if config is None:
        config = DEFAULT_CONFIG
    if isinstance(target, str):
        target = RequestTarget.from_url(target)

    pattern = normalize_pattern(pattern)
    pattern_segments = split_path(pattern)
    path_segments = split_path(target.path)
    bindings = bind(pattern_segments, path_segments, config.syntax_strategy())

    logger.debug(
        "%s against %s (%s syntax): %d bound",
        pattern,
        target.path,
        config.syntax,
        len(bindings),
    )
    return PathMatch(
        pattern=pattern,
        target=target,
        config=config,
        pattern_segments=pattern_segments,
        path_segments=path_segments,
        vars=MappingProxyType(bindings),
        query_params=query_params if query_params is not None else QueryParams(target.raw_query),
    )
