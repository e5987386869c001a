"""ASGI middleware that binds one pattern against every request.

Wraps any ASGI app. For HTTP and WebSocket scopes it builds a new
``PathMatch`` and hands the wrapped app a copy of the scope carrying it::

    app = PathMatchMiddleware(app, "/{section}/{id}")

    async def app(scope, receive, send):
        match = scope["path_match"]
        post_id, ok = match.var_int("id")

Other scope types (``lifespan``) pass through untouched.
"""

import logging

from fancypath._internal.asgi import ASGIApp, Receive, Scope, Send
from fancypath.config import MatcherConfig
from fancypath.matching.matcher import PathMatch

logger = logging.getLogger("fancypath.middleware")

SCOPE_KEY = "path_match"

_MATCHED_SCOPES = frozenset({"http", "websocket"})


class PathMatchMiddleware:
    """Raw ASGI middleware storing a ``PathMatch`` under ``scope["path_match"]``.

    The bindings are also merged into ``scope["path_params"]`` so
    frameworks that read that key see the variables too.
    """

    __slots__ = ("app", "config", "pattern")

    def __init__(self, app: ASGIApp, pattern: str, config: MatcherConfig | None = None) -> None:
        self.app = app
        self.pattern = pattern
        self.config = config

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope.get("type") not in _MATCHED_SCOPES:
            await self.app(scope, receive, send)
            return

        scope = dict(scope)
        match = PathMatch.from_asgi(scope, self.pattern, self.config)
        logger.debug("%s %s matched %s", scope["type"], match.target.path, self.pattern)

        scope[SCOPE_KEY] = match
        scope["path_params"] = {**(scope.get("path_params") or {}), **match.vars}
        await self.app(scope, receive, send)
