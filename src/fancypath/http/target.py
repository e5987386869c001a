"""Request target — path, raw query and fragment of one request.

The matcher never looks at anything else in a request. Obtaining the
three strings is the job of the factories here.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any
from urllib.parse import unquote, urlsplit


@dataclass(frozen=True, slots=True)
class RequestTarget:
    """The parts of a request URL a matcher reads.

    ``path`` and ``fragment`` are percent-decoded; ``raw_query`` is left
    encoded for ``QueryParams`` to parse.
    """

    path: str = "/"
    raw_query: str = ""
    fragment: str = ""

    @classmethod
    def from_url(cls, url: str) -> RequestTarget:
        """Create a target from an absolute URL or an origin-form target.

        Example::

            RequestTarget.from_url("https://example.com/blog/?item=42#top")
            # RequestTarget(path="/blog/", raw_query="item=42", fragment="top")
        """
        parts = urlsplit(url)
        return cls(
            path=unquote(parts.path) or "/",
            raw_query=parts.query,
            fragment=unquote(parts.fragment),
        )

    @classmethod
    def from_asgi(cls, scope: dict[str, Any]) -> RequestTarget:
        """Create a target from an ASGI HTTP or WebSocket scope.

        ASGI servers decode ``path`` already and never send the fragment.
        """
        query_string = scope.get("query_string", b"")
        if isinstance(query_string, bytes):
            query_string = query_string.decode("latin-1")
        return cls(
            path=scope.get("path") or "/",
            raw_query=query_string,
        )
