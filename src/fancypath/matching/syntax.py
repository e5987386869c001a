"""Pattern syntaxes — which pattern segments declare variables.

Two mutually exclusive strategies share one protocol:

    Placeholder:  ``/*/category/id``     every segment is a name,
                  except ``""`` and the wildcard marker
    Bracket:      ``/any/{category}/{id}``  only ``{name}`` segments bind

A matcher uses exactly one of them. Mixing would make segments such as
``{*}`` ambiguous.
"""

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Protocol, runtime_checkable


@runtime_checkable
class PatternSyntax(Protocol):
    """Decides the binding key for a pattern segment."""

    def variable_name(self, segment: str) -> str | None:
        """Return the key *segment* binds to, or None if it binds nothing."""
        ...

    def is_ignored(self, key: str) -> bool:
        """True if *key* marks an ignored position rather than a variable."""
        ...


@dataclass(frozen=True, slots=True)
class PlaceholderSyntax:
    """Every segment is a variable name; empty and wildcard segments are ignored."""

    wildcard: str = "*"

    def variable_name(self, segment: str) -> str | None:
        return segment.strip()

    def is_ignored(self, key: str) -> bool:
        return key == "" or key == self.wildcard


@dataclass(frozen=True, slots=True)
class BracketSyntax:
    """Only ``{name}`` segments are variables; all others are ignored."""

    def variable_name(self, segment: str) -> str | None:
        segment = segment.strip()
        if len(segment) < 2 or segment[0] != "{" or segment[-1] != "}":
            return None
        inner = segment[1:-1]
        # Nested or unbalanced braces are not declarations
        if "{" in inner:
            return None
        name = inner.strip()
        return name or None

    def is_ignored(self, key: str) -> bool:
        return key == ""


def bind(
    pattern_segments: Sequence[str],
    path_segments: Sequence[str],
    syntax: PatternSyntax,
) -> dict[str, str]:
    """Map variable names in *pattern_segments* to the path segment at the same position.

    Pattern segments past the end of the path are dropped, as are path
    segments past the end of the pattern. A name declared twice keeps the
    value of its last position.
    """
    bindings: dict[str, str] = {}
    for i, segment in enumerate(pattern_segments):
        if i >= len(path_segments):
            break
        key = syntax.variable_name(segment)
        if key is None:
            continue
        bindings[key] = path_segments[i]

    # Ignored placeholders never surface as variables
    for key in [k for k in bindings if syntax.is_ignored(k)]:
        del bindings[key]
    return bindings
