"""Matcher configuration.

MatcherConfig is a frozen dataclass — immutable after creation, validated
once, shared freely between matchers.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from fancypath.errors import ConfigurationError
from fancypath.matching.segments import SEPARATOR

if TYPE_CHECKING:
    from fancypath.matching.syntax import PatternSyntax

SYNTAXES = ("bracket", "placeholder")


@dataclass(frozen=True, slots=True)
class MatcherConfig:
    """Pattern matching configuration. Immutable after creation.

    The bracket syntax is the default: only ``{name}`` segments bind.
    Switch to the placeholder syntax to bind every segment except empty
    ones and the wildcard marker::

        config = MatcherConfig(syntax="placeholder")
    """

    syntax: str = "bracket"

    # Ignored-position marker (placeholder syntax only)
    wildcard: str = "*"

    def __post_init__(self) -> None:
        if self.syntax not in SYNTAXES:
            msg = (
                f"Unknown pattern syntax {self.syntax!r}. "
                f"Expected one of: {', '.join(SYNTAXES)}."
            )
            raise ConfigurationError(msg)
        if not self.wildcard:
            msg = "Wildcard marker must not be empty; empty segments are always ignored."
            raise ConfigurationError(msg)
        if self.wildcard != self.wildcard.strip():
            msg = (
                f"Wildcard marker {self.wildcard!r} has surrounding whitespace; "
                "pattern segments are trimmed before comparison."
            )
            raise ConfigurationError(msg)
        if SEPARATOR in self.wildcard:
            msg = (
                f"Wildcard marker {self.wildcard!r} contains {SEPARATOR!r} "
                "and could never match a segment."
            )
            raise ConfigurationError(msg)

    def syntax_strategy(self) -> PatternSyntax:
        """Return the pattern syntax strategy for this configuration."""
        from fancypath.matching.syntax import BracketSyntax, PlaceholderSyntax

        if self.syntax == "placeholder":
            return PlaceholderSyntax(wildcard=self.wildcard)
        return BracketSyntax()


DEFAULT_CONFIG = MatcherConfig()
