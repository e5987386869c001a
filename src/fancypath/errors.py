"""Fancypath exception hierarchy.

Matching itself never raises: unbound variables read as ``""`` and
integer conversion reports a success flag. Errors only surface when a
matcher is configured with values that cannot work.
"""


class FancypathError(Exception):
    """Base for all fancypath-specific errors."""


class ConfigurationError(FancypathError):
    """Raised when a ``MatcherConfig`` is invalid.

    Raised from ``MatcherConfig.__post_init__``, before any request
    is matched.
    """
