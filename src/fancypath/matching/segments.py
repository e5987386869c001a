"""Pattern and path segmentation.

Examples::

    split_path("/blog/new")    -> ("blog", "new")
    split_path("/blog/new/")   -> ("blog", "new")
    split_path("/*//category") -> ("*", "", "category")
    split_path("/")            -> ()
"""

SEPARATOR = "/"


def normalize_pattern(pattern: str) -> str:
    """Root *pattern* at ``/``. Patterns always begin from the root."""
    if not pattern.startswith(SEPARATOR):
        return SEPARATOR + pattern
    return pattern


def split_path(path: str) -> tuple[str, ...]:
    """Split *path* into its segments.

    Exactly one trailing slash is stripped first so ``"/a/"`` and
    ``"/a"`` have the same length. The first element of the split is
    the empty string before the root slash and is always dropped.
    Interior empty segments are kept: they mark ignored positions.
    """
    path = path.removesuffix(SEPARATOR)
    return tuple(path.split(SEPARATOR)[1:])
