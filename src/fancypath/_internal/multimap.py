"""MultiValueMapping protocol — the query view a PathMatch reads from.

``QueryParams`` satisfies it, and so does any framework's own parsed
query object, which ``new_matcher(..., query_params=...)`` accepts as is.
"""

from collections.abc import Iterator
from typing import Protocol, runtime_checkable


@runtime_checkable
class MultiValueMapping(Protocol):
    """Read-only string mapping where a key may carry several values.

    ``get`` and ``__getitem__`` give the first value, ``get_list`` all of
    them. Spelled out as dunder methods since a Protocol cannot inherit
    from the ``Mapping`` ABC.
    """

    def __getitem__(self, key: str) -> str: ...
    def __contains__(self, key: object) -> bool: ...
    def __iter__(self) -> Iterator[str]: ...
    def __len__(self) -> int: ...
    def get(self, key: str, default: str | None = None) -> str | None: ...
    def get_list(self, key: str) -> list[str]: ...
