"""Fetch port interfaces consumed by the data-access facades.

The facades never talk to a transport directly; they are handed plain async
callables matching these protocols. :class:`pyplaceholder.client.PlaceholderClient`
provides HTTP-backed implementations, and tests pass small fakes.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Protocol, TypeVar


class Keyed(Protocol):
    """Anything carrying a unique integer key."""

    @property
    def key(self) -> int: ...


R = TypeVar("R", bound=Keyed)
R_co = TypeVar("R_co", bound=Keyed, covariant=True)


class BoundedFetchPort(Protocol[R_co]):
    """Fetch the complete collection.

    Raises :class:`~pyplaceholder.exceptions.NetworkError` or
    :class:`~pyplaceholder.exceptions.ServerError`.
    """

    async def __call__(self) -> Sequence[R_co]: ...


class KeyedFetchPort(Protocol[R_co]):
    """Fetch a single record by key.

    Raises :class:`~pyplaceholder.exceptions.NotFoundError` when the source
    has no such key, otherwise the same errors as :class:`BoundedFetchPort`.
    """

    async def __call__(self, key: int) -> R_co: ...


class PagedFetchPort(Protocol[R_co]):
    """Fetch up to *limit* records starting at offset *start*.

    Returns fewer than *limit* records only at or near the end of the
    source's collection.
    """

    async def __call__(self, start: int, limit: int) -> Sequence[R_co]: ...
