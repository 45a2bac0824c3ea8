"""Paged dataset facade: grow a contiguous in-memory prefix page by page."""

from __future__ import annotations

import logging
from typing import Generic

from pyplaceholder._cache import PagedCacheEntry
from pyplaceholder.exceptions import InvalidArgumentError
from pyplaceholder.ports import PagedFetchPort, R

_logger = logging.getLogger(__name__)


class PagedRepository(Generic[R]):
    """Accumulates records fetched page by page.

    Fetches always continue from the end of the cached prefix, whichever
    page index was requested, so the cache grows without gaps.

    Parameters
    ----------
    fetch_page
        Async callable ``(start, limit) -> records``.
    capacity
        Total number of records the source declares. ``None`` leaves it
        unknown until the source returns a short page.
    """

    def __init__(self, fetch_page: PagedFetchPort[R], capacity: int | None = None) -> None:
        if capacity is not None and capacity < 0:
            raise InvalidArgumentError(f"capacity must not be negative, got {capacity}")
        self._fetch_page = fetch_page
        self._initial_capacity = capacity
        self._cache: PagedCacheEntry[R] = PagedCacheEntry(capacity=capacity)

    @property
    def has_more(self) -> bool:
        return self._cache.has_more

    @property
    def total_loaded(self) -> int:
        return len(self._cache)

    @property
    def capacity(self) -> int | None:
        return self._cache.capacity

    async def get_page(self, page_index: int, page_size: int) -> tuple[R, ...]:
        """Return page *page_index*, fetching the next page on a miss.

        A cache hit returns the cached slice. When the whole capacity is
        already cached, the remaining cached slice is returned, which is
        empty past the end and signals exhaustion. Otherwise the next
        *page_size* records after the cached prefix are fetched, appended
        and returned.

        Raises
        ------
        InvalidArgumentError
            If *page_size* is not positive or *page_index* is negative.
        """
        if page_size <= 0:
            raise InvalidArgumentError(f"page_size must be positive, got {page_size}")
        if page_index < 0:
            raise InvalidArgumentError(f"page_index must not be negative, got {page_index}")

        cache = self._cache
        start = page_index * page_size
        if len(cache) >= start + page_size:
            _logger.debug("Paged cache hit for page %d (size %d)", page_index, page_size)
            return cache.slice(start, start + page_size)

        if not cache.has_more:
            # Exhausted: the final partial page, then empty pages.
            return cache.slice(start, start + page_size)

        offset = len(cache)
        remaining = cache.remaining()
        limit = page_size if remaining is None else min(page_size, remaining)
        generation = cache.generation
        _logger.debug("Paged cache miss for page %d, fetching start=%d limit=%d", page_index, offset, limit)
        records = await self._fetch_page(offset, limit)

        if generation != cache.generation or offset != len(cache):
            # The cache was reset (or grown by another call) while awaiting.
            _logger.debug("Discarding stale page fetched at start=%d", offset)
            return tuple(records)
        return cache.extend(records, requested=limit)

    def clear_cache(self) -> None:
        """Empty the cache and forget any inferred capacity."""
        self._cache.reset(self._initial_capacity)
