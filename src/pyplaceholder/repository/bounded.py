"""Bounded dataset facade: fetch the whole collection once, serve from memory."""

from __future__ import annotations

import logging
from typing import Generic

from pyplaceholder._cache import BoundedCacheEntry
from pyplaceholder.exceptions import NotFoundError
from pyplaceholder.ports import BoundedFetchPort, KeyedFetchPort, R

_logger = logging.getLogger(__name__)


class BoundedRepository(Generic[R]):
    """Caches a small, finite collection after its first full fetch.

    Concurrent :meth:`get_all` calls issued while a fetch is in flight are
    not deduplicated; once the cache is populated, no further fetch happens
    until :meth:`invalidate`.
    """

    def __init__(
        self,
        fetch_all: BoundedFetchPort[R],
        fetch_by_key: KeyedFetchPort[R] | None = None,
    ) -> None:
        self._fetch_all = fetch_all
        self._fetch_by_key = fetch_by_key
        self._cache: BoundedCacheEntry[R] = BoundedCacheEntry()

    @property
    def is_cached(self) -> bool:
        return self._cache.is_populated

    async def get_all(self) -> tuple[R, ...]:
        """Return the full collection, fetching it on a cache miss.

        On failure the collection cache is reset to absent and the error
        propagates unchanged.
        """
        cached = self._cache.records
        if cached is not None:
            _logger.debug("Bounded cache hit (%d records)", len(cached))
            return cached

        _logger.debug("Bounded cache miss, fetching full collection")
        generation = self._cache.generation
        try:
            records = await self._fetch_all()
        except Exception:
            if generation == self._cache.generation:
                self._cache.drop_records()
            raise
        if generation != self._cache.generation:
            # Invalidated while awaiting; do not resurrect the old data.
            _logger.debug("Discarding collection fetched before invalidation")
            return tuple(records)
        return self._cache.store(records)

    async def get_by_key(self, key: int) -> R:
        """Return the record for *key*.

        Lookup order: per-key memo, cached collection, then the keyed fetch
        port. A hit from any tier is memoized.

        Raises
        ------
        NotFoundError
            If the source has no record for *key*.
        """
        record = self._cache.lookup(key)
        if record is not None:
            return record

        record = self._cache.scan(key)
        if record is not None:
            return self._cache.remember(record)

        if self._fetch_by_key is None:
            raise NotFoundError(f"Record {key} not found")

        _logger.debug("Fetching record %d by key", key)
        generation = self._cache.generation
        record = await self._fetch_by_key(key)
        if generation != self._cache.generation:
            return record
        return self._cache.remember(record)

    def invalidate(self) -> None:
        """Drop the collection and the per-key memo. Does not fetch."""
        self._cache.clear()
