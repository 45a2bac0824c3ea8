"""Internal cache entries owned by the data-access facades."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import Generic

from pyplaceholder.ports import R


@dataclass
class BoundedCacheEntry(Generic[R]):
    """Whole-collection cache plus a per-key lookup index.

    ``records`` is ``None`` until the first successful full fetch and is
    never partially populated. ``generation`` changes on every
    invalidation.
    """

    records: tuple[R, ...] | None = None
    by_key: dict[int, R] = field(default_factory=dict)
    generation: int = 0

    @property
    def is_populated(self) -> bool:
        return self.records is not None

    def store(self, records: Sequence[R]) -> tuple[R, ...]:
        self.records = tuple(records)
        return self.records

    def lookup(self, key: int) -> R | None:
        return self.by_key.get(key)

    def scan(self, key: int) -> R | None:
        """Find *key* in the cached collection, or ``None``."""
        if self.records is None:
            return None
        for record in self.records:
            if record.key == key:
                return record
        return None

    def remember(self, record: R) -> R:
        self.by_key[record.key] = record
        return record

    def drop_records(self) -> None:
        self.records = None

    def clear(self) -> None:
        self.records = None
        self.by_key.clear()
        self.generation += 1


@dataclass
class PagedCacheEntry(Generic[R]):
    """Contiguous, growing prefix of a paged collection.

    ``capacity`` is the known (or inferred) total size of the source;
    ``None`` means it has not been inferred yet. ``generation`` changes on
    every reset so completions started before a reset can be recognised.
    """

    capacity: int | None = None
    records: list[R] = field(default_factory=list)
    generation: int = 0

    def __len__(self) -> int:
        return len(self.records)

    @property
    def has_more(self) -> bool:
        if self.capacity is None:
            return True
        return len(self.records) < self.capacity

    def remaining(self) -> int | None:
        if self.capacity is None:
            return None
        return max(self.capacity - len(self.records), 0)

    def slice(self, start: int, stop: int) -> tuple[R, ...]:
        return tuple(self.records[start:stop])

    def extend(self, records: Sequence[R], *, requested: int) -> tuple[R, ...]:
        """Append a fetched page; the cache never grows past ``capacity``.

        A page shorter than *requested* means the source is exhausted, so
        capacity is pinned to the new length.
        """
        remaining = self.remaining()
        limit = requested if remaining is None else min(requested, remaining)
        accepted = tuple(records[:limit])
        self.records.extend(accepted)
        if len(accepted) < requested:
            self.capacity = len(self.records)
        return accepted

    def reset(self, capacity: int | None) -> None:
        self.records.clear()
        self.capacity = capacity
        self.generation += 1
