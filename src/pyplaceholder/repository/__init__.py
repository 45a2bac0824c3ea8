"""Data-access facades.

Each facade owns exactly one cache entry and is constructed with the fetch
port(s) it reads through. Nothing here is module-global.
"""

from pyplaceholder.repository.bounded import BoundedRepository
from pyplaceholder.repository.paged import PagedRepository

__all__ = [
    "BoundedRepository",
    "PagedRepository",
]
