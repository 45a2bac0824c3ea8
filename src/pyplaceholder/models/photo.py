"""Photo model."""

from __future__ import annotations

from pyplaceholder.models._base import PlaceholderRecord


class Photo(PlaceholderRecord):
    """A photo from the ``/photos`` collection (5000 entries, loaded by page)."""

    album_id: int
    title: str
    url: str
    thumbnail_url: str

    def __str__(self) -> str:
        return f"Photo(id={self.id}, album_id={self.album_id}, title={self.title})"
