"""Photo endpoint: /photos?_start=&_limit=."""

from __future__ import annotations

from pyplaceholder._api._common import parse_record_list
from pyplaceholder._constants import PHOTOS_ENDPOINT
from pyplaceholder._transport import Transport
from pyplaceholder.models.photo import Photo


async def fetch_photos(transport: Transport, start: int, limit: int) -> list[Photo]:
    """Fetch up to *limit* photos beginning at offset *start* (0-based)."""
    params = {"_start": str(start), "_limit": str(limit)}
    payload = await transport.get_json(PHOTOS_ENDPOINT, params)
    return parse_record_list(Photo, payload, endpoint=PHOTOS_ENDPOINT)
