"""User endpoints: /users and /users/{id}."""

from __future__ import annotations

from pyplaceholder._api._common import parse_record, parse_record_list
from pyplaceholder._constants import USERS_ENDPOINT
from pyplaceholder._transport import Transport
from pyplaceholder.models.user import User


async def fetch_users(transport: Transport) -> list[User]:
    """Fetch the complete user collection."""
    payload = await transport.get_json(USERS_ENDPOINT)
    return parse_record_list(User, payload, endpoint=USERS_ENDPOINT)


async def fetch_user_by_id(transport: Transport, user_id: int) -> User:
    """Fetch one user; the transport raises ``NotFoundError`` on HTTP 404."""
    endpoint = f"{USERS_ENDPOINT}/{user_id}"
    payload = await transport.get_json(endpoint)
    return parse_record(User, payload, endpoint=endpoint)
