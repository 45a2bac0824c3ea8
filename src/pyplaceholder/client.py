"""High-level async client for a JSONPlaceholder-style API."""

from __future__ import annotations

import logging
from typing import Any

import aiohttp

from pyplaceholder._api.photos import fetch_photos
from pyplaceholder._api.users import fetch_user_by_id, fetch_users
from pyplaceholder._transport import HttpTransport
from pyplaceholder.config import PlaceholderConfig
from pyplaceholder.exceptions import PlaceholderError
from pyplaceholder.models.photo import Photo
from pyplaceholder.models.user import User
from pyplaceholder.repository.bounded import BoundedRepository
from pyplaceholder.repository.paged import PagedRepository

_logger = logging.getLogger(__name__)


class PlaceholderClient:
    """Async client providing the HTTP-backed fetch ports.

    Usage::

        async with PlaceholderClient(config) as client:
            users = client.user_repository()
            print(await users.get_all())

    An externally supplied ``aiohttp.ClientSession`` is left open on exit.
    """

    def __init__(
        self,
        config: PlaceholderConfig | None = None,
        *,
        session: aiohttp.ClientSession | None = None,
    ) -> None:
        self._config = config if config is not None else PlaceholderConfig()
        self._external_session = session is not None
        self._http_session = session
        self._transport: HttpTransport | None = None

    @property
    def config(self) -> PlaceholderConfig:
        return self._config

    # ------------------------------------------------------------------
    # Context manager lifecycle
    # ------------------------------------------------------------------

    async def __aenter__(self) -> PlaceholderClient:
        if self._http_session is None:
            self._http_session = aiohttp.ClientSession()
        self._transport = HttpTransport(self._config, self._http_session)
        return self

    async def __aexit__(self, *exc: Any) -> None:
        if not self._external_session and self._http_session is not None:
            await self._http_session.close()
            self._http_session = None
        self._transport = None

    def _require_transport(self) -> HttpTransport:
        if self._transport is None:
            raise PlaceholderError("Client not initialized. Use 'async with PlaceholderClient(...) as client:'")
        return self._transport

    # ------------------------------------------------------------------
    # Fetch ports
    # ------------------------------------------------------------------

    async def fetch_users(self) -> list[User]:
        """Fetch all users."""
        return await fetch_users(self._require_transport())

    async def fetch_user(self, user_id: int) -> User:
        """Fetch one user by id; raises ``NotFoundError`` for unknown ids."""
        return await fetch_user_by_id(self._require_transport(), user_id)

    async def fetch_photos(self, start: int, limit: int) -> list[Photo]:
        """Fetch up to *limit* photos starting at offset *start*."""
        return await fetch_photos(self._require_transport(), start, limit)

    # ------------------------------------------------------------------
    # Data-access facades
    # ------------------------------------------------------------------

    def user_repository(self) -> BoundedRepository[User]:
        """A fresh bounded repository reading through this client."""
        return BoundedRepository(self.fetch_users, self.fetch_user)

    def photo_repository(self) -> PagedRepository[Photo]:
        """A fresh paged repository sized by ``config.photo_capacity``."""
        _logger.debug("Creating photo repository with capacity %d", self._config.photo_capacity)
        return PagedRepository(self.fetch_photos, capacity=self._config.photo_capacity)
