"""HTTP transport: JSON GET requests mapped onto the fetch error taxonomy."""

from __future__ import annotations

import asyncio
import json
import logging
from collections.abc import Mapping
from typing import Any, Protocol

import aiohttp

from pyplaceholder.config import PlaceholderConfig
from pyplaceholder.exceptions import NetworkError, NotFoundError, ServerError

_logger = logging.getLogger(__name__)


class Transport(Protocol):
    """Structural transport interface used by endpoint modules.

    Having a protocol here makes it easy to pass test doubles while keeping
    the production implementation (`HttpTransport`) concrete.
    """

    async def get_json(self, endpoint: str, params: Mapping[str, str] | None = None) -> Any:
        ...


class HttpTransport:
    """GET JSON documents from the configured base URL."""

    def __init__(self, config: PlaceholderConfig, http_session: aiohttp.ClientSession) -> None:
        self._config = config
        self._http = http_session
        self._timeout = aiohttp.ClientTimeout(total=config.request_timeout)

    async def get_json(self, endpoint: str, params: Mapping[str, str] | None = None) -> Any:
        """Fetch *endpoint* and return the decoded JSON body.

        Raises
        ------
        NotFoundError
            On HTTP 404.
        ServerError
            On any other non-200 status or an undecodable body.
        NetworkError
            On connection failures and timeouts.
        """
        url = f"{self._config.base_url}{endpoint}"
        headers = {
            "accept": "application/json",
            "user-agent": self._config.user_agent,
        }

        _logger.debug("GET %s params=%s", url, dict(params) if params else {})

        try:
            async with self._http.get(url, params=params, headers=headers, timeout=self._timeout) as resp:
                text = await resp.text()
                if resp.status == 404:
                    raise NotFoundError(
                        f"Not found: {endpoint}",
                        status_code=resp.status,
                        endpoint=endpoint,
                    )
                if resp.status != 200:
                    raise ServerError(
                        f"HTTP {resp.status} from {endpoint}: {text[:200]}",
                        status_code=resp.status,
                        endpoint=endpoint,
                    )
        except (NotFoundError, ServerError):
            raise
        except asyncio.TimeoutError as exc:
            raise NetworkError(
                f"Request to {endpoint} timed out after {self._config.request_timeout}s",
                endpoint=endpoint,
            ) from exc
        except aiohttp.ClientError as exc:
            raise NetworkError(
                f"Request to {endpoint} failed: {exc}",
                endpoint=endpoint,
            ) from exc

        try:
            return json.loads(text)
        except json.JSONDecodeError as exc:
            raise ServerError(
                f"Invalid JSON from {endpoint}: {text[:200]}",
                status_code=200,
                endpoint=endpoint,
            ) from exc
