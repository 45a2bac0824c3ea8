"""Client configuration for pyplaceholder."""

from __future__ import annotations

import dataclasses
import os
from typing import Any

from pyplaceholder._constants import (
    BASE_URL,
    DEFAULT_PAGE_SIZE,
    DEFAULT_REQUEST_TIMEOUT,
    TOTAL_PHOTOS,
    USER_AGENT,
)
from pyplaceholder.exceptions import PlaceholderConfigError


@dataclasses.dataclass(frozen=True)
class PlaceholderConfig:
    """Client configuration.

    Parameters
    ----------
    base_url : str
        API base URL without trailing slash. Defaults to the public
        JSONPlaceholder service.
    page_size : int
        Number of records requested per page by paged datasets.
    photo_capacity : int
        Total number of photos the source declares. The paged photo
        cache treats this as its capacity bound.
    request_timeout : float
        Total per-request timeout in seconds applied by the HTTP transport.
    user_agent : str
        ``User-Agent`` header sent with every request.
    """

    base_url: str = BASE_URL
    page_size: int = DEFAULT_PAGE_SIZE
    photo_capacity: int = TOTAL_PHOTOS
    request_timeout: float = DEFAULT_REQUEST_TIMEOUT
    user_agent: str = USER_AGENT

    def __post_init__(self) -> None:
        if self.page_size <= 0:
            raise PlaceholderConfigError(f"page_size must be positive, got {self.page_size}")
        if self.photo_capacity <= 0:
            raise PlaceholderConfigError(f"photo_capacity must be positive, got {self.photo_capacity}")
        if self.request_timeout <= 0:
            raise PlaceholderConfigError(f"request_timeout must be positive, got {self.request_timeout}")
        # Frozen dataclass: bypass __setattr__ to normalise the URL.
        object.__setattr__(self, "base_url", self.base_url.rstrip("/"))

    @classmethod
    def from_env(cls, **overrides: Any) -> PlaceholderConfig:
        """Create configuration from environment variables.

        Reads ``PLACEHOLDER_BASE_URL``, ``PLACEHOLDER_PAGE_SIZE``,
        ``PLACEHOLDER_PHOTO_CAPACITY`` and ``PLACEHOLDER_REQUEST_TIMEOUT``.
        Explicit keyword arguments override environment values.

        Raises
        ------
        PlaceholderConfigError
            If a numeric variable cannot be parsed.
        """
        env = os.environ
        config_kwargs: dict[str, Any] = {}

        base_url = env.get("PLACEHOLDER_BASE_URL")
        if base_url is not None:
            config_kwargs["base_url"] = base_url

        _ENV_NUMERIC_MAP: dict[str, tuple[str, type]] = {
            "PLACEHOLDER_PAGE_SIZE": ("page_size", int),
            "PLACEHOLDER_PHOTO_CAPACITY": ("photo_capacity", int),
            "PLACEHOLDER_REQUEST_TIMEOUT": ("request_timeout", float),
        }
        for env_key, (field_name, cast) in _ENV_NUMERIC_MAP.items():
            val = env.get(env_key)
            if val is None or field_name in overrides:
                continue
            try:
                config_kwargs[field_name] = cast(val)
            except ValueError as exc:
                raise PlaceholderConfigError(f"{env_key} is not a valid {cast.__name__}: {val!r}") from exc

        config_kwargs.update(overrides)

        return cls(**config_kwargs)
