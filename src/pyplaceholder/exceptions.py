"""Custom exception hierarchy for pyplaceholder."""

from __future__ import annotations


class PlaceholderError(Exception):
    """Base exception for all pyplaceholder errors."""


class PlaceholderConfigError(PlaceholderError):
    """Invalid or missing configuration."""


class InvalidArgumentError(PlaceholderError, ValueError):
    """Caller misuse, e.g. a page size of zero.

    Fatal to the call and never retried.
    """


class FetchError(PlaceholderError):
    """A fetch port failed to deliver records."""

    def __init__(
        self,
        message: str,
        *,
        status_code: int | None = None,
        endpoint: str = "",
    ) -> None:
        self.status_code = status_code
        self.endpoint = endpoint
        super().__init__(message)


class NetworkError(FetchError):
    """Connection-level failure (DNS, refused connection, timeout)."""


class ServerError(FetchError):
    """The source answered, but not with a usable payload (non-200, bad JSON)."""


class NotFoundError(FetchError):
    """The source reports no record for the requested key.

    Only the requested key is affected; cached data for other keys stays valid.
    """
