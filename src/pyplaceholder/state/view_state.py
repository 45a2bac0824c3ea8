"""Observable view states shared by all state machines."""

from __future__ import annotations

from enum import StrEnum

from pyplaceholder.exceptions import PlaceholderError


class ViewState(StrEnum):
    IDLE = "idle"
    LOADING = "loading"
    LOADING_MORE = "loading_more"
    SUCCESS = "success"
    ERROR = "error"


def describe_error(exc: Exception) -> str:
    """Human-readable message for an error caught at the UI boundary."""
    if isinstance(exc, PlaceholderError):
        return str(exc)
    return f"Unexpected error: {exc}"
