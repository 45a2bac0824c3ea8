"""Shared helpers for endpoint modules.

It is internal to pyplaceholder and may change at any time.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, TypeVar

from pydantic import ValidationError

from pyplaceholder.exceptions import ServerError
from pyplaceholder.models._base import PlaceholderRecord

RecordT = TypeVar("RecordT", bound=PlaceholderRecord)


def parse_record(model: type[RecordT], payload: Any, *, endpoint: str) -> RecordT:
    """Validate one JSON object into *model*, mapping failures to ``ServerError``."""
    if not isinstance(payload, Mapping):
        raise ServerError(
            f"{endpoint} returned {type(payload).__name__}, expected an object",
            endpoint=endpoint,
        )
    try:
        return model.model_validate(payload)
    except ValidationError as exc:
        raise ServerError(f"{endpoint} returned a malformed record: {exc}", endpoint=endpoint) from exc


def parse_record_list(model: type[RecordT], payload: Any, *, endpoint: str) -> list[RecordT]:
    """Validate a JSON array of objects into a list of *model*."""
    if not isinstance(payload, list):
        raise ServerError(
            f"{endpoint} returned {type(payload).__name__}, expected a list",
            endpoint=endpoint,
        )
    return [parse_record(model, item, endpoint=endpoint) for item in payload]
