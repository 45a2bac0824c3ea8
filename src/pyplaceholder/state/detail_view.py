"""State machine for a single record looked up by key."""

from __future__ import annotations

import logging
from typing import Generic

from pyplaceholder.ports import R
from pyplaceholder.repository.bounded import BoundedRepository
from pyplaceholder.state.observable import Observable
from pyplaceholder.state.view_state import ViewState, describe_error

_logger = logging.getLogger(__name__)


class DetailViewModel(Observable, Generic[R]):
    """Shows one record, resolved through the bounded repository's lookup tiers."""

    def __init__(self, repository: BoundedRepository[R]) -> None:
        super().__init__()
        self._repository = repository
        self._record: R | None = None
        self._state = ViewState.IDLE
        self._error_message: str | None = None
        self._generation = 0

    @property
    def record(self) -> R | None:
        return self._record

    @property
    def state(self) -> ViewState:
        return self._state

    @property
    def error_message(self) -> str | None:
        return self._error_message

    @property
    def is_loading(self) -> bool:
        return self._state == ViewState.LOADING

    @property
    def has_error(self) -> bool:
        return self._state == ViewState.ERROR

    async def load(self, key: int) -> None:
        self._generation += 1
        generation = self._generation
        self._error_message = None
        self._set_state(ViewState.LOADING)

        try:
            record = await self._repository.get_by_key(key)
        except Exception as exc:
            if generation != self._generation:
                return
            _logger.warning("Loading record %d failed: %s", key, exc)
            self._record = None
            self._error_message = describe_error(exc)
            self._set_state(ViewState.ERROR)
            return

        if generation != self._generation:
            return
        self._record = record
        self._set_state(ViewState.SUCCESS)

    def _set_state(self, state: ViewState) -> None:
        self._state = state
        self._notify()
