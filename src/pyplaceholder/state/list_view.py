"""State machine for a bounded (load-everything-once) dataset."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import Generic

from pyplaceholder.ports import R
from pyplaceholder.repository.bounded import BoundedRepository
from pyplaceholder.state.observable import Observable
from pyplaceholder.state.view_state import ViewState, describe_error

_logger = logging.getLogger(__name__)

DEFAULT_SEARCH_FIELDS: tuple[str, str] = ("name", "email")


class ListViewModel(Observable, Generic[R]):
    """Loads a whole collection and exposes it with local text search.

    States: ``IDLE -> LOADING -> {SUCCESS, ERROR}``; ``refresh`` re-enters
    ``LOADING`` from either terminal state. Every call to :meth:`load`
    notifies exactly twice: on entering ``LOADING`` and on reaching the
    terminal state.

    If a newer :meth:`load` starts before an older one completes, the older
    completion is discarded without touching state or notifying.
    """

    def __init__(
        self,
        repository: BoundedRepository[R],
        *,
        search_fields: Sequence[str] = DEFAULT_SEARCH_FIELDS,
    ) -> None:
        super().__init__()
        self._repository = repository
        self._search_fields = tuple(search_fields)
        self._records: tuple[R, ...] = ()
        self._state = ViewState.IDLE
        self._error_message: str | None = None
        self._generation = 0

    @property
    def records(self) -> tuple[R, ...]:
        return self._records

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

    @property
    def has_data(self) -> bool:
        return bool(self._records)

    async def load(self) -> None:
        """Load the collection through the repository (cache first)."""
        self._generation += 1
        generation = self._generation
        self._error_message = None
        self._set_state(ViewState.LOADING)

        try:
            records = await self._repository.get_all()
        except Exception as exc:
            if generation != self._generation:
                return
            _logger.warning("Loading collection failed: %s", exc)
            self._records = ()
            self._error_message = describe_error(exc)
            self._set_state(ViewState.ERROR)
            return

        if generation != self._generation:
            _logger.debug("Discarding superseded load result")
            return
        self._records = tuple(records)
        self._set_state(ViewState.SUCCESS)

    async def refresh(self) -> None:
        """Invalidate the repository cache and load again from the source."""
        self._repository.invalidate()
        await self.load()

    def search(self, query: str) -> tuple[R, ...]:
        """Filter the current records by case-insensitive substring.

        Matches against the configured search fields. An empty query returns
        all current records. Never changes state or notifies.
        """
        if not query:
            return self._records
        needle = query.lower()
        return tuple(record for record in self._records if self._matches(record, needle))

    def _matches(self, record: R, needle: str) -> bool:
        for field_name in self._search_fields:
            value = getattr(record, field_name, None)
            if isinstance(value, str) and needle in value.lower():
                return True
        return False

    def _set_state(self, state: ViewState) -> None:
        self._state = state
        self._notify()
