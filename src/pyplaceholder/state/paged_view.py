"""State machine for an incrementally loaded (paged) dataset."""

from __future__ import annotations

import logging
from typing import Generic

from pyplaceholder._constants import DEFAULT_PAGE_SIZE
from pyplaceholder.exceptions import InvalidArgumentError
from pyplaceholder.ports import R
from pyplaceholder.repository.paged import PagedRepository
from pyplaceholder.state.observable import Observable
from pyplaceholder.state.view_state import ViewState, describe_error

_logger = logging.getLogger(__name__)


class PagedListViewModel(Observable, Generic[R]):
    """Loads a large collection one page at a time (infinite scroll).

    States: ``IDLE -> LOADING -> {SUCCESS, ERROR}`` for the first page and
    ``SUCCESS -> LOADING_MORE -> {SUCCESS, ERROR}`` for each further page.

    :meth:`load_more` is a silent no-op while a page request is already in
    flight or once the repository reports no more records, so redundant
    scroll-threshold events cost nothing. A failed :meth:`load_more` keeps
    every record loaded so far.

    :meth:`load_initial` and :meth:`refresh` supersede any older request on
    this instance; a superseded completion is discarded.
    """

    def __init__(self, repository: PagedRepository[R], *, page_size: int = DEFAULT_PAGE_SIZE) -> None:
        if page_size <= 0:
            raise InvalidArgumentError(f"page_size must be positive, got {page_size}")
        super().__init__()
        self._repository = repository
        self._page_size = page_size
        self._records: list[R] = []
        self._state = ViewState.IDLE
        self._error_message: str | None = None
        self._current_page = 0
        self._generation = 0

    @property
    def records(self) -> tuple[R, ...]:
        return tuple(self._records)

    @property
    def state(self) -> ViewState:
        return self._state

    @property
    def error_message(self) -> str | None:
        return self._error_message

    @property
    def page_size(self) -> int:
        return self._page_size

    @property
    def current_page(self) -> int:
        """Index of the next page to request."""
        return self._current_page

    @property
    def has_more(self) -> bool:
        """True while this view is behind the cache or the source has more records."""
        return len(self._records) < self._repository.total_loaded or self._repository.has_more

    @property
    def total_loaded(self) -> int:
        """Number of records held by this view."""
        return len(self._records)

    @property
    def is_loading(self) -> bool:
        return self._state == ViewState.LOADING

    @property
    def is_loading_more(self) -> bool:
        return self._state == ViewState.LOADING_MORE

    @property
    def has_error(self) -> bool:
        return self._state == ViewState.ERROR

    async def load_initial(self) -> None:
        """Start over from page 0."""
        self._generation += 1
        generation = self._generation
        self._current_page = 0
        self._records = []
        self._error_message = None
        self._set_state(ViewState.LOADING)

        try:
            page = await self._repository.get_page(0, self._page_size)
        except Exception as exc:
            if generation != self._generation:
                return
            _logger.warning("Loading first page failed: %s", exc)
            self._error_message = describe_error(exc)
            self._set_state(ViewState.ERROR)
            return

        if generation != self._generation:
            _logger.debug("Discarding superseded first page")
            return
        self._records = list(page)
        self._current_page = 1
        self._set_state(ViewState.SUCCESS)

    async def load_more(self) -> None:
        """Append the next page, unless a request is in flight or data is exhausted.

        Called before any load, it performs the initial load instead.
        """
        if self._state == ViewState.IDLE:
            await self.load_initial()
            return
        if self._state in (ViewState.LOADING, ViewState.LOADING_MORE) or not self.has_more:
            return

        generation = self._generation
        page_index = self._current_page
        self._error_message = None
        self._set_state(ViewState.LOADING_MORE)

        try:
            page = await self._repository.get_page(page_index, self._page_size)
        except Exception as exc:
            if generation != self._generation:
                return
            _logger.warning("Loading page %d failed: %s", page_index, exc)
            self._error_message = describe_error(exc)
            self._set_state(ViewState.ERROR)
            return

        if generation != self._generation:
            _logger.debug("Discarding superseded page %d", page_index)
            return
        # An empty page is the legitimate end of the data, not an error.
        self._records.extend(page)
        self._current_page = page_index + 1
        self._set_state(ViewState.SUCCESS)

    async def refresh(self) -> None:
        """Clear the repository cache and reload from page 0."""
        self._repository.clear_cache()
        await self.load_initial()

    def _set_state(self, state: ViewState) -> None:
        self._state = state
        self._notify()
