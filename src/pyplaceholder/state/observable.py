"""Subscriber list with synchronous change notification."""

from __future__ import annotations

import logging
from collections.abc import Callable

_logger = logging.getLogger(__name__)

Listener = Callable[[], None]


class Observable:
    """Explicit list of change listeners.

    Listeners are called synchronously, in subscription order, once per
    :meth:`_notify`. A listener that raises is logged and skipped; the
    remaining listeners still run.
    """

    def __init__(self) -> None:
        self._listeners: list[Listener] = []

    @property
    def subscriber_count(self) -> int:
        return len(self._listeners)

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Register *listener* and return a handle that unsubscribes it."""
        if listener not in self._listeners:
            self._listeners.append(listener)

        def _unsubscribe() -> None:
            self.unsubscribe(listener)

        return _unsubscribe

    def unsubscribe(self, listener: Listener) -> None:
        if listener in self._listeners:
            self._listeners.remove(listener)

    def _notify(self) -> None:
        # Snapshot so listeners may unsubscribe themselves while being called.
        for listener in list(self._listeners):
            try:
                listener()
            except Exception:
                _logger.debug("State listener %r failed", listener, exc_info=True)
