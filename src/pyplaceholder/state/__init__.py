"""UI-facing state machines.

Each state machine owns its view state, reads through a shared data-access
facade, and is the error boundary for the UI: no exception raised by a fetch
escapes a state machine method.
"""

from pyplaceholder.state.detail_view import DetailViewModel
from pyplaceholder.state.list_view import ListViewModel
from pyplaceholder.state.observable import Observable
from pyplaceholder.state.paged_view import PagedListViewModel
from pyplaceholder.state.view_state import ViewState

__all__ = [
    "DetailViewModel",
    "ListViewModel",
    "Observable",
    "PagedListViewModel",
    "ViewState",
]
