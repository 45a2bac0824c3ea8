"""pyplaceholder - Async cached data access and view state for paged APIs."""

from pyplaceholder._constants import VERSION as __version__
from pyplaceholder.client import PlaceholderClient
from pyplaceholder.config import PlaceholderConfig
from pyplaceholder.exceptions import (
    FetchError,
    InvalidArgumentError,
    NetworkError,
    NotFoundError,
    PlaceholderConfigError,
    PlaceholderError,
    ServerError,
)
from pyplaceholder.models import Photo, PlaceholderRecord, User
from pyplaceholder.repository import BoundedRepository, PagedRepository
from pyplaceholder.state import (
    DetailViewModel,
    ListViewModel,
    Observable,
    PagedListViewModel,
    ViewState,
)

__all__ = [
    "__version__",
    "BoundedRepository",
    "DetailViewModel",
    "FetchError",
    "InvalidArgumentError",
    "ListViewModel",
    "NetworkError",
    "NotFoundError",
    "Observable",
    "PagedListViewModel",
    "PagedRepository",
    "Photo",
    "PlaceholderClient",
    "PlaceholderConfig",
    "PlaceholderConfigError",
    "PlaceholderError",
    "PlaceholderRecord",
    "ServerError",
    "User",
    "ViewState",
]
