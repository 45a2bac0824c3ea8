"""Record models served by the data source."""

from pyplaceholder.models._base import PlaceholderRecord
from pyplaceholder.models.photo import Photo
from pyplaceholder.models.user import User

__all__ = [
    "Photo",
    "PlaceholderRecord",
    "User",
]
