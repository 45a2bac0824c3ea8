"""User model."""

from __future__ import annotations

from pyplaceholder.models._base import PlaceholderRecord


class User(PlaceholderRecord):
    """A user from the ``/users`` collection.

    The collection is small (ten entries on the public service), so it is
    fetched and cached in full.
    """

    name: str
    """Display name (e.g. ``"Leanne Graham"``)."""
    email: str
    """Contact email address."""
    phone: str | None = None
    """Phone number; free-form and optional."""
