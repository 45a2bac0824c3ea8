"""Tests for record parsing and immutability."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from pyplaceholder.models import Photo, User

PHOTO_PAYLOAD: dict = {
    "albumId": 1,
    "id": 7,
    "title": "officia delectus consequatur",
    "url": "https://via.placeholder.com/600/b0f7cc",
    "thumbnailUrl": "https://via.placeholder.com/150/b0f7cc",
}


class TestUser:
    def test_parses_json_and_ignores_unknown_keys(self) -> None:
        user = User.from_json(
            {
                "id": 1,
                "name": "Leanne Graham",
                "email": "Sincere@april.biz",
                "phone": "1-770-736-8031 x56442",
                "address": {"city": "Gwenborough"},
            }
        )
        assert user.key == 1
        assert user.name == "Leanne Graham"
        assert user.phone == "1-770-736-8031 x56442"

    def test_phone_is_optional(self) -> None:
        user = User.from_json({"id": 2, "name": "Ervin Howell", "email": "Shanna@melissa.tv"})
        assert user.phone is None

    def test_missing_required_field_rejected(self) -> None:
        with pytest.raises(ValidationError):
            User.from_json({"id": 3, "name": "No Email"})

    def test_structural_equality(self) -> None:
        a = User(id=1, name="John Doe", email="john@example.com")
        b = User(id=1, name="John Doe", email="john@example.com")
        assert a == b
        assert a != a.copy_with(email="other@example.com")

    def test_copy_with_returns_new_value(self) -> None:
        user = User(id=1, name="John Doe", email="john@example.com")
        renamed = user.copy_with(name="Johnny")
        assert renamed.name == "Johnny"
        assert renamed.email == user.email
        assert user.name == "John Doe"

    def test_frozen(self) -> None:
        user = User(id=1, name="John Doe", email="john@example.com")
        with pytest.raises(ValidationError):
            user.name = "Changed"  # type: ignore[misc]


class TestPhoto:
    def test_camel_case_keys_map_to_fields(self) -> None:
        photo = Photo.from_json(PHOTO_PAYLOAD)
        assert photo.album_id == 1
        assert photo.thumbnail_url.endswith("/150/b0f7cc")
        assert photo.key == 7

    def test_snake_case_names_accepted(self) -> None:
        photo = Photo(album_id=2, id=3, title="t", url="u", thumbnail_url="th")
        assert photo.album_id == 2

    def test_to_json_uses_camel_case(self) -> None:
        assert Photo.from_json(PHOTO_PAYLOAD).to_json() == PHOTO_PAYLOAD

    def test_str(self) -> None:
        assert str(Photo.from_json(PHOTO_PAYLOAD)) == "Photo(id=7, album_id=1, title=officia delectus consequatur)"
