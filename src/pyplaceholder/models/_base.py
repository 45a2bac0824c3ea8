"""Base model for records served by the data source.

Every record model inherits from :class:`PlaceholderRecord` which
provides:

* ``alias_generator=to_camel`` so camelCase JSON keys map
  automatically to snake_case fields.
* Frozen instances with structural equality: two records with identical
  fields are interchangeable.
* A unique integer ``id`` exposed generically as :attr:`key`.
"""

from __future__ import annotations

from typing import Any, Self

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class PlaceholderRecord(BaseModel):
    """Immutable, identity-bearing record.

    Records never mutate in place; :meth:`copy_with` returns a new,
    re-validated value.
    """

    model_config = ConfigDict(
        frozen=True,
        extra="ignore",
        populate_by_name=True,
        alias_generator=to_camel,
    )

    id: int

    @property
    def key(self) -> int:
        """Unique key used by the caches for point lookups."""
        return self.id

    @classmethod
    def from_json(cls, payload: Any) -> Self:
        return cls.model_validate(payload)

    def to_json(self) -> dict[str, Any]:
        """Serialise with the source's camelCase keys."""
        return self.model_dump(by_alias=True)

    def copy_with(self, **changes: Any) -> Self:
        """Return a copy with *changes* applied (field names, not aliases)."""
        data = self.model_dump()
        data.update(changes)
        return type(self).model_validate(data)
