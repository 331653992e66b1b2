# src/skillhub/models/base.py
"""Shared base classes for records kept in the JSON document store."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_serializer, field_validator
from pydantic.alias_generators import to_camel


def _as_mapping(likes: Iterable[str]) -> dict[str, bool]:
    return {user_id: True for user_id in sorted(likes)}


class StoreModel(BaseModel):
    """Base for stored records.

    Attributes use snake_case in Python and camelCase on the wire and on disk.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        validate_assignment=False,
    )


class Likeable(StoreModel):
    """Record carrying a like set.

    In memory the likes are a set of user ids. They serialize as a mapping of
    user id to ``true`` so a "not liked" entry is never written out.
    """

    likes: set[str] = Field(default_factory=set)

    @field_validator("likes", mode="before")
    @classmethod
    def _likes_from_mapping(cls, value: Any) -> Any:
        if isinstance(value, dict):
            return {user_id for user_id, liked in value.items() if liked}
        return value

    @field_serializer("likes")
    def _likes_as_mapping(self, likes: Iterable[str]) -> dict[str, bool]:
        return _as_mapping(likes)

    def toggle_like(self, user_id: str) -> bool:
        """Flip a user's membership in the like set.

        Returns:
            True if the user now likes the record, False if the like was removed
        """
        if user_id in self.likes:
            self.likes.discard(user_id)
            return False
        self.likes.add(user_id)
        return True

    def like_map(self) -> dict[str, bool]:
        """Return the like set in its serialized mapping form."""
        return _as_mapping(self.likes)
