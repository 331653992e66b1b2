# src/skillhub/models/post.py
"""Stored posts and their comments."""

from __future__ import annotations

from datetime import datetime

from pydantic import Field

from skillhub.db.time import utcnow

from .base import Likeable, StoreModel


class Comment(StoreModel):
    """Comment attached to a post.

    ``user_full_name`` is a snapshot of the commenter's name taken when the
    comment was written; it is not refreshed on later profile edits.
    """

    id: str
    user_id: str = Field(alias="userID")
    user_full_name: str = ""
    content: str
    created_at: datetime = Field(default_factory=utcnow)
    updated_at: datetime | None = None


class Post(Likeable):
    """Primary content entity produced by users.

    ``media`` holds relative paths of uploaded attachments in upload order.
    """

    id: str
    user_id: str = Field(alias="userID")
    title: str
    description: str
    media: list[str] = Field(default_factory=list)
    comments: list[Comment] = Field(default_factory=list)
    created_at: datetime = Field(default_factory=utcnow)
    updated_at: datetime = Field(default_factory=utcnow)

    def find_comment(self, comment_id: str) -> Comment | None:
        """Return the comment with the given id, if present."""
        return next((c for c in self.comments if c.id == comment_id), None)

    def touch(self) -> None:
        self.updated_at = utcnow()
