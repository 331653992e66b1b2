# src/skillhub/models/user.py
"""Stored user accounts and their follow edges."""

from __future__ import annotations

from datetime import datetime

from pydantic import Field

from skillhub.db.time import utcnow

from .base import StoreModel


class User(StoreModel):
    """Registered account.

    ``following`` and ``followers`` hold user ids with set semantics while
    keeping the order in which edges were added.
    """

    id: str
    fullname: str
    email: str
    password: str
    phone: str = ""
    skills: list[str] = Field(default_factory=list)
    following: list[str] = Field(default_factory=list)
    followers: list[str] = Field(default_factory=list)
    created_at: datetime = Field(default_factory=utcnow)

    def add_following(self, user_id: str) -> bool:
        """Record an outgoing follow edge; returns False if it already existed."""
        if user_id in self.following:
            return False
        self.following.append(user_id)
        return True

    def add_follower(self, user_id: str) -> None:
        """Record an incoming follow edge; duplicate adds are no-ops."""
        if user_id not in self.followers:
            self.followers.append(user_id)

    def remove_following(self, user_id: str) -> None:
        self.following = [uid for uid in self.following if uid != user_id]

    def remove_follower(self, user_id: str) -> None:
        self.followers = [uid for uid in self.followers if uid != user_id]
