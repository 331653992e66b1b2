# src/skillhub/models/notification.py
"""Stored notifications addressed to a single recipient."""

from __future__ import annotations

from datetime import datetime

from pydantic import Field

from skillhub.db.time import utcnow

from .base import StoreModel


class Notification(StoreModel):
    """Message produced when another user acts on the recipient.

    ``read`` only ever moves from False to True.
    """

    id: str
    user_id: str
    message: str
    read: bool = False
    created_at: datetime = Field(default_factory=utcnow)
