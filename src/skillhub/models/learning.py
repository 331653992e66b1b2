# src/skillhub/models/learning.py
"""Stored learning progress plans and shared learning resources."""

from __future__ import annotations

from datetime import date, datetime

from pydantic import Field

from skillhub.db.time import utcnow

from .base import Likeable, StoreModel


class LearningProgress(StoreModel):
    """Personal learning plan owned by a single user."""

    id: str
    skill_title: str
    description: str
    field: str
    start_date: date
    end_date: date
    level: str = ""
    post_owner_id: str = Field(alias="postOwnerID")
    post_owner_name: str = ""
    created_at: datetime = Field(default_factory=utcnow)
    updated_at: datetime = Field(default_factory=utcnow)


class LearningResource(Likeable):
    """Curated learning link shared to the resource feed."""

    id: str
    title: str
    description: str
    content_url: str = Field(alias="contentURL")
    tags: list[str] = Field(default_factory=list)
    post_owner_id: str = Field(alias="postOwnerID")
    post_owner_name: str = ""
    created_at: datetime = Field(default_factory=utcnow)
    updated_at: datetime = Field(default_factory=utcnow)
