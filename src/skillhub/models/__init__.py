# src/skillhub/models/__init__.py
"""Record models for the SkillHub document store."""

from .base import Likeable, StoreModel
from .learning import LearningProgress, LearningResource
from .notification import Notification
from .post import Comment, Post
from .user import User

__all__ = [
    "StoreModel", "Likeable",
    "User",
    "Post", "Comment",
    "LearningProgress", "LearningResource",
    "Notification",
]
