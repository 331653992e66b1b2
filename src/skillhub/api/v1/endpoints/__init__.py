# src/skillhub/api/v1/endpoints/__init__.py
"""API endpoint modules for version 1."""

from .auth import router as auth_router
from .learning_progress import router as learning_progress_router
from .learning_resources import router as learning_resources_router
from .notifications import router as notifications_router
from .posts import router as posts_router
from .users import router as users_router

__all__ = [
    "auth_router",
    "users_router",
    "posts_router",
    "learning_progress_router",
    "learning_resources_router",
    "notifications_router",
]
