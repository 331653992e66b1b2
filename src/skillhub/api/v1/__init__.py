# src/skillhub/api/v1/__init__.py
"""Version 1 API endpoints."""

from .endpoints import (
    auth_router,
    learning_progress_router,
    learning_resources_router,
    notifications_router,
    posts_router,
    users_router,
)

__all__ = [
    "auth_router",
    "users_router",
    "posts_router",
    "learning_progress_router",
    "learning_resources_router",
    "notifications_router",
]
