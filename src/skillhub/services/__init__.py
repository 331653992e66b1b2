# src/skillhub/services/__init__.py
"""Business logic services for the SkillHub application."""

from .errors import (
    BadRequestError,
    ConflictError,
    ForbiddenError,
    NotFoundError,
    ServiceError,
    UnauthorizedError,
)
from .media import MediaStorage, get_media_storage

__all__ = [
    "ServiceError",
    "BadRequestError",
    "ConflictError",
    "ForbiddenError",
    "NotFoundError",
    "UnauthorizedError",
    "MediaStorage",
    "get_media_storage",
]
