# src/skillhub/schemas/__init__.py
"""
Pydantic schemas for API request/response models.

These schemas define the structure of API data for serialization and validation.
"""

from .learning import ProgressCreate, ProgressUpdate, ResourceCreate, ResourceUpdate
from .notification import MarkAllReadResponse, UnreadCountResponse
from .post import CommentCreate, CommentsResponse, LikesResponse, MediaRemoval
from .user import (
    FollowingResponse,
    FollowRequest,
    LoginRequest,
    LoginResponse,
    UnfollowRequest,
    UserCreate,
    UserProfileResponse,
    UserResponse,
    UserUpdate,
)

__all__ = [
    "ProgressCreate", "ProgressUpdate", "ResourceCreate", "ResourceUpdate",
    "MarkAllReadResponse", "UnreadCountResponse",
    "CommentCreate", "CommentsResponse", "LikesResponse", "MediaRemoval",
    "FollowRequest", "UnfollowRequest", "FollowingResponse",
    "LoginRequest", "LoginResponse",
    "UserCreate", "UserUpdate", "UserResponse", "UserProfileResponse",
]
