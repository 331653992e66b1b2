# src/skillhub/schemas/post.py
"""Post- and comment-related Pydantic schemas."""

from pydantic import BaseModel, ConfigDict, Field

from skillhub.models import Comment


class CommentCreate(BaseModel):
    """Schema for adding or editing a comment."""

    user_id: str | None = Field(None, alias="userID")
    content: str | None = None

    model_config = ConfigDict(populate_by_name=True)


class MediaRemoval(BaseModel):
    """Schema naming one media reference to detach from a post."""

    media_url: str | None = Field(None, alias="mediaUrl")

    model_config = ConfigDict(populate_by_name=True)


class LikesResponse(BaseModel):
    """Full like map after a toggle."""

    likes: dict[str, bool]


class CommentsResponse(BaseModel):
    """Full comment list after a comment mutation."""

    comments: list[Comment]
