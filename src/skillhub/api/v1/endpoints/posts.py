# src/skillhub/api/v1/endpoints/posts.py
"""Post, like and comment endpoints for the SkillHub API."""

from typing import Annotated

from fastapi import APIRouter, File, Form, Query, UploadFile, status

from skillhub.models import Post
from skillhub.schemas.post import CommentCreate, CommentsResponse, LikesResponse, MediaRemoval
from skillhub.services import engagement, post_service

from ..dependencies import MediaDep, StoreDep

router = APIRouter(prefix="/posts", tags=["posts"])

UserIdQuery = Annotated[str | None, Query(alias="userID")]


@router.get("", response_model=list[Post])
async def list_posts(store: StoreDep, user_id: UserIdQuery = None) -> list[Post]:
    """List posts newest first.

    Args:
        store: Document store
        user_id: Only return posts owned by this user

    Returns:
        List of posts in descending creation order
    """
    return post_service.list_posts(store, user_id)


@router.get("/{post_id}", response_model=Post)
async def get_post(post_id: str, store: StoreDep) -> Post:
    """Get a specific post by ID.

    Raises:
        NotFoundError: If the post does not exist
    """
    return post_service.get_post(store, post_id)


@router.post("", response_model=Post, status_code=status.HTTP_201_CREATED)
async def create_post(
    store: StoreDep,
    media: MediaDep,
    user_id: Annotated[str | None, Form(alias="userID")] = None,
    title: Annotated[str | None, Form()] = None,
    description: Annotated[str | None, Form()] = None,
    media_files: Annotated[list[UploadFile] | None, File(alias="mediaFiles")] = None,
) -> Post:
    """Create a new post from a multipart form with optional media files.

    Args:
        store: Document store
        media: Storage for uploaded attachments
        user_id: Owner of the post
        title: Post title
        description: Post body
        media_files: Up to five image/video uploads

    Returns:
        Created post

    Raises:
        BadRequestError: If a field is missing or an upload is rejected
        NotFoundError: If the owner does not exist
    """
    post_service.check_new_post(store, user_id, title, description)
    stored = await media.save_all(media_files)
    try:
        return post_service.create_post(
            store,
            user_id=user_id,
            title=title,
            description=description,
            media=stored,
        )
    except Exception:
        media.release_all(stored)
        raise


@router.put("/{post_id}", response_model=Post)
async def update_post(
    post_id: str,
    store: StoreDep,
    media: MediaDep,
    title: Annotated[str | None, Form()] = None,
    description: Annotated[str | None, Form()] = None,
    new_media_files: Annotated[list[UploadFile] | None, File(alias="newMediaFiles")] = None,
) -> Post:
    """Update text fields and append newly uploaded media."""
    post_service.get_post(store, post_id)
    stored = await media.save_all(new_media_files)
    try:
        return post_service.update_post(
            store,
            post_id,
            title=title,
            description=description,
            new_media=stored,
        )
    except Exception:
        media.release_all(stored)
        raise


@router.delete("/{post_id}", response_model=Post)
async def delete_post(post_id: str, store: StoreDep, media: MediaDep) -> Post:
    """Delete a post and release its media files."""
    return post_service.delete_post(store, post_id, media)


@router.delete("/{post_id}/media", response_model=Post)
async def remove_post_media(
    post_id: str,
    body: MediaRemoval,
    store: StoreDep,
    media: MediaDep,
) -> Post:
    """Detach one media reference from a post and release its file."""
    return post_service.remove_media(store, post_id, body.media_url, media)


@router.put("/{post_id}/like", response_model=LikesResponse)
async def toggle_like(post_id: str, store: StoreDep, user_id: UserIdQuery = None) -> LikesResponse:
    """Like the post, or unlike it if the user already does."""
    likes = engagement.toggle_post_like(store, post_id, user_id)
    return LikesResponse(likes=likes)


@router.post("/{post_id}/comment", response_model=CommentsResponse)
async def add_comment(post_id: str, body: CommentCreate, store: StoreDep) -> CommentsResponse:
    """Comment on a post."""
    comments = engagement.add_comment(store, post_id, body.user_id, body.content)
    return CommentsResponse(comments=comments)


@router.put("/{post_id}/comment/{comment_id}", response_model=CommentsResponse)
async def edit_comment(
    post_id: str,
    comment_id: str,
    body: CommentCreate,
    store: StoreDep,
) -> CommentsResponse:
    """Edit a comment; only its author may do so."""
    comments = engagement.edit_comment(store, post_id, comment_id, body.user_id, body.content)
    return CommentsResponse(comments=comments)


@router.delete("/{post_id}/comment/{comment_id}", response_model=CommentsResponse)
async def delete_comment(
    post_id: str,
    comment_id: str,
    store: StoreDep,
    user_id: UserIdQuery = None,
) -> CommentsResponse:
    """Delete a comment; only its author may do so."""
    comments = engagement.delete_comment(store, post_id, comment_id, user_id)
    return CommentsResponse(comments=comments)
