"""Service-level helpers for the post lifecycle."""
from __future__ import annotations

import logging

from skillhub.db.ids import new_id
from skillhub.db.store import JsonStore
from skillhub.db.time import newest_first
from skillhub.models import Post

from .errors import BadRequestError, NotFoundError, require
from .media import MediaStorage
from .user_service import get_user_or_404

__all__ = [
    "list_posts",
    "get_post",
    "check_new_post",
    "create_post",
    "update_post",
    "delete_post",
    "remove_media",
]

logger = logging.getLogger(__name__)


def list_posts(store: JsonStore, user_id: str | None = None) -> list[Post]:
    """Return posts newest first, optionally only those owned by ``user_id``."""
    with store.snapshot() as doc:
        posts = [p for p in doc.posts if user_id is None or p.user_id == user_id]
    return newest_first(posts, key=lambda p: p.created_at)


def get_post(store: JsonStore, post_id: str) -> Post:
    """Return a post by id.

    Raises:
        NotFoundError: If the post does not exist
    """
    with store.snapshot() as doc:
        post = doc.find_post(post_id)
    if post is None:
        raise NotFoundError("Post not found")
    return post


def check_new_post(store: JsonStore, user_id: str | None, title: str | None, description: str | None) -> None:
    """Validate a post submission before any media is written.

    Raises:
        BadRequestError: If owner, title or description is missing
        NotFoundError: If the owner does not exist
    """
    require(user_id, title, description)
    with store.snapshot() as doc:
        get_user_or_404(doc, user_id)


def create_post(
    store: JsonStore,
    *,
    user_id: str | None,
    title: str | None,
    description: str | None,
    media: list[str] | None = None,
) -> Post:
    """Create a post owned by an existing user.

    Args:
        store: Document store
        user_id: Owner of the post
        title: Post title
        description: Post body
        media: Relative paths of attachments that are already stored

    Raises:
        BadRequestError: If owner, title or description is missing
        NotFoundError: If the owner does not exist
    """
    require(user_id, title, description)
    with store.transaction() as doc:
        owner = get_user_or_404(doc, user_id)
        post = Post(
            id=new_id(),
            user_id=owner.id,
            title=title,
            description=description,
            media=list(media or []),
        )
        doc.posts.append(post)
    logger.info("User %s created post %s with %d media", owner.id, post.id, len(post.media))
    return post


def update_post(
    store: JsonStore,
    post_id: str,
    *,
    title: str | None = None,
    description: str | None = None,
    new_media: list[str] | None = None,
) -> Post:
    """Overwrite provided text fields and append new media.

    Existing media are never replaced; use `remove_media` to detach one.

    Raises:
        NotFoundError: If the post does not exist
    """
    with store.transaction() as doc:
        post = doc.find_post(post_id)
        if post is None:
            raise NotFoundError("Post not found")
        if title:
            post.title = title
        if description:
            post.description = description
        if new_media:
            post.media = [*post.media, *new_media]
        post.touch()
    return post


def delete_post(store: JsonStore, post_id: str, media: MediaStorage) -> Post:
    """Remove a post and release every attached media file.

    Raises:
        NotFoundError: If the post does not exist
    """
    with store.transaction() as doc:
        post = doc.find_post(post_id)
        if post is None:
            raise NotFoundError("Post not found")
        doc.posts = [p for p in doc.posts if p.id != post_id]
    media.release_all(post.media)
    return post


def remove_media(store: JsonStore, post_id: str, media_url: str | None, media: MediaStorage) -> Post:
    """Detach one media reference from a post and release its file.

    Files are only released for references that were attached to this post.

    Raises:
        NotFoundError: If the post does not exist
        BadRequestError: If no media reference is given
    """
    with store.transaction() as doc:
        post = doc.find_post(post_id)
        if post is None:
            raise NotFoundError("Post not found")
        if not media_url:
            raise BadRequestError("mediaUrl is required")
        attached = media_url in post.media
        post.media = [url for url in post.media if url != media_url]
        post.touch()
    if attached:
        media.release(media_url)
    return post
