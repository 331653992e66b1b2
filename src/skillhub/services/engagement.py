"""Likes and comments on posts and learning resources.

Posts and learning resources share one like-toggle: the actor's id is added
to the like set when absent and removed when present, and only the
transition to "liked" on someone else's content notifies the owner.
"""
from __future__ import annotations

import logging

from skillhub.db.ids import new_id
from skillhub.db.store import Document, JsonStore
from skillhub.db.time import utcnow
from skillhub.models import Comment, Likeable, Post, User

from .errors import ForbiddenError, NotFoundError, require
from .notifications import push_notification
from .user_service import get_user_or_404

__all__ = [
    "toggle_post_like",
    "toggle_resource_like",
    "add_comment",
    "edit_comment",
    "delete_comment",
]

logger = logging.getLogger(__name__)


def _apply_like_toggle(
    doc: Document,
    content: Likeable,
    *,
    actor: User,
    owner_id: str,
    liked_message: str,
) -> dict[str, bool]:
    liked = content.toggle_like(actor.id)
    if liked and actor.id != owner_id:
        push_notification(doc, owner_id, liked_message)
    return content.like_map()


def toggle_post_like(store: JsonStore, post_id: str, user_id: str | None) -> dict[str, bool]:
    """Like or unlike a post on behalf of ``user_id``.

    Returns:
        The post's full like map after the toggle

    Raises:
        NotFoundError: If the post or the user does not exist
        BadRequestError: If no user id is given
    """
    with store.transaction() as doc:
        post = _get_post(doc, post_id)
        require(user_id, message="userID is required")
        actor = get_user_or_404(doc, user_id)
        return _apply_like_toggle(
            doc,
            post,
            actor=actor,
            owner_id=post.user_id,
            liked_message=f'{actor.fullname} liked your post "{post.title}".',
        )


def toggle_resource_like(store: JsonStore, resource_id: str, user_id: str | None) -> dict[str, bool]:
    """Like or unlike a learning resource on behalf of ``user_id``.

    Raises:
        NotFoundError: If the resource or the user does not exist
        BadRequestError: If no user id is given
    """
    with store.transaction() as doc:
        resource = doc.find_resource(resource_id)
        if resource is None:
            raise NotFoundError("Learning resource not found")
        require(user_id, message="userID is required")
        actor = get_user_or_404(doc, user_id)
        return _apply_like_toggle(
            doc,
            resource,
            actor=actor,
            owner_id=resource.post_owner_id,
            liked_message=f'{actor.fullname} liked your learning post "{resource.title}".',
        )


def _get_post(doc: Document, post_id: str) -> Post:
    post = doc.find_post(post_id)
    if post is None:
        raise NotFoundError("Post not found")
    return post


def _get_comment(post: Post, comment_id: str) -> Comment:
    comment = post.find_comment(comment_id)
    if comment is None:
        raise NotFoundError("Comment not found")
    return comment


def add_comment(store: JsonStore, post_id: str, user_id: str | None, content: str | None) -> list[Comment]:
    """Append a comment to a post and notify the post owner.

    The commenter's current name is copied onto the comment.

    Returns:
        The post's full comment list

    Raises:
        NotFoundError: If the post or the user does not exist
        BadRequestError: If user id or content is missing
    """
    with store.transaction() as doc:
        post = _get_post(doc, post_id)
        require(user_id, content, message="userID and content are required")
        user = get_user_or_404(doc, user_id)
        post.comments.append(
            Comment(
                id=new_id(),
                user_id=user.id,
                user_full_name=user.fullname,
                content=content,
            )
        )
        post.touch()
        if post.user_id != user.id:
            push_notification(doc, post.user_id, f'{user.fullname} commented on your post "{post.title}".')
        return list(post.comments)


def edit_comment(
    store: JsonStore,
    post_id: str,
    comment_id: str,
    user_id: str | None,
    content: str | None,
) -> list[Comment]:
    """Replace the content of a comment written by ``user_id``.

    Raises:
        NotFoundError: If the post or comment does not exist
        BadRequestError: If user id or content is missing
        ForbiddenError: If ``user_id`` is not the comment's author
    """
    with store.transaction() as doc:
        post = _get_post(doc, post_id)
        require(user_id, content, message="userID and content are required")
        comment = _get_comment(post, comment_id)
        if comment.user_id != user_id:
            raise ForbiddenError("Not authorized to edit this comment")
        comment.content = content
        comment.updated_at = utcnow()
        return list(post.comments)


def delete_comment(store: JsonStore, post_id: str, comment_id: str, user_id: str | None) -> list[Comment]:
    """Remove a comment written by ``user_id``.

    Raises:
        NotFoundError: If the post or comment does not exist
        BadRequestError: If no user id is given
        ForbiddenError: If ``user_id`` is not the comment's author
    """
    with store.transaction() as doc:
        post = _get_post(doc, post_id)
        require(user_id, message="userID is required")
        comment = _get_comment(post, comment_id)
        if comment.user_id != user_id:
            raise ForbiddenError("Not authorized to delete this comment")
        post.comments = [c for c in post.comments if c.id != comment.id]
        logger.debug("Removed comment %s from post %s", comment_id, post_id)
        return list(post.comments)
