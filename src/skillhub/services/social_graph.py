"""Follow graph between users, kept as mutual adjacency lists."""
from __future__ import annotations

import logging

from skillhub.db.store import JsonStore

from .errors import BadRequestError
from .notifications import push_notification
from .user_service import get_user_or_404

__all__ = ["follow", "unfollow", "list_following", "list_followers"]

logger = logging.getLogger(__name__)


def follow(store: JsonStore, actor_id: str, target_id: str | None) -> list[str]:
    """Make ``actor_id`` follow ``target_id`` and notify the target.

    Following an already-followed user changes nothing and sends no
    second notification.

    Returns:
        The actor's following list after the change

    Raises:
        BadRequestError: If the target is missing or is the actor
        NotFoundError: If either user does not exist
    """
    if not target_id or target_id == actor_id:
        raise BadRequestError("Invalid follow request")

    with store.transaction() as doc:
        actor = get_user_or_404(doc, actor_id)
        target = get_user_or_404(doc, target_id)
        is_new = actor.add_following(target.id)
        target.add_follower(actor.id)
        if is_new:
            push_notification(doc, target.id, f"{actor.fullname} started following you.")
        following = list(actor.following)
    logger.debug("%s now follows %s", actor_id, target_id)
    return following


def unfollow(store: JsonStore, actor_id: str, target_id: str | None) -> list[str]:
    """Drop the follow edge between two users; a missing edge is not an error.

    Raises:
        BadRequestError: If the target is missing
        NotFoundError: If either user does not exist
    """
    if not target_id:
        raise BadRequestError("Invalid unfollow request")

    with store.transaction() as doc:
        actor = get_user_or_404(doc, actor_id)
        target = get_user_or_404(doc, target_id)
        actor.remove_following(target.id)
        target.remove_follower(actor.id)
        return list(actor.following)


def list_following(store: JsonStore, user_id: str) -> list[str]:
    with store.snapshot() as doc:
        return list(get_user_or_404(doc, user_id).following)


def list_followers(store: JsonStore, user_id: str) -> list[str]:
    with store.snapshot() as doc:
        return list(get_user_or_404(doc, user_id).followers)
