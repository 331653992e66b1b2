"""Notification fan-out: an append-only log keyed by recipient."""
from __future__ import annotations

import logging

from skillhub.db.ids import new_id
from skillhub.db.store import Document, JsonStore
from skillhub.db.time import newest_first
from skillhub.models import Notification

from .errors import NotFoundError

__all__ = [
    "push_notification",
    "list_notifications",
    "count_unread",
    "mark_read",
    "mark_all_read",
    "delete_notification",
]

logger = logging.getLogger(__name__)


def push_notification(doc: Document, recipient_id: str | None, message: str | None) -> Notification | None:
    """Append an unread notification inside the caller's transaction.

    This is a side effect of another operation and never fails it: empty
    arguments make it a no-op.
    """
    if not recipient_id or not message:
        return None
    notification = Notification(id=new_id(), user_id=recipient_id, message=message)
    doc.notifications.append(notification)
    logger.debug("Queued notification %s for %s", notification.id, recipient_id)
    return notification


def list_notifications(store: JsonStore, recipient_id: str) -> list[Notification]:
    """Return every notification for a recipient, newest first."""
    with store.snapshot() as doc:
        mine = [n for n in doc.notifications if n.user_id == recipient_id]
    return newest_first(mine, key=lambda n: n.created_at)


def count_unread(store: JsonStore, recipient_id: str) -> int:
    with store.snapshot() as doc:
        return sum(1 for n in doc.notifications if n.user_id == recipient_id and not n.read)


def mark_read(store: JsonStore, notification_id: str) -> Notification:
    """Mark one notification as read.

    Raises:
        NotFoundError: If the notification does not exist
    """
    with store.transaction() as doc:
        notification = doc.find_notification(notification_id)
        if notification is None:
            raise NotFoundError("Notification not found")
        notification.read = True
    return notification


def mark_all_read(store: JsonStore, recipient_id: str) -> int:
    """Mark all of a recipient's notifications as read; returns how many changed."""
    changed = 0
    with store.transaction() as doc:
        for notification in doc.notifications:
            if notification.user_id == recipient_id and not notification.read:
                notification.read = True
                changed += 1
    return changed


def delete_notification(store: JsonStore, notification_id: str) -> Notification:
    """Remove a notification and return it.

    Raises:
        NotFoundError: If the notification does not exist
    """
    with store.transaction() as doc:
        notification = doc.find_notification(notification_id)
        if notification is None:
            raise NotFoundError("Notification not found")
        doc.notifications.remove(notification)
    return notification
