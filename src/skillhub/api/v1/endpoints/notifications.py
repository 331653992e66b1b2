"""Notification inbox endpoints for the SkillHub API."""

from fastapi import APIRouter

from skillhub.models import Notification
from skillhub.schemas.notification import MarkAllReadResponse, UnreadCountResponse
from skillhub.services import notifications as notification_service

from ..dependencies import StoreDep

router = APIRouter(prefix="/notifications", tags=["notifications"])


@router.put("/markAllAsRead/{user_id}", response_model=MarkAllReadResponse)
async def mark_all_as_read(user_id: str, store: StoreDep) -> MarkAllReadResponse:
    """Mark every notification of a recipient as read; a no-op when there are none."""
    notification_service.mark_all_read(store, user_id)
    return MarkAllReadResponse()


@router.get("/{user_id}", response_model=list[Notification])
async def list_notifications(user_id: str, store: StoreDep) -> list[Notification]:
    """Return a recipient's notifications, newest first."""
    return notification_service.list_notifications(store, user_id)


@router.get("/{user_id}/unreadCount", response_model=UnreadCountResponse)
async def unread_count(user_id: str, store: StoreDep) -> UnreadCountResponse:
    return UnreadCountResponse(
        user_id=user_id,
        unread=notification_service.count_unread(store, user_id),
    )


@router.put("/{notification_id}/markAsRead", response_model=Notification)
async def mark_as_read(notification_id: str, store: StoreDep) -> Notification:
    return notification_service.mark_read(store, notification_id)


@router.delete("/{notification_id}", response_model=Notification)
async def delete_notification(notification_id: str, store: StoreDep) -> Notification:
    return notification_service.delete_notification(store, notification_id)
