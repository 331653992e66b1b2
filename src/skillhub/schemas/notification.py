"""Notification-related Pydantic schemas."""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class MarkAllReadResponse(BaseModel):
    """Acknowledgement returned after marking a recipient's inbox as read."""

    success: bool = True


class UnreadCountResponse(BaseModel):
    """Number of unread notifications for a recipient."""

    user_id: str
    unread: int

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)
