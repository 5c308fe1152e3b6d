"""Notification schemas for the derived notification feed."""
from pydantic import BaseModel, Field
from datetime import datetime
from typing import Literal, Optional

NotificationType = Literal["task_reminder", "scheduled_task", "like", "comment", "system"]


class NotificationData(BaseModel):
    """Ids of the entity a notification points at."""
    task_id: Optional[int] = None
    pet_id: Optional[int] = None
    post_id: Optional[int] = None
    comment_id: Optional[int] = None


class Notification(BaseModel):
    """Ephemeral notification; ``id`` is stable for the same underlying cause."""
    id: str
    type: NotificationType
    title: str
    message: str
    timestamp: datetime
    icon: str
    data: NotificationData = Field(default_factory=NotificationData)


class NotificationListResponse(BaseModel):
    """Response for the derived notification feed."""
    notifications: list[Notification]
    count: int
    generated_at: datetime
