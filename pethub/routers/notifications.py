"""Notification router: the derived feed and the raw list of due tasks."""
from fastapi import APIRouter, Depends, Query
from typing import List
from sqlmodel import Session

from pethub.db.config import get_session
from pethub.middleware.auth import get_current_user, CurrentUser
from pethub.schemas.notification import NotificationListResponse
from pethub.schemas.task import DueTaskResponse
from pethub.services.notification_service import derive_notifications
from pethub.services.pet_service import PetService
from pethub.services.post_service import PostService
from pethub.services.task_service import TaskService
from pethub.utils.datetime_utils import utcnow

router = APIRouter(tags=["Notifications"])


@router.get("", response_model=NotificationListResponse)
async def list_notifications(
    dismissed: List[str] = Query([], description="Notification ids already dismissed this session"),
    current_user: CurrentUser = Depends(get_current_user),
    session: Session = Depends(get_session),
):
    """Derive the caller's notifications from their current tasks, pets and posts."""
    now = utcnow()
    notifications = derive_notifications(
        now,
        TaskService(session).get_by_user(current_user.user_id),
        PetService(session).get_names(current_user.user_id),
        PostService(session).get_by_user(current_user.user_id),
        current_user.user_id,
        set(dismissed),
    )
    return NotificationListResponse(
        notifications=notifications,
        count=len(notifications),
        generated_at=now,
    )


@router.get("/due-tasks", response_model=List[DueTaskResponse])
async def list_due_tasks(
    current_user: CurrentUser = Depends(get_current_user),
    session: Session = Depends(get_session),
):
    """Tasks whose stored time has already passed, with their pet."""
    return TaskService(session).get_due(current_user.user_id, utcnow())
