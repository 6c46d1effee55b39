"""
Notification Endpoints.

Notifications are stored per user. Updates use the query-string protocol of
the header bell: ``?action=mark_read&id=...`` or ``?action=mark_all_read``.
"""

from __future__ import annotations

from typing import List, Optional

from fastapi import APIRouter, HTTPException, status

from expressfix.core.database.repositories import NotificationRepository
from expressfix.core.logging_config import get_logger
from expressfix.core.models.domain import NotificationAction
from expressfix.core.models.io import NotificationCreate, NotificationRead, SuccessResponse
from expressfix.server.services.deps import CurrentUserDep, SessionDep
from expressfix.server.services.notifications import NotificationService

logger = get_logger(__name__)

router = APIRouter()


@router.get(
    "",
    response_model=List[NotificationRead],
    summary="List Notifications",
    description="The caller's notifications, newest first.",
)
async def list_notifications(
    user: CurrentUserDep, session: SessionDep, unread_only: bool = False
) -> List[NotificationRead]:
    notifications = await NotificationRepository(session).list_for_user(user.id, unread_only=unread_only)
    return [NotificationRead.model_validate(n) for n in notifications]


@router.post(
    "",
    response_model=NotificationRead,
    status_code=status.HTTP_201_CREATED,
    summary="Create Notification",
    description="Store a notification for the caller.",
)
async def create_notification(body: NotificationCreate, user: CurrentUserDep, session: SessionDep) -> NotificationRead:
    notification = await NotificationService(session).notify(user.id, body.title, body.message, body.type)
    return NotificationRead.model_validate(notification)


@router.put(
    "",
    response_model=SuccessResponse,
    summary="Update Notifications",
    description="Mark one notification (``action=mark_read&id=``) or all notifications (``action=mark_all_read``) as read.",
    responses={
        400: {"description": "Invalid action or missing id"},
        404: {"description": "Notification not found"},
    },
)
async def update_notifications(
    user: CurrentUserDep,
    session: SessionDep,
    action: Optional[str] = None,
    id: Optional[str] = None,
) -> SuccessResponse:
    repo = NotificationRepository(session)
    if action == NotificationAction.mark_read.value:
        if not id:
            raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Notification ID required")
        if not await repo.mark_read(id, user.id):
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Notification not found")
        return SuccessResponse()
    if action == NotificationAction.mark_all_read.value:
        count = await repo.mark_all_read(user.id)
        logger.debug(f"Marked {count} notifications read for user {user.id}")
        return SuccessResponse()
    raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Invalid action")
