"""
Service for raising in-app notifications.

Other flows (analysis, export) call ``notify`` after their own rows are
committed so a failed notification never rolls back the user's work.
"""

from __future__ import annotations

from sqlalchemy.ext.asyncio import AsyncSession

from expressfix.core.database.entities.notifications import Notification
from expressfix.core.database.repositories.notifications import NotificationRepository
from expressfix.core.logging_config import get_logger
from expressfix.core.models.domain import NotificationType

logger = get_logger(__name__)


class NotificationService:
    """Creates notifications for a user."""

    def __init__(self, session: AsyncSession):
        self.repository = NotificationRepository(session)

    async def notify(
        self, user_id: str, title: str, message: str, type: NotificationType = NotificationType.info
    ) -> Notification:
        notification = await self.repository.create(
            Notification(user_id=user_id, title=title, message=message, type=type.value)
        )
        logger.debug(f"Notification {notification.id} created for user {user_id}: {title}")
        return notification

    async def analysis_completed(self, user_id: str, file_name: str, suggestion_count: int) -> Notification:
        return await self.notify(
            user_id,
            "Design Analysis Complete",
            f"Your {file_name} analysis is ready with {suggestion_count} suggestions",
            NotificationType.success,
        )

    async def export_ready(self, user_id: str, file_name: str) -> Notification:
        return await self.notify(
            user_id,
            "Export Ready",
            f"Your enhanced design {file_name} is ready for download",
            NotificationType.info,
        )
