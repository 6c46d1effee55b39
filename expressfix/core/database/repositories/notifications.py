"""
Notification repository.
"""

from __future__ import annotations

from typing import List

from sqlalchemy import select, update
from sqlalchemy.ext.asyncio import AsyncSession

from ..entities.notifications import Notification
from .base import AsyncBaseRepository


class NotificationRepository(AsyncBaseRepository[Notification]):
    """Repository for notification data access operations."""

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session, Notification)

    async def list_for_user(self, user_id: str, unread_only: bool = False) -> List[Notification]:
        """A user's notifications newest first."""
        stmt = select(Notification).where(Notification.user_id == user_id)
        if unread_only:
            stmt = stmt.where(Notification.unread == True)  # noqa: E712
        stmt = stmt.order_by(Notification.created_at.desc())
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def mark_read(self, notification_id: str, user_id: str) -> bool:
        """Mark one owned notification as read.

        Returns:
            True if a notification was updated
        """
        stmt = (
            update(Notification)
            .where(Notification.id == notification_id, Notification.user_id == user_id)
            .values(unread=False)
        )
        result = await self.session.execute(stmt)
        await self.session.commit()
        return result.rowcount > 0

    async def mark_all_read(self, user_id: str) -> int:
        """Mark every unread notification of a user as read.

        Returns:
            Number of notifications updated
        """
        stmt = (
            update(Notification)
            .where(Notification.user_id == user_id, Notification.unread == True)  # noqa: E712
            .values(unread=False)
        )
        result = await self.session.execute(stmt)
        await self.session.commit()
        return result.rowcount
