"""Unit tests for the notification service."""

import pytest
from sqlalchemy.ext.asyncio import AsyncSession

from expressfix.core.models.domain import NotificationType
from expressfix.server.services.notifications import NotificationService

pytestmark = pytest.mark.asyncio


async def test_notify_persists_unread(session: AsyncSession):
    notification = await NotificationService(session).notify("u1", "Title", "Message", NotificationType.warning)
    assert notification.id
    assert notification.unread is True
    assert notification.type == "warning"


async def test_analysis_completed_message(session: AsyncSession):
    notification = await NotificationService(session).analysis_completed("u1", "hero.png", 3)
    assert notification.title == "Design Analysis Complete"
    assert notification.message == "Your hero.png analysis is ready with 3 suggestions"
    assert notification.type == "success"


async def test_export_ready_message(session: AsyncSession):
    notification = await NotificationService(session).export_ready("u1", "enhanced-design-1.png")
    assert notification.title == "Export Ready"
    assert "enhanced-design-1.png" in notification.message
    assert notification.type == "info"
