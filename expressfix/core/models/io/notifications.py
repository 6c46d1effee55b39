"""Notification I/O models."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from expressfix.core.models.domain import NotificationType

from .common import CamelModel


class NotificationCreate(CamelModel):
    """Schema for posting a notification."""

    title: str = Field(min_length=1, max_length=256)
    message: str = Field(min_length=1)
    type: NotificationType = Field(default=NotificationType.info)


class NotificationRead(BaseModel):
    """Schema for reading a notification row."""

    model_config = ConfigDict(from_attributes=True)

    id: str
    user_id: str
    title: str
    message: str
    type: str
    unread: bool
    created_at: datetime
