"""
Notification entity models.

In-app notifications shown in the header bell: analysis completed, export
ready, and anything a client posts for the user.
"""

from __future__ import annotations

from datetime import datetime

from sqlalchemy import DateTime
from sqlmodel import Field

from ..base import Base, new_id, utc_now


class Notification(Base, table=True):
    """Persistent user notification.

    Table: notifications
    """

    __tablename__ = "notifications"
    __table_args__ = ({"extend_existing": True},)

    id: str = Field(default_factory=new_id, primary_key=True, max_length=64)
    user_id: str = Field(max_length=64, index=True)

    title: str = Field(max_length=256)
    message: str = Field()
    type: str = Field(max_length=16)
    unread: bool = Field(default=True, index=True)

    created_at: datetime = Field(default_factory=utc_now, sa_type=DateTime(timezone=True), index=True)

    def __repr__(self) -> str:
        return f"Notification(id={self.id}, title={self.title}, unread={self.unread})"
