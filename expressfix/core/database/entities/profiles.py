"""
Profile entity models.

A profile mirrors the identity held by the external auth service and stores
the display details the application shows for a user.
"""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from sqlalchemy import DateTime
from sqlmodel import Field

from ..base import Base, utc_now


class ProfileBase(Base):
    """Base fields for a user profile."""

    email: str = Field(max_length=320, description="Email address from the auth service")
    full_name: Optional[str] = Field(default=None, max_length=256, description="Display name")
    avatar_url: Optional[str] = Field(default=None, description="Avatar image URL")


class Profile(ProfileBase, table=True):
    """Persistent user profile.

    The primary key is the auth service user id, so there is at most one
    profile per authenticated user.

    Table: profiles
    """

    __tablename__ = "profiles"
    __table_args__ = ({"extend_existing": True},)

    id: str = Field(primary_key=True, max_length=64)

    created_at: datetime = Field(default_factory=utc_now, sa_type=DateTime(timezone=True))
    updated_at: datetime = Field(
        default_factory=utc_now, sa_type=DateTime(timezone=True), sa_column_kwargs={"onupdate": utc_now}
    )

    def __repr__(self) -> str:
        return f"Profile(id={self.id}, email={self.email})"
