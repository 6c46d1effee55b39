"""Profile I/O models."""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from .common import CamelModel


class ProfileRead(BaseModel):
    """Schema for reading a profile row."""

    model_config = ConfigDict(from_attributes=True)

    id: str
    email: str
    full_name: Optional[str] = None
    avatar_url: Optional[str] = None
    created_at: datetime
    updated_at: datetime


class ProfileUpdate(CamelModel):
    """Schema for a partial profile update."""

    full_name: Optional[str] = Field(default=None, max_length=256)
    avatar_url: Optional[str] = None
