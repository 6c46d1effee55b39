"""
Export history entity models.

Append-only record of every export a user requested.
"""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from sqlalchemy import DateTime
from sqlmodel import Field

from ..base import Base, new_id, utc_now


class ExportHistory(Base, table=True):
    """Persistent export record.

    Table: export_history
    """

    __tablename__ = "export_history"
    __table_args__ = ({"extend_existing": True},)

    id: str = Field(default_factory=new_id, primary_key=True, max_length=64)
    user_id: str = Field(max_length=64, index=True)
    design_upload_id: Optional[str] = Field(
        default=None, foreign_key="design_uploads.id", ondelete="SET NULL", nullable=True, max_length=64
    )

    export_format: str = Field(max_length=8)
    export_quality: str = Field(max_length=16)
    file_url: Optional[str] = Field(default=None)
    width: Optional[int] = Field(default=None, ge=1)
    height: Optional[int] = Field(default=None, ge=1)

    created_at: datetime = Field(default_factory=utc_now, sa_type=DateTime(timezone=True), index=True)

    def __repr__(self) -> str:
        return f"ExportHistory(id={self.id}, format={self.export_format}, quality={self.export_quality})"
