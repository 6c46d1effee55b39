"""
Design upload entity models.

This module contains the database entity recording every design file a user
uploads, including AI-enhanced copies produced by the enhancement flow.
"""

from __future__ import annotations

from datetime import datetime

from sqlalchemy import DateTime
from sqlmodel import Field

from ..base import Base, new_id, utc_now


class DesignUploadBase(Base):
    """Base fields for a design upload."""

    user_id: str = Field(max_length=64, index=True, description="Owner (auth user id)")
    file_name: str = Field(max_length=512, description="Original file name")
    file_url: str = Field(description="Object path inside storage, prefixed with the bucket")
    file_size: int = Field(ge=0, description="File size in bytes")
    file_type: str = Field(max_length=128, description="MIME type of the file")
    upload_type: str = Field(max_length=64, index=True, description="Upload category (design, enhanced, ...)")


class DesignUpload(DesignUploadBase, table=True):
    """Persistent design upload record.

    Table: design_uploads
    """

    __tablename__ = "design_uploads"
    __table_args__ = ({"extend_existing": True},)

    id: str = Field(default_factory=new_id, primary_key=True, max_length=64)

    created_at: datetime = Field(default_factory=utc_now, sa_type=DateTime(timezone=True), index=True)

    def __repr__(self) -> str:
        return f"DesignUpload(id={self.id}, file_name={self.file_name}, upload_type={self.upload_type})"
