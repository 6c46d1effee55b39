"""
Design upload I/O models.

The upload flow is two-step: the API records the upload and hands back a
signed URL, then the client PUTs the file bytes directly to object storage.
"""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from .common import CamelModel


class UploadCreate(CamelModel):
    """Schema for requesting a signed upload URL."""

    file_name: str = Field(min_length=1, max_length=512, description="Original file name")
    file_type: str = Field(min_length=1, description="MIME type, image/* or application/pdf")
    file_size: int = Field(description="File size in bytes")
    upload_type: str = Field(default="design", min_length=1, description="Upload category")


class UploadCreated(CamelModel):
    """Response of a successful upload request."""

    upload_url: str = Field(description="Signed URL the client uploads the file bytes to")
    upload_id: str
    file_path: str = Field(description="Object path inside the upload bucket")


class DesignUploadRead(BaseModel):
    """Schema for reading a design upload row."""

    model_config = ConfigDict(from_attributes=True)

    id: str
    user_id: str
    file_name: str
    file_url: str
    file_size: int
    file_type: str
    upload_type: str
    created_at: datetime
