"""Export I/O models."""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from expressfix.core.models.domain import ExportFormat, ExportQuality

from .common import CamelModel


class ExportRequest(CamelModel):
    """Schema for exporting a design."""

    upload_id: Optional[str] = Field(default=None, description="Upload the export is derived from")
    format: ExportFormat = Field(description="PNG, JPG, PDF or SVG")
    quality: ExportQuality = Field(description="high, medium or low")
    width: Optional[int] = Field(default=None, ge=1, le=8000, description="Canvas width in pixels")
    height: Optional[int] = Field(default=None, ge=1, le=8000, description="Canvas height in pixels")


class ExportResponse(CamelModel):
    """Summary of a recorded export."""

    export_id: str
    download_url: str
    file_name: str
    format: ExportFormat
    quality: ExportQuality
    estimated_size: str


class ExportHistoryRead(BaseModel):
    """Schema for reading an export history row."""

    model_config = ConfigDict(from_attributes=True)

    id: str
    user_id: str
    design_upload_id: Optional[str] = None
    export_format: str
    export_quality: str
    file_url: Optional[str] = None
    width: Optional[int] = None
    height: Optional[int] = None
    created_at: datetime
