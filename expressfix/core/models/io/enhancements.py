"""Enhancement I/O models."""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from pydantic import Field

from expressfix.core.models.domain import EnhancementLevel

from .common import CamelModel


class EnhancementSettings(CamelModel):
    preserve_original: Optional[bool] = None
    enhancement_level: Optional[EnhancementLevel] = None


class EnhancementRequest(CamelModel):
    """Schema for enhancing an upload."""

    upload_id: str = Field(description="Upload to enhance")
    enhancements: List[str] = Field(default_factory=list, description="Requested improvements")
    settings: Optional[EnhancementSettings] = None


class EnhancementResponse(CamelModel):
    """Result of an enhancement run."""

    enhancement_id: str = Field(description="Id of the stored enhancement analysis")
    enhanced_upload_id: str
    enhanced_file_url: str
    results: Dict[str, Any]
    download_ready: bool = True
