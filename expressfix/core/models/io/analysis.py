"""
Design analysis I/O models.

``analysis_type`` is validated by the endpoint rather than by an enum field so
an unknown tool yields a 400 with a readable message instead of a 422.
"""

from __future__ import annotations

from datetime import datetime
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field

from .common import CamelModel
from .uploads import DesignUploadRead


class AnalysisRequest(CamelModel):
    """Schema for running a review tool against an upload."""

    upload_id: str = Field(description="Upload to analyse")
    analysis_type: str = Field(description="smart_fix, brand_check, typography or ai_suggestions")
    guideline_id: Optional[str] = Field(default=None, description="Brand guideline to check against")


class AnalysisResponse(CamelModel):
    """Summary of a stored analysis."""

    analysis_id: str
    overall_score: int
    results: Dict[str, Any]
    suggestions: List[str]
    analysis_type: str


class AnalysisResultRead(BaseModel):
    """Schema for reading an analysis result row."""

    model_config = ConfigDict(from_attributes=True)

    id: str
    design_upload_id: str
    analysis_type: str
    overall_score: int
    results: Dict[str, Any]
    suggestions: List[str]
    created_at: datetime


class AnalysisHistoryItem(AnalysisResultRead):
    """An analysis result together with the upload it was run on."""

    design_upload: DesignUploadRead

    @classmethod
    def from_row(cls, analysis: Any, upload: Any) -> "AnalysisHistoryItem":
        """Build an item from an ``(analysis, upload)`` pair of entities."""
        return cls(
            **AnalysisResultRead.model_validate(analysis).model_dump(),
            design_upload=DesignUploadRead.model_validate(upload),
        )
