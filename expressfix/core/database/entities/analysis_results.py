"""
AI analysis result entity models.

Each row is one run of a review tool (or the enhancement flow) against a
design upload. Ownership is inherited from the upload.
"""

from __future__ import annotations

from datetime import datetime
from typing import Any, Dict, List

from sqlalchemy import DateTime
from sqlmodel import JSON, Field

from ..base import Base, new_id, utc_now


class AIAnalysisResult(Base, table=True):
    """Persistent analysis result.

    Table: ai_analysis_results
    """

    __tablename__ = "ai_analysis_results"
    __table_args__ = ({"extend_existing": True},)

    id: str = Field(default_factory=new_id, primary_key=True, max_length=64)
    design_upload_id: str = Field(
        foreign_key="design_uploads.id", ondelete="CASCADE", index=True, max_length=64
    )

    analysis_type: str = Field(max_length=32, index=True)
    overall_score: int = Field(ge=0, le=100)
    results: Dict[str, Any] = Field(default_factory=dict, sa_type=JSON)
    suggestions: List[str] = Field(default_factory=list, sa_type=JSON)

    created_at: datetime = Field(default_factory=utc_now, sa_type=DateTime(timezone=True), index=True)

    def __repr__(self) -> str:
        return (
            f"AIAnalysisResult(id={self.id}, upload={self.design_upload_id}, "
            f"type={self.analysis_type}, score={self.overall_score})"
        )
