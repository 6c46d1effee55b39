"""
Brand guideline entity models.

A brand guideline stores the colours, typography, logo rules and spacing a
user's designs are checked against by the Brand Checker.
"""

from __future__ import annotations

from datetime import datetime
from typing import Any, Dict

from sqlalchemy import DateTime
from sqlmodel import JSON, Field

from ..base import Base, new_id, utc_now


class BrandGuideline(Base, table=True):
    """Persistent brand guideline.

    Table: brand_guidelines
    """

    __tablename__ = "brand_guidelines"
    __table_args__ = ({"extend_existing": True},)

    id: str = Field(default_factory=new_id, primary_key=True, max_length=64)
    user_id: str = Field(max_length=64, index=True)
    name: str = Field(max_length=256)

    colors: Dict[str, Any] = Field(default_factory=dict, sa_type=JSON)
    typography: Dict[str, Any] = Field(default_factory=dict, sa_type=JSON)
    logo_specs: Dict[str, Any] = Field(default_factory=dict, sa_type=JSON)
    spacing: Dict[str, Any] = Field(default_factory=dict, sa_type=JSON)

    created_at: datetime = Field(default_factory=utc_now, sa_type=DateTime(timezone=True))
    updated_at: datetime = Field(default_factory=utc_now, sa_type=DateTime(timezone=True), index=True)

    def brand_data(self) -> Dict[str, Any]:
        """The guideline sections as reported inside a brand check result."""
        return {
            "brandName": self.name,
            "colors": self.colors,
            "typography": self.typography,
            "logo": self.logo_specs,
            "spacing": self.spacing,
        }

    def __repr__(self) -> str:
        return f"BrandGuideline(id={self.id}, name={self.name})"
