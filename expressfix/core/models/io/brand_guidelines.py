"""
Brand guideline I/O models.

The four JSON sections are free-form objects; the Brand Checker only echoes
them back inside its results.
"""

from __future__ import annotations

from datetime import datetime
from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field

from .common import CamelModel


class BrandGuidelineCreate(CamelModel):
    """Schema for creating a brand guideline."""

    name: str = Field(min_length=1, max_length=256, description="Guideline name")
    colors: Dict[str, Any] = Field(default_factory=dict)
    typography: Dict[str, Any] = Field(default_factory=dict)
    logo_specs: Dict[str, Any] = Field(default_factory=dict)
    spacing: Dict[str, Any] = Field(default_factory=dict)


class BrandGuidelineUpdate(CamelModel):
    """Schema for a partial brand guideline update."""

    name: Optional[str] = Field(default=None, min_length=1, max_length=256)
    colors: Optional[Dict[str, Any]] = None
    typography: Optional[Dict[str, Any]] = None
    logo_specs: Optional[Dict[str, Any]] = None
    spacing: Optional[Dict[str, Any]] = None


class BrandGuidelineRead(BaseModel):
    """Schema for reading a brand guideline row."""

    model_config = ConfigDict(from_attributes=True)

    id: str
    user_id: str
    name: str
    colors: Dict[str, Any]
    typography: Dict[str, Any]
    logo_specs: Dict[str, Any]
    spacing: Dict[str, Any]
    created_at: datetime
    updated_at: datetime
