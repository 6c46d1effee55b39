"""Domain enums shared by entities, I/O schemas and services."""

from __future__ import annotations

from enum import Enum


class AnalysisType(str, Enum):
    """
    The review tools a design can be analysed with.

    ``enhancement`` is recorded by the enhancement flow and cannot be requested
    through the analysis endpoint.
    """

    smart_fix = "smart_fix"
    brand_check = "brand_check"
    typography = "typography"
    ai_suggestions = "ai_suggestions"
    enhancement = "enhancement"


REQUESTABLE_ANALYSIS_TYPES = (
    AnalysisType.smart_fix,
    AnalysisType.brand_check,
    AnalysisType.typography,
    AnalysisType.ai_suggestions,
)


class UploadType(str, Enum):
    """Well-known upload categories; clients may send other free-form values."""

    design = "design"
    brand_guidelines = "brand_guidelines"
    enhanced = "enhanced"


class ExportFormat(str, Enum):
    PNG = "PNG"
    JPG = "JPG"
    PDF = "PDF"
    SVG = "SVG"


class ExportQuality(str, Enum):
    high = "high"
    medium = "medium"
    low = "low"


class EnhancementLevel(str, Enum):
    subtle = "subtle"
    moderate = "moderate"
    aggressive = "aggressive"


class NotificationType(str, Enum):
    success = "success"
    warning = "warning"
    info = "info"
    error = "error"


class NotificationAction(str, Enum):
    """Actions accepted by the notification update endpoint."""

    mark_read = "mark_read"
    mark_all_read = "mark_all_read"
