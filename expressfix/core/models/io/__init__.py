"""
I/O models for API requests and responses.

This package contains Pydantic-based I/O schemas that define the contract
between API endpoints and clients. These models are separate from database
entities to allow independent evolution of API contracts.

Request bodies and computed summaries use camelCase keys; ``*Read`` schemas
mirror table rows and keep their snake_case column names.
"""

from .analysis import AnalysisHistoryItem, AnalysisRequest, AnalysisResponse, AnalysisResultRead
from .analytics import AnalyticsResponse, AnalyticsStats, ProgressToday, RecentActivity
from .auth import AuthUser, SignInRequest, SignUpRequest
from .brand_guidelines import BrandGuidelineCreate, BrandGuidelineRead, BrandGuidelineUpdate
from .common import CamelModel, SuccessResponse
from .enhancements import EnhancementRequest, EnhancementResponse, EnhancementSettings
from .exports import ExportHistoryRead, ExportRequest, ExportResponse
from .notifications import NotificationCreate, NotificationRead
from .profiles import ProfileRead, ProfileUpdate
from .uploads import DesignUploadRead, UploadCreate, UploadCreated

__all__ = [
    "AnalysisHistoryItem",
    "AnalysisRequest",
    "AnalysisResponse",
    "AnalysisResultRead",
    "AnalyticsResponse",
    "AnalyticsStats",
    "AuthUser",
    "BrandGuidelineCreate",
    "BrandGuidelineRead",
    "BrandGuidelineUpdate",
    "CamelModel",
    "DesignUploadRead",
    "EnhancementRequest",
    "EnhancementResponse",
    "EnhancementSettings",
    "ExportHistoryRead",
    "ExportRequest",
    "ExportResponse",
    "NotificationCreate",
    "NotificationRead",
    "ProfileRead",
    "ProfileUpdate",
    "ProgressToday",
    "RecentActivity",
    "SignInRequest",
    "SignUpRequest",
    "SuccessResponse",
    "UploadCreate",
    "UploadCreated",
]
