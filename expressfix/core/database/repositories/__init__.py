"""
Database repository layer.

Each module provides async, owner-scoped data access for its SQLModel entity,
built on ``AsyncBaseRepository`` from ``base``.
"""

from .analysis_results import AnalysisResultRepository
from .base import AsyncBaseRepository
from .brand_guidelines import BrandGuidelineRepository
from .design_uploads import DesignUploadRepository
from .export_history import ExportHistoryRepository
from .notifications import NotificationRepository
from .profiles import ProfileRepository

__all__ = [
    "AnalysisResultRepository",
    "AsyncBaseRepository",
    "BrandGuidelineRepository",
    "DesignUploadRepository",
    "ExportHistoryRepository",
    "NotificationRepository",
    "ProfileRepository",
]
