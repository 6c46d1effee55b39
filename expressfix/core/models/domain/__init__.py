"""Domain-level enums for ExpressFix."""

from .enums import (
    REQUESTABLE_ANALYSIS_TYPES,
    AnalysisType,
    EnhancementLevel,
    ExportFormat,
    ExportQuality,
    NotificationAction,
    NotificationType,
    UploadType,
)

__all__ = [
    "REQUESTABLE_ANALYSIS_TYPES",
    "AnalysisType",
    "EnhancementLevel",
    "ExportFormat",
    "ExportQuality",
    "NotificationAction",
    "NotificationType",
    "UploadType",
]
