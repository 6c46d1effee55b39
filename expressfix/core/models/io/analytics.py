"""
User analytics I/O models.

The dashboard summary: lifetime counts, today's counts against the daily goals,
and the most recent uploads and analyses, each analysis with its upload.
"""

from __future__ import annotations

from typing import List

from .analysis import AnalysisHistoryItem
from .common import CamelModel
from .uploads import DesignUploadRead


class AnalyticsStats(CamelModel):
    total_uploads: int
    total_analysis: int
    total_exports: int
    average_score: int
    today_uploads: int
    today_analysis: int


class RecentActivity(CamelModel):
    uploads: List[DesignUploadRead]
    analysis: List[AnalysisHistoryItem]


class ProgressToday(CamelModel):
    uploads_goal: int
    analysis_goal: int
    uploads_completed: int
    analysis_completed: int


class AnalyticsResponse(CamelModel):
    stats: AnalyticsStats
    recent_activity: RecentActivity
    progress_today: ProgressToday
