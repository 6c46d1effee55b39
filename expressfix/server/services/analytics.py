"""
User analytics service.

Aggregates the dashboard numbers for one user. "Today" is the current UTC
calendar day; the average score covers only the most recent analyses.
"""

from __future__ import annotations

from datetime import datetime, time, timedelta, timezone
from typing import Optional, Tuple

from sqlalchemy.ext.asyncio import AsyncSession

from expressfix.core.database.base import utc_now
from expressfix.core.database.repositories import (
    AnalysisResultRepository,
    DesignUploadRepository,
    ExportHistoryRepository,
)
from expressfix.core.models.io import (
    AnalysisHistoryItem,
    AnalyticsResponse,
    AnalyticsStats,
    DesignUploadRead,
    ProgressToday,
    RecentActivity,
)
from expressfix.server.core import constant


def utc_day_bounds(now: datetime) -> Tuple[datetime, datetime]:
    """Start (inclusive) and end (exclusive) of the UTC day containing ``now``."""
    day = now.astimezone(timezone.utc).date()
    start = datetime.combine(day, time.min, tzinfo=timezone.utc)
    return start, start + timedelta(days=1)


def average_score(scores: list[int]) -> int:
    """Rounded mean, 0 for no scores. Halves round up."""
    if not scores:
        return 0
    return int(sum(scores) / len(scores) + 0.5)


class AnalyticsService:
    """Computes the analytics summary of a user."""

    def __init__(self, session: AsyncSession):
        self.uploads = DesignUploadRepository(session)
        self.analyses = AnalysisResultRepository(session)
        self.exports = ExportHistoryRepository(session)

    async def summary(self, user_id: str, now: Optional[datetime] = None) -> AnalyticsResponse:
        start, end = utc_day_bounds(now or utc_now())
        limit = constant.RECENT_ACTIVITY_LIMIT

        total_uploads = await self.uploads.count_for_user(user_id)
        total_analysis = await self.analyses.count_for_user(user_id)
        total_exports = await self.exports.count_for_user(user_id)
        today_uploads = await self.uploads.count_for_user(user_id, since=start, until=end)
        today_analysis = await self.analyses.count_for_user(user_id, since=start, until=end)

        recent_uploads = await self.uploads.list_for_user(user_id, limit=limit)
        recent_analysis = await self.analyses.list_for_user(user_id, limit=limit)

        return AnalyticsResponse(
            stats=AnalyticsStats(
                total_uploads=total_uploads,
                total_analysis=total_analysis,
                total_exports=total_exports,
                average_score=average_score([analysis.overall_score for analysis, _ in recent_analysis]),
                today_uploads=today_uploads,
                today_analysis=today_analysis,
            ),
            recent_activity=RecentActivity(
                uploads=[DesignUploadRead.model_validate(u) for u in recent_uploads],
                analysis=[AnalysisHistoryItem.from_row(analysis, upload) for analysis, upload in recent_analysis],
            ),
            progress_today=ProgressToday(
                uploads_goal=constant.DAILY_UPLOADS_GOAL,
                analysis_goal=constant.DAILY_ANALYSIS_GOAL,
                uploads_completed=today_uploads,
                analysis_completed=today_analysis,
            ),
        )
