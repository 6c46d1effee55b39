"""
User Analytics Endpoint.

Dashboard summary of the caller's activity.
"""

from __future__ import annotations

from fastapi import APIRouter

from expressfix.core.models.io import AnalyticsResponse
from expressfix.server.services.analytics import AnalyticsService
from expressfix.server.services.deps import CurrentUserDep, SessionDep

router = APIRouter()


@router.get(
    "",
    response_model=AnalyticsResponse,
    summary="User Analytics",
    description="Lifetime totals, today's progress against the daily goals and the most recent activity.",
    response_description="Stats, recent activity and today's progress.",
)
async def user_analytics(user: CurrentUserDep, session: SessionDep) -> AnalyticsResponse:
    """
    Get the caller's analytics.

    ``averageScore`` is the rounded mean of the five most recent analyses.
    "Today" is the current UTC calendar day.
    """
    return await AnalyticsService(session).summary(user.id)
