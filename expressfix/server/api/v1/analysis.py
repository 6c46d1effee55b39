"""
Design Analysis Endpoints.

Runs one of the four review tools against an owned upload, stores the result
and notifies the user.
"""

from __future__ import annotations

from typing import Annotated, List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query, status

from expressfix.core.database.entities.analysis_results import AIAnalysisResult
from expressfix.core.database.entities.brand_guidelines import BrandGuideline
from expressfix.core.database.repositories import (
    AnalysisResultRepository,
    BrandGuidelineRepository,
    DesignUploadRepository,
)
from expressfix.core.logging_config import get_logger
from expressfix.core.models.domain import REQUESTABLE_ANALYSIS_TYPES, AnalysisType
from expressfix.core.models.io import (
    AnalysisHistoryItem,
    AnalysisRequest,
    AnalysisResponse,
)
from expressfix.core.monitoring import log_analysis_completed
from expressfix.server.api.v1.uploads import get_owned_upload
from expressfix.server.services.analysis_engine import DesignAnalyzer
from expressfix.server.services.deps import CurrentUserDep, SessionDep
from expressfix.server.services.notifications import NotificationService

logger = get_logger(__name__)

router = APIRouter()


def get_analyzer() -> DesignAnalyzer:
    return DesignAnalyzer()


AnalyzerDep = Annotated[DesignAnalyzer, Depends(get_analyzer)]


def parse_analysis_type(value: str) -> AnalysisType:
    """Accept only the review tools a client may request."""
    try:
        analysis_type = AnalysisType(value)
    except ValueError:
        analysis_type = None
    if analysis_type not in REQUESTABLE_ANALYSIS_TYPES:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Invalid analysis type")
    return analysis_type


@router.post(
    "",
    response_model=AnalysisResponse,
    summary="Analyze Design",
    description="Run a review tool against one of the caller's uploads and store the result.",
    response_description="The stored analysis id, overall score, detailed results and suggestions.",
    responses={
        200: {"description": "Analysis stored"},
        400: {"description": "Invalid analysis type"},
        401: {"description": "Missing or rejected token"},
        404: {"description": "Upload or brand guideline not found"},
    },
)
async def analyze_design(
    body: AnalysisRequest, user: CurrentUserDep, session: SessionDep, analyzer: AnalyzerDep
) -> AnalysisResponse:
    """
    Analyze a design.

    - **uploadId**: Upload to analyse; must belong to the caller.
    - **analysisType**: ``smart_fix``, ``brand_check``, ``typography`` or ``ai_suggestions``.
    - **guidelineId**: Optional brand guideline embedded in a ``brand_check`` result.
    """
    analysis_type = parse_analysis_type(body.analysis_type)
    upload = await get_owned_upload(DesignUploadRepository(session), body.upload_id, user.id)

    guideline: Optional[BrandGuideline] = None
    if body.guideline_id and analysis_type == AnalysisType.brand_check:
        guideline = await BrandGuidelineRepository(session).get_for_user(body.guideline_id, user.id)
        if guideline is None:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Brand guideline not found")

    outcome = analyzer.analyze(analysis_type, guideline)
    analysis = await AnalysisResultRepository(session).create(
        AIAnalysisResult(
            design_upload_id=upload.id,
            analysis_type=analysis_type.value,
            overall_score=outcome.overall_score,
            results=outcome.results,
            suggestions=outcome.suggestions,
        )
    )
    log_analysis_completed(analysis.id, upload.id, analysis_type.value, outcome.overall_score)
    await NotificationService(session).analysis_completed(user.id, upload.file_name, len(outcome.suggestions))

    return AnalysisResponse(
        analysis_id=analysis.id,
        overall_score=outcome.overall_score,
        results=outcome.results,
        suggestions=outcome.suggestions,
        analysis_type=analysis_type.value,
    )


@router.get(
    "/history",
    response_model=List[AnalysisHistoryItem],
    summary="Analysis History",
    description="The caller's analysis results, newest first, each with the upload it was run on.",
)
async def analysis_history(
    user: CurrentUserDep,
    session: SessionDep,
    limit: Annotated[Optional[int], Query(ge=1, le=500)] = None,
) -> List[AnalysisHistoryItem]:
    rows = await AnalysisResultRepository(session).list_for_user(user.id, limit=limit)
    return [AnalysisHistoryItem.from_row(analysis, upload) for analysis, upload in rows]
