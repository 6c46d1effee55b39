"""
AI Enhancement Endpoints.

An enhancement produces a new ``enhanced`` upload next to the original and an
``enhancement`` analysis result describing the simulated improvements.
"""

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends

from expressfix.core.database.entities.analysis_results import AIAnalysisResult
from expressfix.core.database.entities.design_uploads import DesignUpload
from expressfix.core.database.repositories import AnalysisResultRepository, DesignUploadRepository
from expressfix.core.logging_config import get_logger
from expressfix.core.models.domain import AnalysisType, UploadType
from expressfix.core.models.io import EnhancementRequest, EnhancementResponse
from expressfix.core.monitoring import log_analysis_completed
from expressfix.server.api.v1.uploads import get_owned_upload
from expressfix.server.core.config import settings
from expressfix.server.services.deps import CurrentUserDep, SessionDep
from expressfix.server.services.enhancement import EnhancementSimulator, wait_processing_time

logger = get_logger(__name__)

router = APIRouter()


def get_simulator() -> EnhancementSimulator:
    return EnhancementSimulator()


SimulatorDep = Annotated[EnhancementSimulator, Depends(get_simulator)]


@router.post(
    "",
    response_model=EnhancementResponse,
    summary="Enhance Design",
    description="Apply simulated AI improvements to an upload, producing an enhanced copy.",
    response_description="Ids of the enhancement record and the enhanced upload, plus the improvement report.",
    responses={
        200: {"description": "Enhanced upload created"},
        401: {"description": "Missing or rejected token"},
        404: {"description": "Upload not found"},
    },
)
async def enhance_design(
    body: EnhancementRequest, user: CurrentUserDep, session: SessionDep, simulator: SimulatorDep
) -> EnhancementResponse:
    """
    Enhance a design.

    - **uploadId**: Upload to enhance; must belong to the caller.
    - **enhancements**: Improvements to apply, echoed in the report.
    - **settings**: Optional ``preserveOriginal`` and ``enhancementLevel``.
    """
    uploads = DesignUploadRepository(session)
    original = await get_owned_upload(uploads, body.upload_id, user.id)

    results = simulator.simulate(original.file_url, body.enhancements)
    if settings.simulated_latency:
        await wait_processing_time(results)

    enhanced = await uploads.create(
        DesignUpload(
            user_id=user.id,
            file_name=f"enhanced_{original.file_name}",
            file_url=results["enhancedFile"],
            file_size=original.file_size,
            file_type=original.file_type,
            upload_type=UploadType.enhanced.value,
        )
    )

    score_after = results["beforeAfterComparison"]["overallScore"]["after"]
    record = await AnalysisResultRepository(session).create(
        AIAnalysisResult(
            design_upload_id=enhanced.id,
            analysis_type=AnalysisType.enhancement.value,
            overall_score=score_after,
            results={
                "originalUploadId": original.id,
                "enhancements": results,
                "settings": body.settings.model_dump(mode="json", by_alias=True, exclude_none=True)
                if body.settings
                else None,
            },
            suggestions=[f"Enhanced with {len(body.enhancements)} AI improvements"],
        )
    )
    log_analysis_completed(record.id, enhanced.id, AnalysisType.enhancement.value, score_after)
    logger.info(f"Upload {original.id} enhanced into {enhanced.id} for user {user.id}")

    return EnhancementResponse(
        enhancement_id=record.id,
        enhanced_upload_id=enhanced.id,
        enhanced_file_url=enhanced.file_url,
        results=results,
        download_ready=True,
    )
