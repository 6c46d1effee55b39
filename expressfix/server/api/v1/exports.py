"""
Export Endpoints.

Exports are recorded with the public URL the file is served from and a size
estimate. ``/exports/{id}/preview`` renders the branded preview canvas in the
export's format.
"""

from __future__ import annotations

import time
from typing import Annotated, List, Optional

from fastapi import APIRouter, HTTPException, Query, Response, status

from expressfix.core.database.entities.export_history import ExportHistory
from expressfix.core.database.repositories import DesignUploadRepository, ExportHistoryRepository
from expressfix.core.logging_config import get_logger
from expressfix.core.models.domain import ExportFormat, ExportQuality
from expressfix.core.models.io import ExportHistoryRead, ExportRequest, ExportResponse
from expressfix.core.monitoring import log_export_created
from expressfix.server.api.v1.uploads import get_owned_upload
from expressfix.server.core.config import settings
from expressfix.server.services.deps import CurrentUserDep, SessionDep, StorageClientDep
from expressfix.server.services.exports import (
    estimate_export_size,
    export_file_name,
    export_object_path,
    render_preview,
)
from expressfix.server.services.notifications import NotificationService

logger = get_logger(__name__)

router = APIRouter()


@router.post(
    "",
    response_model=ExportResponse,
    summary="Export Design",
    description="Record an export and return its download URL and estimated size.",
    response_description="Export id, public download URL, file name and size estimate.",
    responses={
        200: {"description": "Export recorded"},
        401: {"description": "Missing or rejected token"},
        404: {"description": "Upload not found"},
        422: {"description": "Unsupported format or quality"},
    },
)
async def export_design(
    body: ExportRequest, user: CurrentUserDep, session: SessionDep, storage: StorageClientDep
) -> ExportResponse:
    """
    Export a design.

    - **uploadId**: Optional upload the export is derived from; must belong to the caller.
    - **format**: ``PNG``, ``JPG``, ``PDF`` or ``SVG``.
    - **quality**: ``high``, ``medium`` or ``low``.
    - **width**, **height**: Optional canvas size used by the preview.
    """
    if body.upload_id:
        await get_owned_upload(DesignUploadRepository(session), body.upload_id, user.id)

    file_name = export_file_name(body.format.value, int(time.time() * 1000))
    download_url = storage.public_url(settings.storage_export_bucket, export_object_path(user.id, file_name))

    record = await ExportHistoryRepository(session).create(
        ExportHistory(
            user_id=user.id,
            design_upload_id=body.upload_id,
            export_format=body.format.value,
            export_quality=body.quality.value,
            file_url=download_url,
            width=body.width,
            height=body.height,
        )
    )
    log_export_created(record.id, record.export_format, record.export_quality)
    await NotificationService(session).export_ready(user.id, file_name)

    return ExportResponse(
        export_id=record.id,
        download_url=download_url,
        file_name=file_name,
        format=body.format,
        quality=body.quality,
        estimated_size=estimate_export_size(body.format.value, body.quality.value),
    )


@router.get(
    "",
    response_model=List[ExportHistoryRead],
    summary="Export History",
    description="The caller's exports, newest first.",
)
async def list_exports(
    user: CurrentUserDep,
    session: SessionDep,
    limit: Annotated[Optional[int], Query(ge=1, le=500)] = None,
) -> List[ExportHistoryRead]:
    records = await ExportHistoryRepository(session).list_for_user(user.id, limit=limit)
    return [ExportHistoryRead.model_validate(r) for r in records]


@router.get(
    "/{export_id}/preview",
    summary="Export Preview",
    description="Render the branded preview canvas in the export's format and size.",
    response_description="The rendered file.",
    responses={
        200: {
            "content": {"image/png": {}, "image/jpeg": {}, "application/pdf": {}, "image/svg+xml": {}},
            "description": "Rendered preview",
        },
        404: {"description": "Export not found"},
    },
    response_class=Response,
)
async def export_preview(export_id: str, user: CurrentUserDep, session: SessionDep) -> Response:
    record = await ExportHistoryRepository(session).get_for_user(export_id, user.id)
    if record is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Export not found")

    content, media_type = render_preview(
        ExportFormat(record.export_format), ExportQuality(record.export_quality), record.width, record.height
    )
    file_name = record.file_url.rsplit("/", 1)[-1] if record.file_url else f"{record.id}.{record.export_format.lower()}"
    return Response(
        content=content,
        media_type=media_type,
        headers={"Content-Disposition": f'inline; filename="{file_name}"'},
    )
