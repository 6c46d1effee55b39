"""
Design Upload Endpoints.

Uploading is two-step: ``POST /uploads`` validates the file description,
records the upload and returns a signed storage URL; the client then sends the
bytes straight to storage.
"""

from __future__ import annotations

import re
import time
from typing import List, Optional

from fastapi import APIRouter, HTTPException, status

from expressfix.core.database.entities.design_uploads import DesignUpload
from expressfix.core.database.repositories import AnalysisResultRepository, DesignUploadRepository
from expressfix.core.logging_config import get_logger
from expressfix.core.models.io import (
    AnalysisResultRead,
    DesignUploadRead,
    SuccessResponse,
    UploadCreate,
    UploadCreated,
)
from expressfix.server.core.config import settings
from expressfix.server.services.deps import CurrentUserDep, SessionDep, StorageClientDep

logger = get_logger(__name__)

router = APIRouter()

ACCEPTED_MIME_PREFIX = "image/"
ACCEPTED_MIME_TYPES = ("application/pdf",)

# Both end up as segments of the storage object path
UPLOAD_TYPE_PATTERN = re.compile(r"[A-Za-z0-9_-]+")
FORBIDDEN_EXTENSION_PARTS = ("/", "\\", "..")


def file_extension(file_name: str) -> str:
    """Text after the last dot, or the whole name when there is none."""
    return file_name.rsplit(".", 1)[-1]


def upload_object_path(user_id: str, upload_type: str, file_name: str, epoch_ms: int) -> str:
    return f"{user_id}/{upload_type}/{epoch_ms}.{file_extension(file_name)}"


def validate_upload(body: UploadCreate, max_bytes: int) -> None:
    """Reject files the review tools cannot take."""
    file_type = body.file_type.lower()
    if not (file_type.startswith(ACCEPTED_MIME_PREFIX) or file_type in ACCEPTED_MIME_TYPES):
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Unsupported file type; upload an image or a PDF",
        )
    if body.file_size <= 0:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="File is empty")
    if body.file_size > max_bytes:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"File exceeds the maximum upload size of {max_bytes} bytes",
        )
    if not UPLOAD_TYPE_PATTERN.fullmatch(body.upload_type):
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Upload type may only contain letters, digits, underscores and hyphens",
        )
    extension = file_extension(body.file_name)
    if any(part in extension for part in FORBIDDEN_EXTENSION_PARTS):
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Invalid file extension")


async def get_owned_upload(repo: DesignUploadRepository, upload_id: str, user_id: str) -> DesignUpload:
    upload = await repo.get_for_user(upload_id, user_id)
    if upload is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Upload not found")
    return upload


@router.post(
    "",
    response_model=UploadCreated,
    status_code=status.HTTP_201_CREATED,
    summary="Create Upload",
    description="Record a design upload and return a signed URL to upload the file bytes to.",
    response_description="Signed upload URL, upload id and storage path.",
    responses={
        201: {"description": "Upload recorded"},
        400: {"description": "Unsupported file type or size"},
        401: {"description": "Missing or rejected token"},
        502: {"description": "Storage refused to sign the upload"},
    },
)
async def create_upload(
    body: UploadCreate, user: CurrentUserDep, session: SessionDep, storage: StorageClientDep
) -> UploadCreated:
    """
    Create a design upload.

    - **fileName**: Original file name; its extension is kept in the storage path.
    - **fileType**: MIME type, ``image/*`` or ``application/pdf``.
    - **fileSize**: Size in bytes.
    - **uploadType**: Category such as ``design`` or ``brand_guidelines``.
    """
    validate_upload(body, settings.max_upload_bytes)

    bucket = settings.storage_upload_bucket
    file_path = upload_object_path(user.id, body.upload_type, body.file_name, int(time.time() * 1000))
    upload_url = await storage.create_signed_upload_url(bucket, file_path)

    upload = await DesignUploadRepository(session).create(
        DesignUpload(
            user_id=user.id,
            file_name=body.file_name,
            file_url=f"{bucket}/{file_path}",
            file_size=body.file_size,
            file_type=body.file_type,
            upload_type=body.upload_type,
        )
    )
    logger.info(f"Upload {upload.id} recorded for user {user.id} at {file_path}")
    return UploadCreated(upload_url=upload_url, upload_id=upload.id, file_path=file_path)


@router.get(
    "",
    response_model=List[DesignUploadRead],
    summary="List Uploads",
    description="List the caller's uploads, newest first, optionally of one upload type.",
)
async def list_uploads(
    user: CurrentUserDep, session: SessionDep, upload_type: Optional[str] = None
) -> List[DesignUploadRead]:
    uploads = await DesignUploadRepository(session).list_for_user(user.id, upload_type=upload_type)
    return [DesignUploadRead.model_validate(u) for u in uploads]


@router.get(
    "/{upload_id}",
    response_model=DesignUploadRead,
    summary="Get Upload",
    responses={404: {"description": "Upload not found"}},
)
async def get_upload(upload_id: str, user: CurrentUserDep, session: SessionDep) -> DesignUploadRead:
    upload = await get_owned_upload(DesignUploadRepository(session), upload_id, user.id)
    return DesignUploadRead.model_validate(upload)


@router.delete(
    "/{upload_id}",
    response_model=SuccessResponse,
    summary="Delete Upload",
    description="Delete one of the caller's uploads together with its analysis results.",
    responses={404: {"description": "Upload not found"}},
)
async def delete_upload(upload_id: str, user: CurrentUserDep, session: SessionDep) -> SuccessResponse:
    deleted = await DesignUploadRepository(session).delete_for_user(upload_id, user.id)
    if not deleted:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Upload not found")
    logger.info(f"Upload {upload_id} deleted by user {user.id}")
    return SuccessResponse()


@router.get(
    "/{upload_id}/analysis",
    response_model=List[AnalysisResultRead],
    summary="List Upload Analyses",
    description="All analysis results of one upload, newest first.",
    responses={404: {"description": "Upload not found"}},
)
async def list_upload_analyses(upload_id: str, user: CurrentUserDep, session: SessionDep) -> List[AnalysisResultRead]:
    await get_owned_upload(DesignUploadRepository(session), upload_id, user.id)
    results = await AnalysisResultRepository(session).list_for_upload(upload_id)
    return [AnalysisResultRead.model_validate(r) for r in results]
