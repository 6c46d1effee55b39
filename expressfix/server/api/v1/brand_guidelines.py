"""
Brand Guideline Endpoints.

CRUD over the caller's brand guidelines. Besides the path form
(``/brand-guidelines/{id}``) the collection path accepts ``?id=`` for GET, PUT
and DELETE, as older clients address guidelines that way.
"""

from __future__ import annotations

from typing import List, Optional, Union

from fastapi import APIRouter, HTTPException, status

from expressfix.core.database.entities.brand_guidelines import BrandGuideline
from expressfix.core.database.repositories import BrandGuidelineRepository
from expressfix.core.logging_config import get_logger
from expressfix.core.models.io import (
    BrandGuidelineCreate,
    BrandGuidelineRead,
    BrandGuidelineUpdate,
    SuccessResponse,
)
from expressfix.server.services.deps import CurrentUserDep, SessionDep

logger = get_logger(__name__)

router = APIRouter()


async def _get_owned(repo: BrandGuidelineRepository, guideline_id: str, user_id: str) -> BrandGuideline:
    guideline = await repo.get_for_user(guideline_id, user_id)
    if guideline is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Brand guideline not found")
    return guideline


async def _update(session, guideline_id: str, body: BrandGuidelineUpdate, user_id: str) -> BrandGuidelineRead:
    repo = BrandGuidelineRepository(session)
    guideline = await _get_owned(repo, guideline_id, user_id)
    guideline = await repo.apply_update(guideline, body.model_dump(exclude_unset=True, exclude_none=True))
    logger.info(f"Brand guideline {guideline_id} updated by user {user_id}")
    return BrandGuidelineRead.model_validate(guideline)


async def _delete(session, guideline_id: str, user_id: str) -> SuccessResponse:
    repo = BrandGuidelineRepository(session)
    guideline = await _get_owned(repo, guideline_id, user_id)
    await repo.delete(guideline)
    logger.info(f"Brand guideline {guideline_id} deleted by user {user_id}")
    return SuccessResponse()


@router.get(
    "",
    response_model=Union[List[BrandGuidelineRead], BrandGuidelineRead],
    summary="List Brand Guidelines",
    description="List the caller's guidelines, most recently updated first, or fetch one with ``?id=``.",
    responses={404: {"description": "Brand guideline not found"}},
)
async def list_brand_guidelines(user: CurrentUserDep, session: SessionDep, id: Optional[str] = None):
    repo = BrandGuidelineRepository(session)
    if id:
        return BrandGuidelineRead.model_validate(await _get_owned(repo, id, user.id))
    return [BrandGuidelineRead.model_validate(g) for g in await repo.list_for_user(user.id)]


@router.post(
    "",
    response_model=BrandGuidelineRead,
    status_code=status.HTTP_201_CREATED,
    summary="Create Brand Guideline",
    description="Store a new brand guideline for the caller.",
)
async def create_brand_guideline(
    body: BrandGuidelineCreate, user: CurrentUserDep, session: SessionDep
) -> BrandGuidelineRead:
    """
    Create a brand guideline.

    - **name**: Guideline name (required).
    - **colors**, **typography**, **logoSpecs**, **spacing**: Free-form JSON objects, default ``{}``.
    """
    guideline = await BrandGuidelineRepository(session).create(
        BrandGuideline(user_id=user.id, **body.model_dump())
    )
    logger.info(f"Brand guideline {guideline.id} created by user {user.id}")
    return BrandGuidelineRead.model_validate(guideline)


@router.put(
    "",
    response_model=BrandGuidelineRead,
    summary="Update Brand Guideline (query id)",
    responses={400: {"description": "Guideline ID required for update"}, 404: {"description": "Not found"}},
)
async def update_brand_guideline_by_query(
    body: BrandGuidelineUpdate, user: CurrentUserDep, session: SessionDep, id: Optional[str] = None
) -> BrandGuidelineRead:
    if not id:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Guideline ID required for update")
    return await _update(session, id, body, user.id)


@router.delete(
    "",
    response_model=SuccessResponse,
    summary="Delete Brand Guideline (query id)",
    responses={400: {"description": "Guideline ID required for deletion"}, 404: {"description": "Not found"}},
)
async def delete_brand_guideline_by_query(
    user: CurrentUserDep, session: SessionDep, id: Optional[str] = None
) -> SuccessResponse:
    if not id:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Guideline ID required for deletion")
    return await _delete(session, id, user.id)


@router.get(
    "/{guideline_id}",
    response_model=BrandGuidelineRead,
    summary="Get Brand Guideline",
    responses={404: {"description": "Brand guideline not found"}},
)
async def get_brand_guideline(guideline_id: str, user: CurrentUserDep, session: SessionDep) -> BrandGuidelineRead:
    guideline = await _get_owned(BrandGuidelineRepository(session), guideline_id, user.id)
    return BrandGuidelineRead.model_validate(guideline)


@router.put(
    "/{guideline_id}",
    response_model=BrandGuidelineRead,
    summary="Update Brand Guideline",
    description="Partially update a guideline; only fields present in the body change.",
    responses={404: {"description": "Brand guideline not found"}},
)
async def update_brand_guideline(
    guideline_id: str, body: BrandGuidelineUpdate, user: CurrentUserDep, session: SessionDep
) -> BrandGuidelineRead:
    return await _update(session, guideline_id, body, user.id)


@router.delete(
    "/{guideline_id}",
    response_model=SuccessResponse,
    summary="Delete Brand Guideline",
    responses={404: {"description": "Brand guideline not found"}},
)
async def delete_brand_guideline(guideline_id: str, user: CurrentUserDep, session: SessionDep) -> SuccessResponse:
    return await _delete(session, guideline_id, user.id)
