"""
Profile Endpoints.

The caller's own profile only; a profile is created from the auth metadata the
first time it is requested.
"""

from __future__ import annotations

from fastapi import APIRouter

from expressfix.core.database.entities.profiles import Profile
from expressfix.core.database.repositories import ProfileRepository
from expressfix.core.logging_config import get_logger
from expressfix.core.models.io import AuthUser, ProfileRead, ProfileUpdate
from expressfix.server.services.deps import CurrentUserDep, SessionDep

logger = get_logger(__name__)

router = APIRouter()


async def _get_or_create(repo: ProfileRepository, user: AuthUser) -> Profile:
    profile = await repo.get_by_id(user.id)
    if profile is None:
        profile = await repo.create(Profile(id=user.id, email=user.email or "", full_name=user.full_name))
        logger.info(f"Profile created on first access for user {user.id}")
    return profile


@router.get(
    "/me",
    response_model=ProfileRead,
    summary="Get My Profile",
    description="Retrieve the caller's profile, creating it from auth metadata on first access.",
)
async def get_my_profile(user: CurrentUserDep, session: SessionDep) -> ProfileRead:
    profile = await _get_or_create(ProfileRepository(session), user)
    return ProfileRead.model_validate(profile)


@router.patch(
    "/me",
    response_model=ProfileRead,
    summary="Update My Profile",
    description="Partially update the caller's display name or avatar.",
)
async def update_my_profile(body: ProfileUpdate, user: CurrentUserDep, session: SessionDep) -> ProfileRead:
    """
    Update the caller's profile.

    Only the fields present in the request body are changed.

    - **fullName**: Display name.
    - **avatarUrl**: Avatar image URL.
    """
    repo = ProfileRepository(session)
    profile = await _get_or_create(repo, user)
    profile = await repo.apply_update(profile, body.model_dump(exclude_unset=True))
    return ProfileRead.model_validate(profile)
