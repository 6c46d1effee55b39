"""
Authentication Endpoints.

Account management is delegated to the external auth service; these endpoints
forward requests to it and keep the local ``profiles`` table in step.
"""

from __future__ import annotations

from typing import Any, Dict

from fastapi import APIRouter, HTTPException, status

from expressfix.core.database.entities.profiles import Profile
from expressfix.core.database.repositories import ProfileRepository
from expressfix.core.errors import AuthServiceError
from expressfix.core.logging_config import get_logger
from expressfix.core.models.io import AuthUser, SignInRequest, SignUpRequest, SuccessResponse
from expressfix.server.services.deps import AccessTokenDep, AuthClientDep, CurrentUserDep, SessionDep

logger = get_logger(__name__)

router = APIRouter()


def _client_error(e: AuthServiceError) -> HTTPException:
    # 4xx from the auth service are the caller's fault (bad credentials, taken email)
    return HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))


@router.post(
    "/signup",
    status_code=status.HTTP_201_CREATED,
    summary="Sign Up",
    description="Create an account with the auth service and a matching profile.",
    response_description="The upstream user or session payload.",
    responses={
        201: {"description": "Account created"},
        400: {"description": "The auth service rejected the sign up"},
        503: {"description": "Auth service unavailable"},
    },
)
async def sign_up(body: SignUpRequest, auth_client: AuthClientDep, session: SessionDep) -> Dict[str, Any]:
    """
    Create an account.

    - **email**: Login email.
    - **password**: Account password.
    - **fullName**: Optional display name stored in the profile.
    """
    try:
        payload = await auth_client.sign_up(body.email, body.password, body.full_name)
    except AuthServiceError as e:
        if e.status_code is not None and 400 <= e.status_code < 500:
            raise _client_error(e)
        raise

    user = payload.get("user") or payload
    user_id = user.get("id") if isinstance(user, dict) else None
    if user_id:
        repo = ProfileRepository(session)
        if await repo.get_by_id(user_id) is None:
            await repo.create(Profile(id=user_id, email=body.email, full_name=body.full_name))
            logger.info(f"Profile created for new user {user_id}")
    return payload


@router.post(
    "/signin",
    summary="Sign In",
    description="Exchange email and password for a session.",
    response_description="The upstream session payload including the access token.",
    responses={
        200: {"description": "Signed in"},
        400: {"description": "Invalid credentials"},
        503: {"description": "Auth service unavailable"},
    },
)
async def sign_in(body: SignInRequest, auth_client: AuthClientDep) -> Dict[str, Any]:
    try:
        return await auth_client.sign_in(body.email, body.password)
    except AuthServiceError as e:
        if e.status_code is not None and 400 <= e.status_code < 500:
            raise _client_error(e)
        raise


@router.post(
    "/signout",
    response_model=SuccessResponse,
    summary="Sign Out",
    description="Revoke the session of the presented bearer token.",
)
async def sign_out(token: AccessTokenDep, auth_client: AuthClientDep) -> SuccessResponse:
    try:
        await auth_client.sign_out(token)
    except AuthServiceError as e:
        if e.status_code in (401, 403):
            raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Unauthorized")
        raise
    return SuccessResponse()


@router.get(
    "/me",
    response_model=AuthUser,
    summary="Current User",
    description="Return the user the bearer token belongs to.",
    responses={401: {"description": "Missing or rejected token"}},
)
async def me(user: CurrentUserDep) -> AuthUser:
    return user
