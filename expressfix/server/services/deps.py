"""
API Dependencies.

Annotated dependency aliases shared by the v1 routers: the database session,
the external service clients and the authenticated caller.
"""

from typing import Annotated, Optional

from fastapi import Depends, Header, HTTPException, status
from sqlalchemy.ext.asyncio import AsyncSession

from expressfix.core.database import get_session
from expressfix.core.errors import AuthServiceError, InvalidTokenError
from expressfix.core.logging_config import get_logger
from expressfix.core.models.io.auth import AuthUser
from expressfix.server.services.auth import AuthClient, get_auth_client
from expressfix.server.services.storage import StorageClient, get_storage_client

logger = get_logger(__name__)

SessionDep = Annotated[AsyncSession, Depends(get_session)]
AuthClientDep = Annotated[AuthClient, Depends(get_auth_client)]
StorageClientDep = Annotated[StorageClient, Depends(get_storage_client)]


def bearer_token(authorization: Optional[str]) -> Optional[str]:
    """Extract the token of an ``Authorization`` header value."""
    if not authorization:
        return None
    scheme, _, token = authorization.partition(" ")
    if scheme.lower() == "bearer":
        return token.strip() or None
    return authorization.strip() or None


async def get_access_token(authorization: Annotated[Optional[str], Header()] = None) -> str:
    """The caller's bearer token; 401 when the header is missing."""
    token = bearer_token(authorization)
    if token is None:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="No authorization header")
    return token


AccessTokenDep = Annotated[str, Depends(get_access_token)]


async def get_current_user(token: AccessTokenDep, auth_client: AuthClientDep) -> AuthUser:
    """
    Resolve the caller through the auth service.

    A rejected token is a 401; an unreachable auth service is a 503 so clients
    can tell an outage from a bad session.
    """
    try:
        return await auth_client.get_user(token)
    except InvalidTokenError:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Unauthorized")
    except AuthServiceError as e:
        logger.error(f"Auth service failed while resolving user: {e}")
        raise HTTPException(status_code=status.HTTP_503_SERVICE_UNAVAILABLE, detail="Auth service unavailable")


CurrentUserDep = Annotated[AuthUser, Depends(get_current_user)]
