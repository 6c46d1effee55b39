"""
Profile repository.
"""

from __future__ import annotations

from typing import Any, Dict

from sqlalchemy.ext.asyncio import AsyncSession

from ..base import utc_now
from ..entities.profiles import Profile
from .base import AsyncBaseRepository


class ProfileRepository(AsyncBaseRepository[Profile]):
    """Repository for profile data access operations.

    The profile id is the auth user id, so ``get_by_id`` is already owner-scoped.
    """

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session, Profile)

    async def apply_update(self, profile: Profile, changes: Dict[str, Any]) -> Profile:
        """Apply a partial update and bump ``updated_at``."""
        for key, value in changes.items():
            setattr(profile, key, value)
        profile.updated_at = utc_now()
        return await self.update(profile)
