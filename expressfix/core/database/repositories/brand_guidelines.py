"""
Brand guideline repository.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from ..base import utc_now
from ..entities.brand_guidelines import BrandGuideline
from .base import AsyncBaseRepository


class BrandGuidelineRepository(AsyncBaseRepository[BrandGuideline]):
    """Repository for brand guideline data access operations."""

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session, BrandGuideline)

    async def get_for_user(self, guideline_id: str, user_id: str) -> Optional[BrandGuideline]:
        """Get a guideline only if it belongs to ``user_id``."""
        stmt = select(BrandGuideline).where(BrandGuideline.id == guideline_id, BrandGuideline.user_id == user_id)
        result = await self.session.execute(stmt)
        return result.scalars().first()

    async def list_for_user(self, user_id: str) -> List[BrandGuideline]:
        """A user's guidelines, most recently updated first."""
        stmt = (
            select(BrandGuideline)
            .where(BrandGuideline.user_id == user_id)
            .order_by(BrandGuideline.updated_at.desc())
        )
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def apply_update(self, guideline: BrandGuideline, changes: Dict[str, Any]) -> BrandGuideline:
        """Apply a partial update and bump ``updated_at``.

        Args:
            guideline: Loaded, owned guideline
            changes: Column values to overwrite

        Returns:
            The refreshed guideline
        """
        for key, value in changes.items():
            setattr(guideline, key, value)
        guideline.updated_at = utc_now()
        return await self.update(guideline)
