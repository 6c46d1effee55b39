"""
Design upload repository.

Data access for uploaded designs. Every lookup is scoped to the owning user so
a row belonging to someone else behaves exactly like a missing row.
"""

from __future__ import annotations

from datetime import datetime
from typing import List, Optional

from sqlalchemy import delete, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from ..entities.analysis_results import AIAnalysisResult
from ..entities.design_uploads import DesignUpload
from .base import AsyncBaseRepository


class DesignUploadRepository(AsyncBaseRepository[DesignUpload]):
    """Repository for design upload data access operations."""

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session, DesignUpload)

    async def get_for_user(self, upload_id: str, user_id: str) -> Optional[DesignUpload]:
        """Get an upload only if it belongs to ``user_id``.

        Args:
            upload_id: Upload identifier
            user_id: Owner identifier

        Returns:
            DesignUpload instance or None
        """
        stmt = select(DesignUpload).where(DesignUpload.id == upload_id, DesignUpload.user_id == user_id)
        result = await self.session.execute(stmt)
        return result.scalars().first()

    async def list_for_user(
        self, user_id: str, upload_type: Optional[str] = None, limit: Optional[int] = None
    ) -> List[DesignUpload]:
        """List a user's uploads newest first, optionally of one upload type."""
        stmt = select(DesignUpload).where(DesignUpload.user_id == user_id)
        if upload_type:
            stmt = stmt.where(DesignUpload.upload_type == upload_type)
        stmt = stmt.order_by(DesignUpload.created_at.desc())
        if limit is not None:
            stmt = stmt.limit(limit)
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def count_for_user(
        self, user_id: str, since: Optional[datetime] = None, until: Optional[datetime] = None
    ) -> int:
        """Count a user's uploads, optionally within ``[since, until)``."""
        stmt = select(func.count()).select_from(DesignUpload).where(DesignUpload.user_id == user_id)
        if since is not None:
            stmt = stmt.where(DesignUpload.created_at >= since)
        if until is not None:
            stmt = stmt.where(DesignUpload.created_at < until)
        result = await self.session.execute(stmt)
        return int(result.scalar_one())

    async def delete_for_user(self, upload_id: str, user_id: str) -> bool:
        """Delete an owned upload together with its analysis results.

        Returns:
            True if deleted, False if not found for this user
        """
        upload = await self.get_for_user(upload_id, user_id)
        if upload is None:
            return False
        await self.session.execute(delete(AIAnalysisResult).where(AIAnalysisResult.design_upload_id == upload_id))
        await self.session.delete(upload)
        await self.session.commit()
        return True
