"""
Export history repository.
"""

from __future__ import annotations

from typing import List, Optional

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from ..entities.export_history import ExportHistory
from .base import AsyncBaseRepository


class ExportHistoryRepository(AsyncBaseRepository[ExportHistory]):
    """Repository for export history data access operations."""

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session, ExportHistory)

    async def get_for_user(self, export_id: str, user_id: str) -> Optional[ExportHistory]:
        """Get an export record only if it belongs to ``user_id``."""
        stmt = select(ExportHistory).where(ExportHistory.id == export_id, ExportHistory.user_id == user_id)
        result = await self.session.execute(stmt)
        return result.scalars().first()

    async def list_for_user(self, user_id: str, limit: Optional[int] = None) -> List[ExportHistory]:
        """A user's exports newest first."""
        stmt = select(ExportHistory).where(ExportHistory.user_id == user_id).order_by(ExportHistory.created_at.desc())
        if limit is not None:
            stmt = stmt.limit(limit)
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def count_for_user(self, user_id: str) -> int:
        """Count a user's exports."""
        stmt = select(func.count()).select_from(ExportHistory).where(ExportHistory.user_id == user_id)
        result = await self.session.execute(stmt)
        return int(result.scalar_one())
