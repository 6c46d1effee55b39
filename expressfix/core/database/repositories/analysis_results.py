"""
Analysis result repository.

Analysis rows carry no owner column; ownership is resolved by joining the
upload they belong to.
"""

from __future__ import annotations

from datetime import datetime
from typing import List, Optional, Tuple

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from ..entities.analysis_results import AIAnalysisResult
from ..entities.design_uploads import DesignUpload
from .base import AsyncBaseRepository


class AnalysisResultRepository(AsyncBaseRepository[AIAnalysisResult]):
    """Repository for analysis result data access operations."""

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session, AIAnalysisResult)

    async def list_for_upload(self, upload_id: str) -> List[AIAnalysisResult]:
        """All results of one upload, newest first.

        Callers must check ownership of the upload first.
        """
        stmt = (
            select(AIAnalysisResult)
            .where(AIAnalysisResult.design_upload_id == upload_id)
            .order_by(AIAnalysisResult.created_at.desc())
        )
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def list_for_user(
        self, user_id: str, limit: Optional[int] = None
    ) -> List[Tuple[AIAnalysisResult, DesignUpload]]:
        """A user's results newest first, each paired with its upload.

        Args:
            user_id: Owner of the uploads
            limit: Maximum number of pairs

        Returns:
            List of ``(analysis, upload)`` tuples
        """
        stmt = (
            select(AIAnalysisResult, DesignUpload)
            .join(DesignUpload, AIAnalysisResult.design_upload_id == DesignUpload.id)
            .where(DesignUpload.user_id == user_id)
            .order_by(AIAnalysisResult.created_at.desc())
        )
        if limit is not None:
            stmt = stmt.limit(limit)
        result = await self.session.execute(stmt)
        return [(row[0], row[1]) for row in result.all()]

    async def count_for_user(
        self, user_id: str, since: Optional[datetime] = None, until: Optional[datetime] = None
    ) -> int:
        """Count a user's results, optionally within ``[since, until)``."""
        stmt = (
            select(func.count())
            .select_from(AIAnalysisResult)
            .join(DesignUpload, AIAnalysisResult.design_upload_id == DesignUpload.id)
            .where(DesignUpload.user_id == user_id)
        )
        if since is not None:
            stmt = stmt.where(AIAnalysisResult.created_at >= since)
        if until is not None:
            stmt = stmt.where(AIAnalysisResult.created_at < until)
        result = await self.session.execute(stmt)
        return int(result.scalar_one())
