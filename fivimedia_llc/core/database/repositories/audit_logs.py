"""
Audit log repository.
"""

from __future__ import annotations

from typing import List, Optional

from sqlalchemy.ext.asyncio import AsyncSession
from sqlmodel import select

from ..entities.audit_logs import AuditLog
from .base import BaseRepository, QueryBuilder


class AuditLogRepository(BaseRepository[AuditLog]):
    """Repository for audit log entries."""

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session, AuditLog)

    async def list_newest_first(
        self,
        entity: Optional[str] = None,
        user_id: Optional[int] = None,
        limit: Optional[int] = None,
        offset: Optional[int] = None,
    ) -> List[AuditLog]:
        """Audit entries newest first, optionally filtered by entity type and user."""
        stmt = select(AuditLog).order_by(AuditLog.created_at.desc(), AuditLog.id.desc())
        stmt = QueryBuilder.apply_filters(stmt, AuditLog, {"entity": entity, "user_id": user_id})
        stmt = QueryBuilder.apply_pagination(stmt, limit, offset)
        result = await self.session.execute(stmt)
        return list(result.scalars().all())
