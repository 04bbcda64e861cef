"""
Lead repository.

Data access for contact form submissions with search and pagination.
"""

from __future__ import annotations

from typing import List, Optional, Tuple

from sqlalchemy import func, or_
from sqlalchemy.ext.asyncio import AsyncSession
from sqlmodel import select

from ..entities.leads import ContactSubmission
from .base import BaseRepository, QueryBuilder


def _escape_like(value: str) -> str:
    """Match ``%`` and ``_`` in user input literally."""
    return value.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")


class LeadRepository(BaseRepository[ContactSubmission]):
    """Repository for contact submissions (leads)."""

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session, ContactSubmission)

    def _filtered(self, stmt, status: Optional[str], search: Optional[str]):
        if status:
            stmt = stmt.where(ContactSubmission.status == status)
        if search:
            pattern = f"%{_escape_like(search.lower())}%"
            stmt = stmt.where(
                or_(
                    func.lower(ContactSubmission.name).like(pattern, escape="\\"),
                    func.lower(ContactSubmission.email).like(pattern, escape="\\"),
                )
            )
        return stmt

    async def search(
        self, status: Optional[str], search: Optional[str], limit: int, offset: int
    ) -> Tuple[List[ContactSubmission], int]:
        """Page of leads, newest first, plus the total number of matches.

        Args:
            status: Only leads with this status
            search: Case-insensitive substring of the name or email
            limit: Page size
            offset: Rows to skip

        Returns:
            ``(leads, total_count)``
        """
        stmt = self._filtered(select(ContactSubmission), status, search).order_by(
            ContactSubmission.created_at.desc(), ContactSubmission.id.desc()
        )
        stmt = QueryBuilder.apply_pagination(stmt, limit, offset)
        result = await self.session.execute(stmt)

        count_stmt = self._filtered(select(func.count()).select_from(ContactSubmission), status, search)
        total = (await self.session.execute(count_stmt)).scalar_one()
        return list(result.scalars().all()), total

    async def count(self, status: Optional[str] = None) -> int:
        stmt = select(func.count()).select_from(ContactSubmission)
        if status:
            stmt = stmt.where(ContactSubmission.status == status)
        result = await self.session.execute(stmt)
        return result.scalar_one()
