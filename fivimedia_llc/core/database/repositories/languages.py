"""
Language repository.
"""

from __future__ import annotations

from typing import List, Optional

from sqlalchemy.ext.asyncio import AsyncSession
from sqlmodel import select

from ..entities.languages import Language
from .base import BaseRepository


class LanguageRepository(BaseRepository[Language]):
    """Repository for site languages."""

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session, Language)

    async def get_by_code(self, code: str) -> Optional[Language]:
        result = await self.session.execute(select(Language).where(Language.code == code.lower()))
        return result.scalar_one_or_none()

    async def list_ordered(self, active_only: bool = False) -> List[Language]:
        stmt = select(Language).order_by(Language.sort_order)
        if active_only:
            stmt = stmt.where(Language.is_active == True)
        result = await self.session.execute(stmt)
        return list(result.scalars().all())
