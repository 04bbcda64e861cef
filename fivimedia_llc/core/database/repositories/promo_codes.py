"""
Promo code repository.
"""

from __future__ import annotations

from typing import List, Optional

from sqlalchemy import update
from sqlalchemy.ext.asyncio import AsyncSession
from sqlmodel import select

from ..entities.promo_codes import PromoCode
from .base import BaseRepository


class PromoCodeRepository(BaseRepository[PromoCode]):
    """Repository for promo codes."""

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session, PromoCode)

    async def get_by_code(self, code: str) -> Optional[PromoCode]:
        """Get a promo code, matching case-insensitively."""
        result = await self.session.execute(select(PromoCode).where(PromoCode.code == code.strip().upper()))
        return result.scalar_one_or_none()

    async def list_newest_first(self) -> List[PromoCode]:
        result = await self.session.execute(select(PromoCode).order_by(PromoCode.created_at.desc()))
        return list(result.scalars().all())

    async def increment_usage(self, promo_id: int) -> None:
        """Increment ``used_count`` in the database without committing."""
        stmt = update(PromoCode).where(PromoCode.id == promo_id).values(used_count=PromoCode.used_count + 1)
        await self.session.execute(stmt)
