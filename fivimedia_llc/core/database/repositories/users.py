"""
User repository.

Data access for back-office user accounts.
"""

from __future__ import annotations

from typing import List, Optional

from sqlalchemy import func
from sqlalchemy.ext.asyncio import AsyncSession
from sqlmodel import select

from ..entities.users import User
from .base import BaseRepository


class UserRepository(BaseRepository[User]):
    """Repository for admin users."""

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session, User)

    async def get_by_email(self, email: str) -> Optional[User]:
        """Get a user by exact email address."""
        result = await self.session.execute(select(User).where(User.email == email))
        return result.scalar_one_or_none()

    async def list_newest_first(self) -> List[User]:
        result = await self.session.execute(select(User).order_by(User.created_at.desc(), User.id.desc()))
        return list(result.scalars().all())

    async def count_by_role(self, role: str) -> int:
        result = await self.session.execute(select(func.count()).select_from(User).where(User.role == role))
        return result.scalar_one()
