"""
Catalogue repositories.

Data access for states, coverage items, per-state coverage and add-ons.
"""

from __future__ import annotations

from typing import Iterable, List, Optional, Tuple

from sqlalchemy.ext.asyncio import AsyncSession
from sqlmodel import select

from ..entities.catalogue import AddOn, CoverageItem, State, StateCoverage
from .base import BaseRepository


class StateRepository(BaseRepository[State]):
    """Repository for formation states."""

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session, State)

    async def get_by_code(self, code: str) -> Optional[State]:
        """Get a state by its two-letter code (case-insensitive)."""
        result = await self.session.execute(select(State).where(State.code == code.upper()))
        return result.scalar_one_or_none()

    async def list_by_name(self) -> List[State]:
        """All states ordered by name."""
        result = await self.session.execute(select(State).order_by(State.name))
        return list(result.scalars().all())

    async def list_active(self) -> List[State]:
        """Active states, recommended ones first, then by name."""
        stmt = select(State).where(State.is_active == True).order_by(State.is_recommended.desc(), State.name)
        result = await self.session.execute(stmt)
        return list(result.scalars().all())


class CoverageItemRepository(BaseRepository[CoverageItem]):
    """Repository for the master list of coverage items."""

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session, CoverageItem)

    async def get_by_key(self, key: str) -> Optional[CoverageItem]:
        result = await self.session.execute(select(CoverageItem).where(CoverageItem.key == key))
        return result.scalar_one_or_none()

    async def list_ordered(self) -> List[CoverageItem]:
        result = await self.session.execute(select(CoverageItem).order_by(CoverageItem.sort_order))
        return list(result.scalars().all())


class StateCoverageRepository(BaseRepository[StateCoverage]):
    """Repository for the state/coverage-item matrix."""

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session, StateCoverage)

    async def get_pair(self, state_id: int, coverage_item_id: int) -> Optional[StateCoverage]:
        stmt = select(StateCoverage).where(
            (StateCoverage.state_id == state_id) & (StateCoverage.coverage_item_id == coverage_item_id)
        )
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def list_enabled_for_state(self, state_id: int) -> List[Tuple[StateCoverage, CoverageItem]]:
        """Enabled coverage rows of a state joined with their item, in item sort order."""
        stmt = (
            select(StateCoverage, CoverageItem)
            .join(CoverageItem, CoverageItem.id == StateCoverage.coverage_item_id)
            .where((StateCoverage.state_id == state_id) & (StateCoverage.enabled == True))
            .order_by(CoverageItem.sort_order)
        )
        result = await self.session.execute(stmt)
        return [(row[0], row[1]) for row in result.all()]

    async def list_all(self) -> List[StateCoverage]:
        result = await self.session.execute(select(StateCoverage))
        return list(result.scalars().all())

    def add_all(self, rows: Iterable[StateCoverage]) -> None:
        """Stage rows in the session without flushing."""
        self.session.add_all(list(rows))


class AddOnRepository(BaseRepository[AddOn]):
    """Repository for paid add-ons."""

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session, AddOn)

    async def get_by_slug(self, slug: str) -> Optional[AddOn]:
        result = await self.session.execute(select(AddOn).where(AddOn.slug == slug))
        return result.scalar_one_or_none()

    async def list_ordered(self) -> List[AddOn]:
        result = await self.session.execute(select(AddOn).order_by(AddOn.sort_order))
        return list(result.scalars().all())

    async def list_active(self) -> List[AddOn]:
        stmt = select(AddOn).where(AddOn.is_active == True).order_by(AddOn.sort_order)
        result = await self.session.execute(stmt)
        return list(result.scalars().all())
