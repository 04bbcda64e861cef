"""
Order repositories.

Data access for orders, their status history and the dashboard aggregates.
"""

from __future__ import annotations

from typing import List, Optional, Tuple

from sqlalchemy import func
from sqlalchemy.ext.asyncio import AsyncSession
from sqlmodel import select

from ..entities.catalogue import State
from ..entities.orders import Order, OrderStatusHistory
from .base import BaseRepository, QueryBuilder


class OrderRepository(BaseRepository[Order]):
    """Repository for customer orders."""

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session, Order)

    async def list_newest_first(
        self, status: Optional[str] = None, limit: Optional[int] = None, offset: Optional[int] = None
    ) -> List[Order]:
        """Orders newest first, optionally filtered by status."""
        stmt = select(Order).order_by(Order.created_at.desc())
        if status:
            stmt = stmt.where(Order.status == status)
        stmt = QueryBuilder.apply_pagination(stmt, limit, offset)
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def count(self, status: Optional[str] = None) -> int:
        stmt = select(func.count()).select_from(Order)
        if status:
            stmt = stmt.where(Order.status == status)
        result = await self.session.execute(stmt)
        return result.scalar_one()

    async def revenue(self, excluded_status: str) -> float:
        """Sum of order totals, ignoring orders in ``excluded_status``."""
        stmt = select(func.coalesce(func.sum(Order.total), 0)).where(Order.status != excluded_status)
        result = await self.session.execute(stmt)
        return float(result.scalar_one())

    async def top_states(self, limit: int = 5) -> List[Tuple[str, str, int]]:
        """States with the most orders as ``(code, name, order_count)``."""
        order_count = func.count(Order.id).label("order_count")
        stmt = (
            select(State.code, State.name, order_count)
            .join(Order, Order.state_id == State.id)
            .group_by(State.id, State.code, State.name)
            .order_by(order_count.desc(), State.code)
            .limit(limit)
        )
        result = await self.session.execute(stmt)
        return [(row[0], row[1], row[2]) for row in result.all()]


class OrderStatusHistoryRepository(BaseRepository[OrderStatusHistory]):
    """Repository for the append-only order status history."""

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session, OrderStatusHistory)

    async def list_for_order(self, order_id: str) -> List[OrderStatusHistory]:
        """History of one order, newest first."""
        stmt = (
            select(OrderStatusHistory)
            .where(OrderStatusHistory.order_id == order_id)
            .order_by(OrderStatusHistory.created_at.desc(), OrderStatusHistory.id.desc())
        )
        result = await self.session.execute(stmt)
        return list(result.scalars().all())
