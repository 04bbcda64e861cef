"""
Admin dashboard endpoint.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends

from fivimedia_llc.core.database.entities.users import User
from fivimedia_llc.core.database.repositories import SqlRepoBundle, get_repos
from fivimedia_llc.core.models.domain import LeadStatus, OrderStatus
from fivimedia_llc.core.models.io.orders import DashboardStats, OrderRead, StateOrderCount
from fivimedia_llc.server.services.auth import get_current_user
from fivimedia_llc.server.services.pricing import round_money

router = APIRouter(tags=["admin-dashboard"])

RECENT_ORDERS = 10
TOP_STATES = 5


@router.get(
    "",
    response_model=DashboardStats,
    summary="Dashboard Statistics",
    description="Order and lead counts, revenue, recent orders and the most ordered states.",
)
async def get_dashboard(
    repos: SqlRepoBundle = Depends(get_repos),
    _: User = Depends(get_current_user),
) -> DashboardStats:
    """
    Get dashboard statistics.

    Revenue sums the totals of all orders except cancelled ones. The
    completion rate is the share of completed orders among all orders.
    """
    orders = repos.orders
    total = await orders.count()
    completed = await orders.count(OrderStatus.completed.value)
    recent = await orders.list_newest_first(limit=RECENT_ORDERS)

    return DashboardStats(
        total_orders=total,
        pending_orders=await orders.count(OrderStatus.pending.value),
        completed_orders=completed,
        cancelled_orders=await orders.count(OrderStatus.cancelled.value),
        revenue=round_money(await orders.revenue(excluded_status=OrderStatus.cancelled.value)),
        completion_rate=round_money(completed * 100 / total) if total else 0.0,
        total_leads=await repos.leads.count(),
        new_leads=await repos.leads.count(LeadStatus.new.value),
        recent_orders=[OrderRead.model_validate(o) for o in recent],
        top_states=[
            StateOrderCount(code=code, name=name, order_count=count)
            for code, name, count in await orders.top_states(TOP_STATES)
        ],
    )
