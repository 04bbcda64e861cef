"""
Admin order endpoints.

List and inspect orders, and move them through their status lifecycle.
"""

from __future__ import annotations

from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query, status

from fivimedia_llc.core.database.entities.users import User
from fivimedia_llc.core.database.repositories import SqlRepoBundle, get_repos
from fivimedia_llc.core.models.io.orders import OrderDetail, OrderRead, OrderStatusHistoryRead, OrderStatusUpdate
from fivimedia_llc.server.services.audit import AuditLogger, get_audit_logger
from fivimedia_llc.server.services.auth import get_current_user
from fivimedia_llc.server.services.orders import OrderService

router = APIRouter(tags=["admin-orders"])


async def _order_detail(repos: SqlRepoBundle, order_id: str) -> OrderDetail:
    order = await repos.orders.get_by_id(order_id)
    if order is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Order not found")
    state = await repos.states.get_by_id(order.state_id)
    history = await repos.order_history.list_for_order(order.id)
    return OrderDetail(
        **OrderRead.model_validate(order).model_dump(),
        state_name=state.name if state else None,
        history=[OrderStatusHistoryRead.model_validate(h) for h in history],
    )


@router.get(
    "",
    response_model=List[OrderRead],
    summary="List Orders",
    description="Orders newest first, optionally filtered by status.",
)
async def list_orders(
    status_filter: Optional[str] = Query(default=None, alias="status"),
    limit: Optional[int] = None,
    offset: Optional[int] = None,
    repos: SqlRepoBundle = Depends(get_repos),
    _: User = Depends(get_current_user),
) -> List[OrderRead]:
    """
    List orders.

    - **status**: Only orders in this status.
    - **limit** / **offset**: Optional pagination.
    """
    orders = await repos.orders.list_newest_first(status=status_filter, limit=limit, offset=offset)
    return [OrderRead.model_validate(o) for o in orders]


@router.get(
    "/{order_id}",
    response_model=OrderDetail,
    summary="Get Order",
    description="Order with its state name and status history (newest first).",
    responses={404: {"description": "Order not found"}},
)
async def get_order(
    order_id: str,
    repos: SqlRepoBundle = Depends(get_repos),
    _: User = Depends(get_current_user),
) -> OrderDetail:
    """Get one order with its history."""
    return await _order_detail(repos, order_id)


@router.put(
    "/{order_id}",
    response_model=OrderDetail,
    summary="Update Order Status",
    description="Change an order's status. The change and its history entry are stored atomically.",
    responses={
        200: {"description": "Order returned with its updated history"},
        400: {"description": "Invalid status"},
        404: {"description": "Order not found"},
    },
)
async def update_order_status(
    order_id: str,
    update: OrderStatusUpdate,
    repos: SqlRepoBundle = Depends(get_repos),
    audit: AuditLogger = Depends(get_audit_logger),
    user: User = Depends(get_current_user),
) -> OrderDetail:
    """
    Update an order's status.

    - **status**: One of ``pending``, ``processing``, ``completed``, ``cancelled``.
    - **note**: Optional note kept in the history.

    Setting the current status again writes nothing.
    """
    await OrderService(repos, audit).change_status(order_id, update.status, user, update.note)
    return await _order_detail(repos, order_id)
