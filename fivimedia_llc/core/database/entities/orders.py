"""
Order entity models.

This module contains the customer order and its append-only status history.
Prices are copied onto the order at checkout so later catalogue changes do
not alter placed orders.
"""

from __future__ import annotations

import uuid
from datetime import datetime
from typing import Any, Dict, List, Optional

from sqlalchemy import JSON, DateTime
from sqlmodel import Field

from ..base import Base, utc_now_naive


def _new_order_id() -> str:
    return uuid.uuid4().hex


class Order(Base, table=True):
    """LLC formation order placed through the wizard.

    Table: orders
    """

    __tablename__ = "orders"
    __table_args__ = ({"extend_existing": True},)

    id: str = Field(default_factory=_new_order_id, primary_key=True, max_length=32)
    entity: str = Field(default="LLC", max_length=20, description="Entity type being formed")
    state_id: int = Field(foreign_key="states.id", index=True)
    state_code: str = Field(max_length=2, index=True)
    add_ons: List[str] = Field(default_factory=list, sa_type=JSON, description="Selected add-on slugs")
    customer_info: Dict[str, Any] = Field(default_factory=dict, sa_type=JSON)

    base_price: float
    add_on_total: float = Field(default=0)
    discount_amount: float = Field(default=0)
    promo_code: Optional[str] = Field(default=None, max_length=50)
    total: float

    status: str = Field(default="pending", index=True)

    created_at: datetime = Field(default_factory=utc_now_naive, index=True, sa_type=DateTime())
    updated_at: datetime = Field(default_factory=utc_now_naive, sa_column_kwargs={"onupdate": utc_now_naive}, sa_type=DateTime())

    @property
    def display_id(self) -> str:
        """Short reference shown to customers."""
        return self.id[:10].upper()


class OrderStatusHistory(Base, table=True):
    """Append-only record of an order status transition.

    Table: order_status_history
    """

    __tablename__ = "order_status_history"
    __table_args__ = ({"extend_existing": True},)

    id: Optional[int] = Field(default=None, primary_key=True)
    order_id: str = Field(foreign_key="orders.id", index=True)
    from_status: Optional[str] = Field(default=None)
    to_status: str
    changed_by: str = Field(description="Id of the admin user, or 'system'")
    changed_by_email: Optional[str] = Field(default=None, max_length=255, description="Admin email at the time of the change")
    note: Optional[str] = Field(default=None)

    created_at: datetime = Field(default_factory=utc_now_naive, sa_type=DateTime())
