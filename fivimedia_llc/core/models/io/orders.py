"""
Order I/O models for API requests and responses.

This module contains Pydantic-based schemas for the checkout endpoint and
the admin order screens.
"""

from __future__ import annotations

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .common import require_email, require_text


class CustomerInfo(BaseModel):
    """Customer contact details captured at checkout."""

    full_name: str
    email: str
    phone: str
    country: str
    business_name: str
    notes: Optional[str] = None

    @field_validator("full_name", mode="before")
    @classmethod
    def _full_name(cls, value):
        return require_text(value, "Full name is required")

    @field_validator("email", mode="before")
    @classmethod
    def _email(cls, value):
        return require_email(value)

    @field_validator("phone", mode="before")
    @classmethod
    def _phone(cls, value):
        return require_text(value, "Phone is required")

    @field_validator("country", mode="before")
    @classmethod
    def _country(cls, value):
        return require_text(value, "Country is required")

    @field_validator("business_name", mode="before")
    @classmethod
    def _business_name(cls, value):
        return require_text(value, "Business name is required")


class OrderCreate(BaseModel):
    """Schema for placing an order."""

    state_code: str
    add_on_slugs: List[str] = Field(default_factory=list)
    customer_info: CustomerInfo
    promo_code: Optional[str] = None

    @field_validator("state_code", mode="before")
    @classmethod
    def _state_code(cls, value):
        if not isinstance(value, str) or len(value) != 2:
            raise ValueError("Invalid state code")
        return value


class OrderCreated(BaseModel):
    """Response to a successfully placed order."""

    success: bool = True
    order_id: str = Field(description="Display order id shown to the customer")


class OrderRead(BaseModel):
    """Schema for reading an order."""

    model_config = ConfigDict(from_attributes=True)

    id: str
    display_id: str
    entity: str
    state_code: str
    add_ons: List[str]
    customer_info: dict
    base_price: float
    add_on_total: float
    discount_amount: float
    promo_code: Optional[str] = None
    total: float
    status: str
    created_at: datetime
    updated_at: datetime


class OrderStatusHistoryRead(BaseModel):
    """Schema for reading one status transition."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    from_status: Optional[str] = None
    to_status: str
    changed_by: str
    changed_by_email: Optional[str] = None
    note: Optional[str] = None
    created_at: datetime


class OrderDetail(OrderRead):
    """Order with its state name and status history, newest first."""

    state_name: Optional[str] = None
    history: List[OrderStatusHistoryRead] = Field(default_factory=list)


class OrderStatusUpdate(BaseModel):
    """Schema for changing an order's status."""

    status: str
    note: Optional[str] = None


class StateOrderCount(BaseModel):
    code: str
    name: str
    order_count: int


class DashboardStats(BaseModel):
    """Aggregates shown on the admin dashboard."""

    total_orders: int
    pending_orders: int
    completed_orders: int
    cancelled_orders: int
    revenue: float
    completion_rate: float = Field(description="Completed orders as a percentage of all orders")
    total_leads: int
    new_leads: int
    recent_orders: List[OrderRead]
    top_states: List[StateOrderCount]
