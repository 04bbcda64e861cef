"""
Promo code I/O models for API requests and responses.
"""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class PromoValidateRequest(BaseModel):
    """Schema for checking a promo code against an order total.

    Both fields are optional at the schema level so that the endpoint can
    report its own messages for missing values.
    """

    code: Optional[str] = None
    order_total: Optional[float] = None


class PromoDiscount(BaseModel):
    code: str
    type: str
    value: float
    discount_amount: float


class PromoValidateResponse(BaseModel):
    """Outcome of a promo code check. ``error`` is set when ``valid`` is false."""

    valid: bool
    error: Optional[str] = None
    discount: Optional[PromoDiscount] = None


class PromoCodeRead(BaseModel):
    """Schema for reading a promo code (admin)."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    code: str
    type: str
    value: float
    usage_limit: Optional[int] = None
    used_count: int
    expires_at: Optional[datetime] = None
    min_order_amount: Optional[float] = None
    is_active: bool
    created_at: datetime
    updated_at: datetime


class PromoCodeCreate(BaseModel):
    """Schema for creating a promo code."""

    code: str
    type: str
    value: float
    usage_limit: Optional[int] = None
    expires_at: Optional[datetime] = None
    min_order_amount: Optional[float] = None
    is_active: bool = True


class PromoCodeUpdate(BaseModel):
    """Schema for updating a promo code. Omitted fields are left unchanged."""

    code: Optional[str] = None
    type: Optional[str] = None
    value: Optional[float] = None
    usage_limit: Optional[int] = Field(default=None)
    expires_at: Optional[datetime] = None
    min_order_amount: Optional[float] = None
    is_active: Optional[bool] = None
