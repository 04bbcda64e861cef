"""
Promo code entity model.
"""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from sqlalchemy import DateTime
from sqlmodel import Field

from ..base import Base, utc_now_naive


class PromoCode(Base, table=True):
    """Discount code redeemable at checkout.

    Codes are stored upper-case. ``used_count`` is incremented in the database
    each time an order redeems the code.

    Table: promo_codes
    """

    __tablename__ = "promo_codes"
    __table_args__ = ({"extend_existing": True},)

    id: Optional[int] = Field(default=None, primary_key=True)
    code: str = Field(unique=True, index=True, max_length=50)
    type: str = Field(description="'percentage' or 'fixed'")
    value: float = Field(ge=0)
    usage_limit: Optional[int] = Field(default=None, description="Maximum redemptions, unlimited if null")
    used_count: int = Field(default=0)
    expires_at: Optional[datetime] = Field(default=None, sa_type=DateTime())
    min_order_amount: Optional[float] = Field(default=None)
    is_active: bool = Field(default=True)

    created_at: datetime = Field(default_factory=utc_now_naive, sa_type=DateTime())
    updated_at: datetime = Field(default_factory=utc_now_naive, sa_column_kwargs={"onupdate": utc_now_naive}, sa_type=DateTime())
