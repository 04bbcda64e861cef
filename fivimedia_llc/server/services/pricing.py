"""
Quote and promo code arithmetic.

Pure functions with no database access: callers load the state, add-ons and
promo code and pass them in. Money is rounded half-up to cents, matching how
amounts are displayed to customers.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from decimal import ROUND_HALF_UP, Decimal
from typing import Iterable, List, Optional, Sequence

from fivimedia_llc.core.database.entities.catalogue import AddOn, State
from fivimedia_llc.core.database.entities.promo_codes import PromoCode
from fivimedia_llc.core.models.domain import PromoCodeType

_CENT = Decimal("0.01")


def round_money(amount: float) -> float:
    """Round a dollar amount half-up to two decimals."""
    return float(Decimal(str(amount)).quantize(_CENT, rounding=ROUND_HALF_UP))


def format_money(amount: float) -> str:
    """Render an amount the way it appears in customer messages, e.g. ``100`` or ``99.5``."""
    return f"{round_money(amount):.2f}".rstrip("0").rstrip(".")


@dataclass(frozen=True)
class Quote:
    """Price breakdown of a state and add-on selection."""

    base_price: float
    selected_add_ons: List[AddOn]
    add_on_total: float

    @property
    def subtotal(self) -> float:
        return round_money(self.base_price + self.add_on_total)


@dataclass(frozen=True)
class PromoEvaluation:
    """Result of checking a promo code against an order total."""

    valid: bool
    error: Optional[str] = None
    discount_amount: float = 0.0

    @classmethod
    def rejected(cls, error: str) -> "PromoEvaluation":
        return cls(valid=False, error=error)


def calculate_quote(state: State, add_ons: Iterable[AddOn], selected_slugs: Sequence[str]) -> Quote:
    """
    Price a state with a selection of add-ons.

    Only active add-ons whose slug is selected count towards the total;
    unknown or inactive slugs are ignored. The selection keeps the order of
    ``add_ons``.

    Args:
        state: Formation state providing the base price
        add_ons: Candidate add-ons
        selected_slugs: Slugs chosen by the customer

    Returns:
        Quote with base price, selected add-ons and add-on total
    """
    wanted = set(selected_slugs)
    selected = [add_on for add_on in add_ons if add_on.is_active and add_on.slug in wanted]
    add_on_total = round_money(sum(add_on.price for add_on in selected))
    return Quote(base_price=state.base_price, selected_add_ons=selected, add_on_total=add_on_total)


def calculate_discount(promo_type: str, value: float, order_total: float) -> float:
    """
    Discount granted by a promo code on an order total.

    A percentage code yields ``total * value / 100`` rounded to cents; a fixed
    code yields its value. The result never exceeds ``order_total``.
    """
    if order_total <= 0:
        return 0.0
    if promo_type == PromoCodeType.percentage.value:
        discount = round_money(order_total * value / 100)
    else:
        discount = round_money(value)
    return max(0.0, min(discount, round_money(order_total)))


def evaluate_promo_code(promo: Optional[PromoCode], order_total: float, now: datetime) -> PromoEvaluation:
    """
    Check whether a promo code applies to an order total.

    Checks run in a fixed order and the first failure is reported: the code
    must exist, be active, not be expired, have uses left, and the order must
    reach the minimum amount.

    Args:
        promo: Loaded promo code, or None when the code is unknown
        order_total: Order subtotal before discount
        now: Current naive UTC time

    Returns:
        PromoEvaluation carrying either the discount or the failure reason
    """
    if promo is None:
        return PromoEvaluation.rejected("Invalid promo code")
    if not promo.is_active:
        return PromoEvaluation.rejected("This promo code is no longer active")
    if promo.expires_at is not None and now > promo.expires_at:
        return PromoEvaluation.rejected("This promo code has expired")
    if promo.usage_limit is not None and promo.used_count >= promo.usage_limit:
        return PromoEvaluation.rejected("This promo code has reached its usage limit")
    if promo.min_order_amount is not None and order_total < promo.min_order_amount:
        return PromoEvaluation.rejected(f"Minimum order amount of ${format_money(promo.min_order_amount)} required")

    discount = calculate_discount(promo.type, promo.value, order_total)
    return PromoEvaluation(valid=True, discount_amount=discount)
