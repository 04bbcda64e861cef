"""
Order placement and status transitions.

``OrderService`` is the only writer of orders. Checkout prices are computed
here from database rows, never taken from the client. Each status change
stores its history entry in the same transaction as the order update.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from fivimedia_llc.core.database.base import utc_now_naive
from fivimedia_llc.core.database.entities.orders import Order, OrderStatusHistory
from fivimedia_llc.core.database.entities.users import User
from fivimedia_llc.core.database.repositories.bundle import SqlRepoBundle
from fivimedia_llc.core.errors import NotFoundError, ValidationError
from fivimedia_llc.core.logging_config import get_logger
from fivimedia_llc.core.models.domain import AuditAction, AuditEntity, OrderStatus
from fivimedia_llc.core.models.io.orders import OrderCreate
from fivimedia_llc.core.monitoring import log_order_created, log_order_status_changed

from .audit import AuditLogger
from .pricing import calculate_quote, evaluate_promo_code, round_money

logger = get_logger(__name__)

SYSTEM_ACTOR = "system"


@dataclass(frozen=True)
class StatusChange:
    """Outcome of a status change request."""

    order: Order
    changed: bool


class OrderService:
    """Creates orders and moves them through their lifecycle."""

    def __init__(self, repos: SqlRepoBundle, audit: Optional[AuditLogger] = None) -> None:
        self.repos = repos
        self.audit = audit

    async def create_order(self, payload: OrderCreate) -> Order:
        """
        Place an order.

        The total is computed from the state's base price and the active
        add-ons selected. A promo code that does not apply is ignored; one
        that applies is redeemed by incrementing its usage count. The order,
        its first history entry and the redemption commit together.

        Args:
            payload: Validated checkout request

        Returns:
            The persisted order

        Raises:
            ValidationError: The state code is unknown
        """
        repos = self.repos
        state = await repos.states.get_by_code(payload.state_code)
        if state is None:
            raise ValidationError("Invalid state")

        quote = calculate_quote(state, await repos.add_ons.list_active(), payload.add_on_slugs)
        subtotal = quote.subtotal

        discount_amount = 0.0
        promo = None
        if payload.promo_code and payload.promo_code.strip():
            promo = await repos.promo_codes.get_by_code(payload.promo_code)
            evaluation = evaluate_promo_code(promo, subtotal, utc_now_naive())
            if evaluation.valid:
                discount_amount = evaluation.discount_amount
            else:
                logger.info(f"Ignoring promo code {payload.promo_code!r} at checkout: {evaluation.error}")
                promo = None

        customer = payload.customer_info.model_dump()
        customer["notes"] = customer.get("notes") or ""

        order = Order(
            state_id=state.id,
            state_code=state.code,
            add_ons=[add_on.slug for add_on in quote.selected_add_ons],
            customer_info=customer,
            base_price=state.base_price,
            add_on_total=quote.add_on_total,
            discount_amount=discount_amount,
            promo_code=promo.code if promo is not None else None,
            total=round_money(subtotal - discount_amount),
            status=OrderStatus.pending.value,
        )

        session = repos.session
        try:
            session.add(order)
            await session.flush()
            session.add(
                OrderStatusHistory(
                    order_id=order.id,
                    from_status=None,
                    to_status=OrderStatus.pending.value,
                    changed_by=SYSTEM_ACTOR,
                    note="Order created",
                )
            )
            if promo is not None:
                await repos.promo_codes.increment_usage(promo.id)
            await session.commit()
        except Exception:
            await session.rollback()
            raise

        await session.refresh(order)
        logger.info(f"Order {order.display_id} created: state={order.state_code}, total={order.total}")
        log_order_created(order.id, order.state_code, order.total, order.promo_code)
        return order

    async def change_status(
        self, order_id: str, new_status: str, actor: User, note: Optional[str] = None
    ) -> StatusChange:
        """
        Move an order to a new status.

        Nothing is written when the status is unchanged. Otherwise the order
        update and its history entry commit in one transaction, then an audit
        entry is recorded.

        Args:
            order_id: Order identifier
            new_status: Target status
            actor: Admin performing the change
            note: Optional note stored with the history entry

        Raises:
            ValidationError: The status is not a known order status
            NotFoundError: The order does not exist
        """
        if new_status not in {s.value for s in OrderStatus}:
            raise ValidationError("Invalid status")

        repos = self.repos
        order = await repos.orders.get_by_id(order_id)
        if order is None:
            raise NotFoundError("Order")

        old_status = order.status
        if old_status == new_status:
            return StatusChange(order=order, changed=False)

        session = repos.session
        try:
            order.status = new_status
            order.updated_at = utc_now_naive()
            session.add(order)
            session.add(
                OrderStatusHistory(
                    order_id=order.id,
                    from_status=old_status,
                    to_status=new_status,
                    changed_by=str(actor.id),
                    changed_by_email=actor.email,
                    note=note,
                )
            )
            await session.commit()
        except Exception:
            await session.rollback()
            raise

        await session.refresh(order)
        logger.info(f"Order {order.display_id} status changed {old_status} -> {new_status} by {actor.email}")
        log_order_status_changed(order.id, old_status, new_status)

        if self.audit is not None:
            await self.audit.log(
                actor,
                AuditAction.update,
                AuditEntity.order,
                order.id,
                {"status": {"from": old_status, "to": new_status}},
            )
        return StatusChange(order=order, changed=True)
