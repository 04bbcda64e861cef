"""
Unit tests for OrderService.

Orders are created against an in-memory database seeded by the ``catalogue``
fixture. Promo code usage is checked through a fresh session because the
increment is issued as a direct UPDATE.
"""

from typing import Optional
from unittest.mock import AsyncMock, patch

import pytest
from sqlmodel import select

from fivimedia_llc.core.database.entities.orders import Order, OrderStatusHistory
from fivimedia_llc.core.database.entities.promo_codes import PromoCode
from fivimedia_llc.core.errors import NotFoundError, ValidationError
from fivimedia_llc.core.models.domain import AuditAction, AuditEntity
from fivimedia_llc.core.models.io.orders import OrderCreate
from fivimedia_llc.server.services.audit import AuditLogger
from fivimedia_llc.server.services.orders import SYSTEM_ACTOR, OrderService

pytestmark = pytest.mark.asyncio


def _payload(**overrides) -> OrderCreate:
    data = {
        "state_code": "WY",
        "add_on_slugs": [],
        "customer_info": {
            "full_name": "Layla Haddad",
            "email": "layla@example.com",
            "phone": "+971 50 123 4567",
            "country": "United Arab Emirates",
            "business_name": "Haddad Trading LLC",
        },
    }
    data.update(overrides)
    return OrderCreate.model_validate(data)


async def _used_count(session_factory, code: str) -> int:
    async with session_factory() as fresh:
        promo = (await fresh.execute(select(PromoCode).where(PromoCode.code == code))).scalar_one()
        return promo.used_count


async def _history_count(session_factory, order_id: Optional[str] = None) -> int:
    async with session_factory() as fresh:
        stmt = select(OrderStatusHistory)
        if order_id is not None:
            stmt = stmt.where(OrderStatusHistory.order_id == order_id)
        return len((await fresh.execute(stmt)).scalars().all())


def _failing_commit(session):
    """Flush pending writes to the database, then fail before committing."""

    async def commit():
        await session.flush()
        raise RuntimeError("database went away")

    return patch.object(session, "commit", side_effect=commit)


class TestCreateOrder:
    async def test_creates_pending_order_with_server_side_total(self, repos, catalogue):
        order = await OrderService(repos).create_order(_payload(add_on_slugs=["bank_setup", "us_phone"]))

        assert order.status == "pending"
        assert order.entity == "LLC"
        assert order.state_code == "WY"
        assert order.state_id == catalogue["states"]["WY"].id
        assert order.base_price == 199
        assert order.add_on_total == 128
        assert order.discount_amount == 0
        assert order.total == 327
        assert order.add_ons == ["bank_setup", "us_phone"]
        assert order.promo_code is None

    async def test_display_id_is_short_uppercase_prefix(self, repos, catalogue):
        order = await OrderService(repos).create_order(_payload())

        assert len(order.display_id) == 10
        assert order.display_id == order.id[:10].upper()

    async def test_state_code_is_case_insensitive(self, repos, catalogue):
        order = await OrderService(repos).create_order(_payload(state_code="de"))

        assert order.state_code == "DE"
        assert order.total == 349

    async def test_unknown_state_is_rejected(self, repos, catalogue):
        with pytest.raises(ValidationError, match="Invalid state"):
            await OrderService(repos).create_order(_payload(state_code="ZZ"))

    async def test_inactive_add_ons_are_not_charged(self, repos, catalogue):
        order = await OrderService(repos).create_order(_payload(add_on_slugs=["retired_kit", "bank_setup"]))

        assert order.add_ons == ["bank_setup"]
        assert order.total == 298

    async def test_notes_default_to_empty_string(self, repos, catalogue):
        order = await OrderService(repos).create_order(_payload())

        assert order.customer_info["notes"] == ""
        assert order.customer_info["full_name"] == "Layla Haddad"

    async def test_writes_initial_history_entry(self, repos, catalogue, session):
        order = await OrderService(repos).create_order(_payload())

        history = (
            await session.execute(select(OrderStatusHistory).where(OrderStatusHistory.order_id == order.id))
        ).scalars().all()
        assert len(history) == 1
        assert history[0].from_status is None
        assert history[0].to_status == "pending"
        assert history[0].changed_by == SYSTEM_ACTOR
        assert history[0].changed_by_email is None

    async def test_valid_promo_code_is_applied_and_redeemed(self, repos, catalogue, session_factory):
        order = await OrderService(repos).create_order(
            _payload(add_on_slugs=["bank_setup"], promo_code=" welcome10 ")
        )

        assert order.promo_code == "WELCOME10"
        assert order.discount_amount == 29.8
        assert order.total == 268.2
        assert await _used_count(session_factory, "WELCOME10") == 1

    async def test_fixed_promo_code(self, repos, catalogue, session_factory):
        order = await OrderService(repos).create_order(_payload(state_code="DE", promo_code="SAVE50"))

        assert order.discount_amount == 50
        assert order.total == 299
        assert await _used_count(session_factory, "SAVE50") == 1

    @pytest.mark.parametrize("code", ["NOPE", "EXPIRED5", "PAUSED", "USEDUP"])
    async def test_inapplicable_promo_code_is_ignored(self, repos, catalogue, code):
        order = await OrderService(repos).create_order(_payload(promo_code=code))

        assert order.promo_code is None
        assert order.discount_amount == 0
        assert order.total == 199

    async def test_promo_below_minimum_is_ignored(self, repos, catalogue, session_factory):
        # SAVE50 needs $200, Wyoming alone is $199
        order = await OrderService(repos).create_order(_payload(promo_code="SAVE50"))

        assert order.promo_code is None
        assert order.total == 199
        assert await _used_count(session_factory, "SAVE50") == 0

    async def test_blank_promo_code_is_ignored(self, repos, catalogue):
        order = await OrderService(repos).create_order(_payload(promo_code="   "))

        assert order.promo_code is None


class TestChangeStatus:
    async def test_changes_status_and_records_history(self, repos, catalogue, admin_user, session):
        service = OrderService(repos)
        order = await service.create_order(_payload())

        result = await service.change_status(order.id, "processing", admin_user, note="Filed with the state")

        assert result.changed is True
        assert result.order.status == "processing"
        history = await repos.order_history.list_for_order(order.id)
        assert [h.to_status for h in history] == ["processing", "pending"]
        assert history[0].from_status == "pending"
        assert history[0].changed_by == str(admin_user.id)
        assert history[0].changed_by_email == admin_user.email
        assert history[0].note == "Filed with the state"

    async def test_same_status_is_a_no_op(self, repos, catalogue, admin_user):
        audit = AsyncMock(spec=AuditLogger)
        service = OrderService(repos, audit)
        order = await service.create_order(_payload())

        result = await service.change_status(order.id, "pending", admin_user)

        assert result.changed is False
        assert len(await repos.order_history.list_for_order(order.id)) == 1
        audit.log.assert_not_called()

    async def test_change_is_audited(self, repos, catalogue, admin_user):
        audit = AsyncMock(spec=AuditLogger)
        service = OrderService(repos, audit)
        order = await service.create_order(_payload())

        await service.change_status(order.id, "completed", admin_user)

        audit.log.assert_awaited_once_with(
            admin_user,
            AuditAction.update,
            AuditEntity.order,
            order.id,
            {"status": {"from": "pending", "to": "completed"}},
        )

    async def test_invalid_status_is_rejected(self, repos, catalogue, admin_user):
        service = OrderService(repos)
        order = await service.create_order(_payload())

        with pytest.raises(ValidationError, match="Invalid status"):
            await service.change_status(order.id, "shipped", admin_user)

    async def test_unknown_order(self, repos, catalogue, admin_user):
        with pytest.raises(NotFoundError, match="Order not found"):
            await OrderService(repos).change_status("0" * 32, "completed", admin_user)

    async def test_history_survives_email_change(self, repos, catalogue, admin_user, session):
        service = OrderService(repos)
        order = await service.create_order(_payload())
        await service.change_status(order.id, "processing", admin_user)

        admin_user.email = "owner@fivimedia.com"
        session.add(admin_user)
        await session.commit()

        history = await repos.order_history.list_for_order(order.id)
        assert history[0].changed_by == str(admin_user.id)
        assert history[0].changed_by_email == "admin@fivimedia.com"


class TestTransactionRollback:
    async def test_failed_status_change_leaves_order_untouched(
        self, repos, catalogue, admin_user, session, session_factory
    ):
        audit = AsyncMock(spec=AuditLogger)
        service = OrderService(repos, audit)
        order = await service.create_order(_payload())
        order_id = order.id

        with _failing_commit(session):
            with pytest.raises(RuntimeError, match="database went away"):
                await service.change_status(order_id, "completed", admin_user)

        async with session_factory() as fresh:
            saved = await fresh.get(Order, order_id)
            assert saved.status == "pending"
        assert await _history_count(session_factory, order_id) == 1
        audit.log.assert_not_called()

    async def test_failed_checkout_writes_nothing(self, repos, catalogue, session, session_factory):
        with _failing_commit(session):
            with pytest.raises(RuntimeError, match="database went away"):
                await OrderService(repos).create_order(_payload(promo_code="WELCOME10"))

        async with session_factory() as fresh:
            assert (await fresh.execute(select(Order))).scalars().all() == []
        assert await _history_count(session_factory) == 0
        assert await _used_count(session_factory, "WELCOME10") == 0

    async def test_session_is_usable_after_rollback(self, repos, catalogue, session, session_factory):
        service = OrderService(repos)
        with _failing_commit(session):
            with pytest.raises(RuntimeError):
                await service.create_order(_payload(promo_code="WELCOME10"))

        order = await service.create_order(_payload(promo_code="WELCOME10"))

        assert order.promo_code == "WELCOME10"
        assert await _used_count(session_factory, "WELCOME10") == 1
        assert await _history_count(session_factory, order.id) == 1
