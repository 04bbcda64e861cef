"""Unit tests for the order, promo code and audit log repositories."""

from datetime import datetime, timedelta

import pytest

from fivimedia_llc.core.database.entities import AuditLog, Order, OrderStatusHistory, PromoCode, State


@pytest.fixture
async def orders(in_memory_session):
    wy = State(code="WY", name="Wyoming", base_price=199)
    de = State(code="DE", name="Delaware", base_price=349)
    fl = State(code="FL", name="Florida", base_price=249)
    in_memory_session.add_all([wy, de, fl])
    await in_memory_session.flush()

    start = datetime(2026, 4, 1, 8, 0, 0)
    rows = [
        Order(state_id=wy.id, state_code="WY", base_price=199, total=199, created_at=start),
        Order(
            state_id=wy.id,
            state_code="WY",
            base_price=199,
            total=298,
            status="completed",
            created_at=start + timedelta(hours=1),
        ),
        Order(
            state_id=de.id,
            state_code="DE",
            base_price=349,
            total=349,
            status="cancelled",
            created_at=start + timedelta(hours=2),
        ),
        Order(
            state_id=fl.id,
            state_code="FL",
            base_price=249,
            total=249,
            status="processing",
            created_at=start + timedelta(hours=3),
        ),
    ]
    in_memory_session.add_all(rows)
    await in_memory_session.commit()
    return rows


class TestOrderRepository:
    async def test_newest_first(self, repos, orders):
        result = await repos.orders.list_newest_first()

        assert [o.state_code for o in result] == ["FL", "DE", "WY", "WY"]

    async def test_filter_and_page(self, repos, orders):
        assert [o.status for o in await repos.orders.list_newest_first(status="completed")] == ["completed"]
        assert len(await repos.orders.list_newest_first(limit=2, offset=3)) == 1

    async def test_count(self, repos, orders):
        assert await repos.orders.count() == 4
        assert await repos.orders.count(status="pending") == 1

    async def test_revenue_ignores_cancelled(self, repos, orders):
        assert await repos.orders.revenue(excluded_status="cancelled") == 746.0

    async def test_revenue_of_no_orders(self, repos):
        assert await repos.orders.revenue(excluded_status="cancelled") == 0.0

    async def test_top_states(self, repos, orders):
        top = await repos.orders.top_states(limit=2)

        assert top == [("WY", "Wyoming", 2), ("DE", "Delaware", 1)]

    async def test_status_history_newest_first(self, repos, in_memory_session, orders):
        order = orders[0]
        in_memory_session.add_all(
            [
                OrderStatusHistory(order_id=order.id, to_status="pending", changed_by="system"),
                OrderStatusHistory(
                    order_id=order.id, from_status="pending", to_status="processing", changed_by="1", changed_by_email="admin@fivimedia.com"
                ),
            ]
        )
        await in_memory_session.commit()

        history = await repos.order_history.list_for_order(order.id)

        assert [h.to_status for h in history] == ["processing", "pending"]


class TestOrderEntity:
    async def test_identifiers(self, orders):
        order = orders[0]

        assert len(order.id) == 32
        assert order.display_id == order.id[:10].upper()

    async def test_defaults(self, orders):
        order = orders[0]

        assert order.entity == "LLC"
        assert order.status == "pending"
        assert order.add_ons == []
        assert order.promo_code is None


class TestPromoCodeRepository:
    @pytest.fixture
    async def promo(self, in_memory_session):
        promo = PromoCode(code="WELCOME10", type="percentage", value=10)
        in_memory_session.add(promo)
        await in_memory_session.commit()
        return promo

    @pytest.mark.parametrize("code", ["WELCOME10", "welcome10", "  Welcome10 "])
    async def test_get_by_code_normalizes(self, repos, promo, code):
        found = await repos.promo_codes.get_by_code(code)

        assert found is not None
        assert found.id == promo.id

    async def test_increment_usage(self, repos, in_memory_session, promo):
        await repos.promo_codes.increment_usage(promo.id)
        await repos.promo_codes.increment_usage(promo.id)
        await in_memory_session.commit()

        await in_memory_session.refresh(promo)
        assert promo.used_count == 2


class TestAuditLogRepository:
    @pytest.fixture
    async def entries(self, in_memory_session):
        start = datetime(2026, 4, 1, 8, 0, 0)
        in_memory_session.add_all(
            [
                AuditLog(user_id=1, action="update", entity="order", entity_id="A", created_at=start),
                AuditLog(user_id=2, action="create", entity="user", entity_id="3", created_at=start + timedelta(1)),
                AuditLog(user_id=1, action="delete", entity="faq", entity_id="9", created_at=start + timedelta(2)),
            ]
        )
        await in_memory_session.commit()

    async def test_newest_first(self, repos, entries):
        assert [e.entity for e in await repos.audit_logs.list_newest_first()] == ["faq", "user", "order"]

    async def test_filters(self, repos, entries):
        assert [e.entity for e in await repos.audit_logs.list_newest_first(user_id=1)] == ["faq", "order"]
        assert [e.entity_id for e in await repos.audit_logs.list_newest_first(entity="user")] == ["3"]

    async def test_pagination(self, repos, entries):
        page = await repos.audit_logs.list_newest_first(limit=1, offset=1)

        assert [e.entity for e in page] == ["user"]
