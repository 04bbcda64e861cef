"""Unit tests for naive UTC timestamp storage."""

from datetime import datetime, timedelta

from sqlmodel import select

from fivimedia_llc.core.database.base import utc_now_naive
from fivimedia_llc.core.database.entities import Order, OrderStatusHistory, PromoCode, State


class TestNaiveTimestamps:
    def test_utc_now_naive_has_no_tzinfo(self):
        assert utc_now_naive().tzinfo is None

    async def test_created_at_round_trip(self, in_memory_session):
        before = utc_now_naive()
        in_memory_session.add(State(code="WY", name="Wyoming", base_price=199))
        await in_memory_session.commit()

        in_memory_session.expunge_all()
        state = (await in_memory_session.execute(select(State).where(State.code == "WY"))).scalar_one()

        assert isinstance(state.created_at, datetime)
        assert state.created_at.tzinfo is None
        assert before - timedelta(seconds=5) <= state.created_at <= utc_now_naive() + timedelta(seconds=5)
        assert state.updated_at.tzinfo is None

    async def test_optional_expiry_round_trip(self, in_memory_session):
        expires = datetime(2030, 1, 31, 23, 59, 0)
        in_memory_session.add(PromoCode(code="LAUNCH10", type="percentage", value=10, expires_at=expires))
        in_memory_session.add(PromoCode(code="OPEN", type="fixed", value=20))
        await in_memory_session.commit()

        in_memory_session.expunge_all()
        rows = {p.code: p for p in (await in_memory_session.execute(select(PromoCode))).scalars().all()}

        assert rows["LAUNCH10"].expires_at == expires
        assert rows["OPEN"].expires_at is None

    async def test_order_and_history_timestamps(self, in_memory_session):
        state = State(code="WY", name="Wyoming", base_price=199)
        in_memory_session.add(state)
        await in_memory_session.flush()
        order = Order(state_id=state.id, state_code="WY", base_price=199, total=199)
        in_memory_session.add(order)
        await in_memory_session.flush()
        in_memory_session.add(
            OrderStatusHistory(order_id=order.id, from_status=None, to_status=order.status, changed_by="system")
        )
        await in_memory_session.commit()

        in_memory_session.expunge_all()
        saved = await in_memory_session.get(Order, order.id)
        history = (await in_memory_session.execute(select(OrderStatusHistory))).scalars().all()

        assert saved.created_at.tzinfo is None
        assert [h.created_at.tzinfo for h in history] == [None]
