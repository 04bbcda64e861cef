from datetime import timedelta
from typing import Any, AsyncGenerator, Dict
from unittest.mock import AsyncMock

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, create_async_engine
from sqlmodel.pool import StaticPool

from fivimedia_llc.core.database.base import utc_now_naive
from fivimedia_llc.core.database.entities.catalogue import AddOn, CoverageItem, State, StateCoverage
from fivimedia_llc.core.database.entities.faqs import Faq, FaqCategory, FaqCategoryTranslation, FaqTranslation
from fivimedia_llc.core.database.entities.languages import Language
from fivimedia_llc.core.database.entities.promo_codes import PromoCode
from fivimedia_llc.core.database.entities.users import User
from fivimedia_llc.core.database.repositories import SqlRepoBundle, build_sql_repos_from_session
from fivimedia_llc.core.database.utils import create_all, create_sessionmaker
from fivimedia_llc.server.services.auth import hash_password
from fivimedia_llc.server.services.notifications import EmailNotifier

# Use in-memory SQLite for testing
TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"

ADMIN_EMAIL = "admin@fivimedia.com"
ADMIN_PASSWORD = "admin123"


@pytest_asyncio.fixture
async def test_engine():
    """Create a fresh in-memory database for each test."""
    engine = create_async_engine(
        TEST_DATABASE_URL,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    await create_all(engine)

    yield engine

    await engine.dispose()


@pytest_asyncio.fixture
async def session_factory(test_engine):
    return create_sessionmaker(test_engine)


@pytest_asyncio.fixture(name="session")
async def session_fixture(session_factory) -> AsyncGenerator[AsyncSession, None]:
    """Create a new session for each test."""
    async with session_factory() as session:
        yield session


@pytest_asyncio.fixture
async def repos(session: AsyncSession) -> SqlRepoBundle:
    return build_sql_repos_from_session(session=session)


@pytest_asyncio.fixture
async def admin_user(session: AsyncSession) -> User:
    user = User(email=ADMIN_EMAIL, password_hash=hash_password(ADMIN_PASSWORD), name="Admin", role="admin")
    session.add(user)
    await session.commit()
    await session.refresh(user)
    return user


@pytest_asyncio.fixture
async def catalogue(session: AsyncSession) -> Dict[str, Any]:
    """Seed a small catalogue: three states, two coverage items, add-ons and promo codes."""
    states = {
        "WY": State(code="WY", name="Wyoming", base_price=199, is_recommended=True),
        "DE": State(code="DE", name="Delaware", base_price=349),
        "CA": State(code="CA", name="California", base_price=399, is_active=False),
    }
    coverage_items = {
        "ein_filing": CoverageItem(
            key="ein_filing",
            title_en="EIN Filing",
            title_ar="تقديم رقم تعريف صاحب العمل",
            description_en="We file for your Employer Identification Number with the IRS",
            description_ar="نقدم طلب رقم تعريف صاحب العمل الخاص بك لدى مصلحة الضرائب",
            sort_order=1,
        ),
        "registered_agent": CoverageItem(
            key="registered_agent",
            title_en="Registered Agent",
            title_ar="الوكيل المسجل",
            sort_order=2,
        ),
    }
    add_ons = {
        "bank_setup": AddOn(
            slug="bank_setup", name_en="Bank Setup Assistance", name_ar="المساعدة في إعداد الحساب البنكي",
            price=99, sort_order=1,
        ),
        "business_address": AddOn(
            slug="business_address", name_en="Business Address", name_ar="عنوان العمل", price=49, sort_order=2
        ),
        "us_phone": AddOn(slug="us_phone", name_en="US Phone Number", name_ar="رقم هاتف أمريكي", price=29, sort_order=3),
        "retired_kit": AddOn(
            slug="retired_kit", name_en="Retired Kit", name_ar="مجموعة قديمة", price=500, sort_order=4, is_active=False
        ),
    }
    promo_codes = {
        "WELCOME10": PromoCode(code="WELCOME10", type="percentage", value=10, usage_limit=100, min_order_amount=100),
        "SAVE50": PromoCode(code="SAVE50", type="fixed", value=50, usage_limit=50, min_order_amount=200),
        "EXPIRED5": PromoCode(
            code="EXPIRED5", type="percentage", value=5, expires_at=utc_now_naive() - timedelta(days=1)
        ),
        "PAUSED": PromoCode(code="PAUSED", type="fixed", value=20, is_active=False),
        "USEDUP": PromoCode(code="USEDUP", type="fixed", value=20, usage_limit=2, used_count=2),
    }
    session.add_all([*states.values(), *coverage_items.values(), *add_ons.values(), *promo_codes.values()])
    await session.flush()

    for state in states.values():
        session.add(
            StateCoverage(
                state_id=state.id,
                coverage_item_id=coverage_items["ein_filing"].id,
                enabled=True,
                processing_time="10-12 business days",
            )
        )
    # Registered agent is only offered in Wyoming
    session.add(
        StateCoverage(state_id=states["WY"].id, coverage_item_id=coverage_items["registered_agent"].id, enabled=True)
    )
    session.add(
        StateCoverage(state_id=states["DE"].id, coverage_item_id=coverage_items["registered_agent"].id, enabled=False)
    )
    await session.commit()

    return {"states": states, "coverage_items": coverage_items, "add_ons": add_ons, "promo_codes": promo_codes}


@pytest_asyncio.fixture
async def languages(session: AsyncSession) -> Dict[str, Language]:
    rows = {
        "en": Language(code="en", name="English", direction="ltr", is_default=True, sort_order=1),
        "ar": Language(code="ar", name="العربية", direction="rtl", sort_order=2),
        "fr": Language(code="fr", name="Français", direction="ltr", is_active=False, sort_order=3),
    }
    session.add_all(rows.values())
    await session.commit()
    return rows


@pytest_asyncio.fixture
async def faq_content(session: AsyncSession) -> Dict[str, Any]:
    """Two categories with FAQs; the Arabic text of one FAQ is missing."""
    general = FaqCategory(key="general", sort_order=1)
    pricing = FaqCategory(key="pricing", sort_order=2)
    hidden = FaqCategory(key="hidden", sort_order=3, is_active=False)
    session.add_all([general, pricing, hidden])
    await session.flush()

    session.add_all(
        [
            FaqCategoryTranslation(category_id=general.id, locale="en", name="General Questions"),
            FaqCategoryTranslation(category_id=general.id, locale="ar", name="الأسئلة العامة"),
            FaqCategoryTranslation(category_id=pricing.id, locale="en", name="Pricing & Payments"),
            FaqCategoryTranslation(category_id=hidden.id, locale="en", name="Hidden"),
        ]
    )

    what_is = Faq(category_id=general.id, sort_order=1)
    citizen = Faq(category_id=general.id, sort_order=2)
    draft = Faq(category_id=general.id, sort_order=3, is_active=False)
    included = Faq(category_id=pricing.id, sort_order=1)
    hidden_faq = Faq(category_id=hidden.id, sort_order=1)
    session.add_all([what_is, citizen, draft, included, hidden_faq])
    await session.flush()

    session.add_all(
        [
            FaqTranslation(faq_id=what_is.id, locale="en", question="What is an LLC?", answer="A business structure."),
            FaqTranslation(
                faq_id=what_is.id,
                locale="ar",
                question="ما هي الشركة ذات المسؤولية المحدودة؟",
                answer="هيكل تجاري.",
            ),
            FaqTranslation(
                faq_id=citizen.id,
                locale="en",
                question="Do I need to be a US citizen?",
                answer="No.",
            ),
            FaqTranslation(faq_id=draft.id, locale="en", question="Draft?", answer="Not published."),
            FaqTranslation(
                faq_id=included.id,
                locale="en",
                question="What is included in the base price?",
                answer="Formation, EIN filing and more.",
            ),
            FaqTranslation(faq_id=hidden_faq.id, locale="en", question="Hidden?", answer="Yes."),
        ]
    )
    await session.commit()

    return {
        "categories": {"general": general, "pricing": pricing, "hidden": hidden},
        "faqs": {"what_is": what_is, "citizen": citizen, "draft": draft, "included": included},
    }


@pytest.fixture
def notifier() -> AsyncMock:
    mock = AsyncMock(spec=EmailNotifier)
    mock.send_contact_notification.return_value = False
    return mock


def _override_dependencies(app, session_factory, notifier) -> None:
    from fivimedia_llc.core.database import get_session, get_session_factory
    from fivimedia_llc.server.services.notifications import get_email_notifier

    async def get_session_override() -> AsyncGenerator[AsyncSession, None]:
        async with session_factory() as request_session:
            yield request_session

    app.dependency_overrides[get_session] = get_session_override
    app.dependency_overrides[get_session_factory] = lambda: session_factory
    app.dependency_overrides[get_email_notifier] = lambda: notifier


@pytest_asyncio.fixture(name="anon_client")
async def anon_client_fixture(session_factory, notifier) -> AsyncGenerator[AsyncClient, None]:
    """HTTP client without an admin session."""
    from fivimedia_llc.server.main import app

    _override_dependencies(app, session_factory, notifier)
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://localhost") as client:
        yield client
    app.dependency_overrides.clear()


@pytest_asyncio.fixture(name="client")
async def client_fixture(session_factory, notifier, admin_user: User) -> AsyncGenerator[AsyncClient, None]:
    """HTTP client signed in as the seeded admin."""
    from fivimedia_llc.server.main import app
    from fivimedia_llc.server.services.auth import get_current_user

    _override_dependencies(app, session_factory, notifier)
    app.dependency_overrides[get_current_user] = lambda: admin_user
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://localhost") as client:
        yield client
    app.dependency_overrides.clear()
