"""Unit tests for the user, lead, language and FAQ repositories."""

from datetime import datetime, timedelta

import pytest

from fivimedia_llc.core.database.entities import ContactSubmission, Faq, FaqCategory, Language, User


class TestUserRepository:
    @pytest.fixture
    async def users(self, in_memory_session):
        start = datetime(2026, 1, 1)
        in_memory_session.add_all(
            [
                User(email="admin@fivimedia.com", password_hash="x", role="admin", created_at=start),
                User(email="ops@fivimedia.com", password_hash="x", role="admin", created_at=start + timedelta(1)),
                User(email="viewer@fivimedia.com", password_hash="x", role="viewer", created_at=start + timedelta(2)),
            ]
        )
        await in_memory_session.commit()

    async def test_get_by_email(self, repos, users):
        assert (await repos.users.get_by_email("ops@fivimedia.com")).role == "admin"
        assert await repos.users.get_by_email("nobody@fivimedia.com") is None

    async def test_newest_first(self, repos, users):
        emails = [u.email for u in await repos.users.list_newest_first()]

        assert emails == ["viewer@fivimedia.com", "ops@fivimedia.com", "admin@fivimedia.com"]

    async def test_count_by_role(self, repos, users):
        assert await repos.users.count_by_role("admin") == 2
        assert await repos.users.count_by_role("viewer") == 1


class TestLeadRepository:
    @pytest.fixture
    async def leads(self, in_memory_session):
        start = datetime(2026, 2, 1)
        in_memory_session.add_all(
            [
                ContactSubmission(
                    name=f"Lead {i}",
                    email=f"lead{i}@{'corp' if i % 2 else 'mail'}.example",
                    message="Hi",
                    status="closed" if i == 0 else "new",
                    created_at=start + timedelta(hours=i),
                )
                for i in range(5)
            ]
        )
        await in_memory_session.commit()

    async def test_search_pages_with_total(self, repos, leads):
        page, total = await repos.leads.search(status=None, search=None, limit=2, offset=0)

        assert total == 5
        assert [lead.name for lead in page] == ["Lead 4", "Lead 3"]

    async def test_search_is_case_insensitive(self, repos, leads):
        page, total = await repos.leads.search(status=None, search="CORP", limit=10, offset=0)

        assert total == 2
        assert {lead.name for lead in page} == {"Lead 1", "Lead 3"}

    async def test_status_and_search_combine(self, repos, leads):
        _, total = await repos.leads.search(status="new", search="mail", limit=10, offset=0)

        assert total == 2

    async def test_count(self, repos, leads):
        assert await repos.leads.count() == 5
        assert await repos.leads.count(status="closed") == 1

    async def test_search_wildcards_match_literally(self, repos, in_memory_session):
        in_memory_session.add_all(
            [
                ContactSubmission(name="100% Halal Foods", email="info@halal.example", message="Hi"),
                ContactSubmission(name="100 Percent Media", email="hello@media.example", message="Hi"),
                ContactSubmission(name="Omar", email="omar_k@mail.example", message="Hi"),
                ContactSubmission(name="Omar", email="omarxk@mail.example", message="Hi"),
            ]
        )
        await in_memory_session.commit()

        percent, percent_total = await repos.leads.search(status=None, search="100%", limit=10, offset=0)
        underscore, underscore_total = await repos.leads.search(status=None, search="omar_k", limit=10, offset=0)

        assert percent_total == 1
        assert [lead.name for lead in percent] == ["100% Halal Foods"]
        assert underscore_total == 1
        assert [lead.email for lead in underscore] == ["omar_k@mail.example"]


class TestLanguageRepository:
    @pytest.fixture
    async def languages(self, in_memory_session):
        in_memory_session.add_all(
            [
                Language(code="ar", name="العربية", direction="rtl", sort_order=2),
                Language(code="en", name="English", is_default=True, sort_order=1),
                Language(code="fr", name="Français", is_active=False, sort_order=3),
            ]
        )
        await in_memory_session.commit()

    async def test_list_ordered(self, repos, languages):
        assert [lang.code for lang in await repos.languages.list_ordered()] == ["en", "ar", "fr"]
        assert [lang.code for lang in await repos.languages.list_ordered(active_only=True)] == ["en", "ar"]

    async def test_get_by_code(self, repos, languages):
        assert (await repos.languages.get_by_code("ar")).direction == "rtl"


class TestFaqRepositories:
    @pytest.fixture
    async def category(self, in_memory_session):
        category = FaqCategory(key="general", sort_order=1)
        in_memory_session.add(category)
        await in_memory_session.commit()
        return category

    async def test_replace_category_translations(self, repos, in_memory_session, category):
        await repos.faq_categories.replace_translations(category.id, {"en": "General", "ar": "عام"})
        await repos.faq_categories.replace_translations(category.id, {"en": "Basics"})
        await in_memory_session.commit()

        texts = await repos.faq_categories.translations_for([category.id])

        assert {t.locale: t.name for t in texts[category.id]} == {"en": "Basics"}

    async def test_translations_for_no_ids(self, repos):
        assert await repos.faq_categories.translations_for([]) == {}
        assert await repos.faqs.translations_for([]) == {}

    async def test_faq_counts_and_sort_order(self, repos, in_memory_session, category):
        in_memory_session.add_all([Faq(category_id=category.id, sort_order=4), Faq(category_id=category.id)])
        await in_memory_session.commit()

        assert await repos.faq_categories.faq_counts() == {category.id: 2}
        assert await repos.faqs.count_for_category(category.id) == 2
        assert await repos.faqs.max_sort_order_in(category.id) == 4
        assert await repos.faqs.max_sort_order_in(category.id + 1) == 0

    async def test_delete_with_translations(self, repos, in_memory_session, category):
        faq = Faq(category_id=category.id)
        in_memory_session.add(faq)
        await in_memory_session.flush()
        await repos.faqs.replace_translations(faq.id, {"en": {"question": "Q?", "answer": "A."}})
        await in_memory_session.commit()
        faq_id = faq.id

        await repos.faqs.delete_with_translations(faq)

        assert await repos.faqs.get_by_id(faq_id) is None
        assert (await repos.faqs.translations_for([faq_id]))[faq_id] == []
