"""
Unit tests for FAQ content assembly and translation clean-up.
"""

import pytest

from fivimedia_llc.core.errors import ValidationError
from fivimedia_llc.core.models.io.faqs import FaqText
from fivimedia_llc.server.services.faqs import (
    build_public_faqs,
    clean_category_translations,
    clean_faq_translations,
    require_english_faq,
)


class TestTranslationCleanup:
    def test_category_names_are_stripped_and_blanks_dropped(self):
        cleaned = clean_category_translations({"en": "  General  ", "ar": "   ", "fr": ""})

        assert cleaned == {"en": "General"}

    def test_faq_locales_with_no_text_are_dropped(self):
        cleaned = clean_faq_translations(
            {
                "en": FaqText(question=" What is an LLC? ", answer=" A company. "),
                "ar": FaqText(question="  ", answer=""),
                "fr": FaqText(question="Qu'est-ce qu'une LLC ?", answer=""),
            }
        )

        assert cleaned == {
            "en": {"question": "What is an LLC?", "answer": "A company."},
            "fr": {"question": "Qu'est-ce qu'une LLC ?", "answer": ""},
        }

    def test_english_question_and_answer_are_required(self):
        require_english_faq({"en": {"question": "Q", "answer": "A"}})

        with pytest.raises(ValidationError, match="English question and answer are required"):
            require_english_faq({"ar": {"question": "س", "answer": "ج"}})
        with pytest.raises(ValidationError):
            require_english_faq({"en": {"question": "Q", "answer": ""}})


@pytest.mark.asyncio
class TestBuildPublicFaqs:
    async def test_english_listing(self, repos, faq_content):
        categories = await build_public_faqs(repos, "en")

        assert [c.key for c in categories] == ["general", "pricing"]
        general = categories[0]
        assert general.name == "General Questions"
        assert [f.question for f in general.faqs] == ["What is an LLC?", "Do I need to be a US citizen?"]

    async def test_inactive_faqs_and_categories_are_hidden(self, repos, faq_content):
        categories = await build_public_faqs(repos, "en")

        questions = [f.question for c in categories for f in c.faqs]
        assert "Draft?" not in questions
        assert "Hidden?" not in questions

    async def test_arabic_falls_back_to_english(self, repos, faq_content):
        categories = await build_public_faqs(repos, "ar")

        general, pricing = categories
        assert general.name == "الأسئلة العامة"
        assert general.faqs[0].question == "ما هي الشركة ذات المسؤولية المحدودة؟"
        assert general.faqs[1].question == "Do I need to be a US citizen?"
        assert pricing.name == "Pricing & Payments"

    async def test_empty_when_no_content(self, repos):
        assert await build_public_faqs(repos, "en") == []
