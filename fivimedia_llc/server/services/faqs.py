"""
FAQ content assembly.

Builds the public FAQ page in one language and normalizes translation maps
submitted from the back office.
"""

from __future__ import annotations

from typing import Dict, List, Mapping

from fivimedia_llc.core.database.repositories.bundle import SqlRepoBundle
from fivimedia_llc.core.errors import ValidationError
from fivimedia_llc.core.models.io.faqs import FaqCategoryPublic, FaqPublic, FaqText

FALLBACK_LOCALE = "en"


def clean_category_translations(translations: Mapping[str, str]) -> Dict[str, str]:
    """Strip names and drop blank ones."""
    return {locale: name.strip() for locale, name in translations.items() if name and name.strip()}


def clean_faq_translations(translations: Mapping[str, FaqText]) -> Dict[str, Dict[str, str]]:
    """Strip questions and answers and drop locales where both are blank."""
    cleaned: Dict[str, Dict[str, str]] = {}
    for locale, text in translations.items():
        question = (text.question or "").strip()
        answer = (text.answer or "").strip()
        if question or answer:
            cleaned[locale] = {"question": question, "answer": answer}
    return cleaned


def require_english_faq(translations: Mapping[str, Dict[str, str]]) -> None:
    english = translations.get(FALLBACK_LOCALE)
    if not english or not english["question"] or not english["answer"]:
        raise ValidationError("English question and answer are required")


async def build_public_faqs(repos: SqlRepoBundle, locale: str) -> List[FaqCategoryPublic]:
    """
    Active FAQ categories with their active FAQs in ``locale``.

    Missing translations fall back to English, then to the category key or
    an empty string. Categories without active FAQs are left out.
    """
    categories = await repos.faq_categories.list_ordered(active_only=True)
    faqs = await repos.faqs.list_ordered(active_only=True)
    category_texts = await repos.faq_categories.translations_for(c.id for c in categories)
    faq_texts = await repos.faqs.translations_for(f.id for f in faqs)

    faqs_by_category: Dict[int, List[FaqPublic]] = {}
    for faq in faqs:
        by_locale = {t.locale: t for t in faq_texts.get(faq.id, [])}
        text = by_locale.get(locale) or by_locale.get(FALLBACK_LOCALE)
        faqs_by_category.setdefault(faq.category_id, []).append(
            FaqPublic(
                id=faq.id,
                question=text.question if text else "",
                answer=text.answer if text else "",
            )
        )

    result: List[FaqCategoryPublic] = []
    for category in categories:
        entries = faqs_by_category.get(category.id)
        if not entries:
            continue
        names = {t.locale: t.name for t in category_texts.get(category.id, [])}
        name = names.get(locale) or names.get(FALLBACK_LOCALE) or category.key
        result.append(FaqCategoryPublic(id=category.id, key=category.key, name=name, faqs=entries))
    return result
