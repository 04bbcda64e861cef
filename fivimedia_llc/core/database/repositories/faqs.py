"""
FAQ repositories.

Data access for FAQ categories, FAQs and their per-locale translations.
"""

from __future__ import annotations

from typing import Dict, Iterable, List, Optional

from sqlalchemy import delete, func
from sqlalchemy.ext.asyncio import AsyncSession
from sqlmodel import select

from ..entities.faqs import Faq, FaqCategory, FaqCategoryTranslation, FaqTranslation
from .base import BaseRepository


class FaqCategoryRepository(BaseRepository[FaqCategory]):
    """Repository for FAQ categories and their translations."""

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session, FaqCategory)

    async def get_by_key(self, key: str) -> Optional[FaqCategory]:
        result = await self.session.execute(select(FaqCategory).where(FaqCategory.key == key))
        return result.scalar_one_or_none()

    async def list_ordered(self, active_only: bool = False) -> List[FaqCategory]:
        stmt = select(FaqCategory).order_by(FaqCategory.sort_order)
        if active_only:
            stmt = stmt.where(FaqCategory.is_active == True)
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def translations_for(self, category_ids: Iterable[int]) -> Dict[int, List[FaqCategoryTranslation]]:
        """Translations grouped by category id."""
        ids = list(category_ids)
        grouped: Dict[int, List[FaqCategoryTranslation]] = {category_id: [] for category_id in ids}
        if not ids:
            return grouped
        stmt = select(FaqCategoryTranslation).where(FaqCategoryTranslation.category_id.in_(ids))
        result = await self.session.execute(stmt)
        for translation in result.scalars().all():
            grouped[translation.category_id].append(translation)
        return grouped

    async def faq_counts(self) -> Dict[int, int]:
        """Number of FAQs per category id."""
        stmt = select(Faq.category_id, func.count(Faq.id)).group_by(Faq.category_id)
        result = await self.session.execute(stmt)
        return {row[0]: row[1] for row in result.all()}

    async def replace_translations(self, category_id: int, translations: Dict[str, str]) -> None:
        """Replace all translations of a category without committing."""
        await self.session.execute(
            delete(FaqCategoryTranslation).where(FaqCategoryTranslation.category_id == category_id)
        )
        self.session.add_all(
            FaqCategoryTranslation(category_id=category_id, locale=locale, name=name)
            for locale, name in translations.items()
        )
        await self.session.flush()


class FaqRepository(BaseRepository[Faq]):
    """Repository for FAQs and their translations."""

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session, Faq)

    async def list_ordered(self, category_id: Optional[int] = None, active_only: bool = False) -> List[Faq]:
        stmt = select(Faq).order_by(Faq.category_id, Faq.sort_order)
        if category_id is not None:
            stmt = stmt.where(Faq.category_id == category_id)
        if active_only:
            stmt = stmt.where(Faq.is_active == True)
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def count_for_category(self, category_id: int) -> int:
        stmt = select(func.count()).select_from(Faq).where(Faq.category_id == category_id)
        result = await self.session.execute(stmt)
        return result.scalar_one()

    async def max_sort_order_in(self, category_id: int) -> int:
        stmt = select(func.max(Faq.sort_order)).where(Faq.category_id == category_id)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none() or 0

    async def translations_for(self, faq_ids: Iterable[int]) -> Dict[int, List[FaqTranslation]]:
        """Translations grouped by FAQ id."""
        ids = list(faq_ids)
        grouped: Dict[int, List[FaqTranslation]] = {faq_id: [] for faq_id in ids}
        if not ids:
            return grouped
        result = await self.session.execute(select(FaqTranslation).where(FaqTranslation.faq_id.in_(ids)))
        for translation in result.scalars().all():
            grouped[translation.faq_id].append(translation)
        return grouped

    async def replace_translations(self, faq_id: int, translations: Dict[str, Dict[str, str]]) -> None:
        """Replace all translations of a FAQ without committing.

        Args:
            faq_id: FAQ identifier
            translations: ``{locale: {"question": ..., "answer": ...}}``
        """
        await self.session.execute(delete(FaqTranslation).where(FaqTranslation.faq_id == faq_id))
        self.session.add_all(
            FaqTranslation(faq_id=faq_id, locale=locale, question=text["question"], answer=text["answer"])
            for locale, text in translations.items()
        )
        await self.session.flush()

    async def delete_with_translations(self, faq: Faq) -> None:
        """Delete a FAQ and its translations in one commit."""
        await self.session.execute(delete(FaqTranslation).where(FaqTranslation.faq_id == faq.id))
        await self.session.delete(faq)
        await self.session.commit()
