"""
Helpers for picking the Arabic or English text of bilingual catalogue rows.
"""

from __future__ import annotations

from typing import Optional

from fivimedia_llc.core.database.entities.catalogue import AddOn, CoverageItem, StateCoverage
from fivimedia_llc.core.models.io.catalogue import AddOnLocalized, CoverageEntry

ARABIC = "ar"
DEFAULT_LOCALE = "en"


def pick(locale: str, english: Optional[str], arabic: Optional[str]) -> Optional[str]:
    """Arabic text when ``locale`` is Arabic, English otherwise."""
    return arabic if locale == ARABIC else english


def localize_add_on(add_on: AddOn, locale: str = DEFAULT_LOCALE) -> AddOnLocalized:
    return AddOnLocalized(
        slug=add_on.slug,
        name=pick(locale, add_on.name_en, add_on.name_ar) or add_on.name_en,
        description=pick(locale, add_on.description_en, add_on.description_ar) or "",
        price=add_on.price,
    )


def localize_coverage(row: StateCoverage, item: CoverageItem, locale: str = DEFAULT_LOCALE) -> CoverageEntry:
    return CoverageEntry(
        key=item.key,
        title=pick(locale, item.title_en, item.title_ar) or item.title_en,
        description=pick(locale, item.description_en, item.description_ar),
        processing_time=row.processing_time,
    )
