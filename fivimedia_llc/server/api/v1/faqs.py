"""
Public FAQ endpoint.
"""

from __future__ import annotations

from typing import List

from fastapi import APIRouter, Depends

from fivimedia_llc.core.database.repositories import SqlRepoBundle, get_repos
from fivimedia_llc.core.models.io.faqs import FaqCategoryPublic
from fivimedia_llc.server.services.faqs import FALLBACK_LOCALE, build_public_faqs

router = APIRouter(tags=["faqs"])


@router.get(
    "",
    response_model=List[FaqCategoryPublic],
    summary="List FAQs",
    description="Active FAQ categories with their active FAQs in the requested language.",
)
async def list_faqs(locale: str = FALLBACK_LOCALE, repos: SqlRepoBundle = Depends(get_repos)) -> List[FaqCategoryPublic]:
    """
    List FAQs grouped by category.

    Texts missing in ``locale`` fall back to English.
    """
    return await build_public_faqs(repos, locale)
