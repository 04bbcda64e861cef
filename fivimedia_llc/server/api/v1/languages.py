"""
Public language listing.
"""

from __future__ import annotations

from typing import List

from fastapi import APIRouter, Depends

from fivimedia_llc.core.database.repositories import SqlRepoBundle, get_repos
from fivimedia_llc.core.models.io.languages import LanguagePublic

router = APIRouter(tags=["languages"])


@router.get(
    "",
    response_model=List[LanguagePublic],
    summary="List Languages",
    description="Active site languages in display order.",
)
async def list_languages(repos: SqlRepoBundle = Depends(get_repos)) -> List[LanguagePublic]:
    """List the languages the site can be browsed in."""
    return [LanguagePublic.model_validate(lang) for lang in await repos.languages.list_ordered(active_only=True)]
