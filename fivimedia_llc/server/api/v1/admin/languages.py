"""
Admin language endpoints.
"""

from __future__ import annotations

from typing import List

from fastapi import APIRouter, Depends, HTTPException, status

from fivimedia_llc.core.database.entities.languages import Language
from fivimedia_llc.core.database.entities.users import User
from fivimedia_llc.core.database.repositories import SqlRepoBundle, get_repos
from fivimedia_llc.core.models.domain import TextDirection
from fivimedia_llc.core.models.io.languages import LanguageBulkUpdate, LanguageCreate, LanguageRead
from fivimedia_llc.server.services.auth import get_current_user
from fivimedia_llc.server.services.languages import validate_language_settings

router = APIRouter(tags=["admin-languages"])


@router.get("", response_model=List[LanguageRead], summary="List Languages")
async def list_languages(
    repos: SqlRepoBundle = Depends(get_repos), _: User = Depends(get_current_user)
) -> List[LanguageRead]:
    """All languages, active or not, in display order."""
    return [LanguageRead.model_validate(lang) for lang in await repos.languages.list_ordered()]


@router.post(
    "",
    response_model=LanguageRead,
    status_code=status.HTTP_201_CREATED,
    summary="Add Language",
    responses={400: {"description": "Missing fields or duplicate code"}},
)
async def create_language(
    payload: LanguageCreate,
    repos: SqlRepoBundle = Depends(get_repos),
    _: User = Depends(get_current_user),
) -> LanguageRead:
    """
    Add a language.

    - **code**: Locale code, stored lower-case.
    - **name**: Display name in the language itself.
    - **direction**: ``ltr`` (default) or ``rtl``.
    """
    if not payload.code or not payload.code.strip() or not payload.name or not payload.name.strip():
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Code and name are required")

    code = payload.code.strip().lower()
    if await repos.languages.get_by_code(code) is not None:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Language code already exists")

    direction = payload.direction or TextDirection.ltr.value
    if direction not in {d.value for d in TextDirection}:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Direction must be 'ltr' or 'rtl'")

    language = Language(
        code=code,
        name=payload.name.strip(),
        direction=direction,
        is_active=True,
        is_default=False,
        sort_order=await repos.languages.max_sort_order() + 1,
    )
    return LanguageRead.model_validate(await repos.languages.create(language))


@router.put(
    "",
    response_model=List[LanguageRead],
    summary="Update Languages",
    description="Save the language table. At least one language must be active and exactly one must be the default.",
    responses={400: {"description": "Active/default rules violated"}},
)
async def update_languages(
    payload: LanguageBulkUpdate,
    repos: SqlRepoBundle = Depends(get_repos),
    _: User = Depends(get_current_user),
) -> List[LanguageRead]:
    """
    Update languages in bulk.

    The chosen default replaces any previous default, including languages
    left out of the request.
    """
    validate_language_settings(payload.languages)

    session = repos.session
    by_id = {lang.id: lang for lang in await repos.languages.list_ordered()}
    default_id = next(item.id for item in payload.languages if item.is_default)
    if default_id not in by_id:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Language not found")

    for item in payload.languages:
        language = by_id.get(item.id)
        if language is None:
            continue
        if item.name:
            language.name = item.name
        if item.direction in {d.value for d in TextDirection}:
            language.direction = item.direction
        if item.sort_order is not None:
            language.sort_order = item.sort_order
        language.is_active = item.is_active

    for language in by_id.values():
        language.is_default = language.id == default_id
        session.add(language)

    await session.commit()
    return [LanguageRead.model_validate(lang) for lang in await repos.languages.list_ordered()]
