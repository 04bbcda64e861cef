"""
Admin FAQ category endpoints.
"""

from __future__ import annotations

from typing import List

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy import delete

from fivimedia_llc.core.database.entities.faqs import FaqCategory, FaqCategoryTranslation
from fivimedia_llc.core.database.entities.users import User
from fivimedia_llc.core.database.repositories import SqlRepoBundle, get_repos
from fivimedia_llc.core.models.domain import AuditAction, AuditEntity
from fivimedia_llc.core.models.io.common import SuccessResponse
from fivimedia_llc.core.models.io.faqs import FaqCategoryCreate, FaqCategoryRead, FaqCategoryUpdate
from fivimedia_llc.server.services.audit import AuditLogger, create_changes, get_audit_logger
from fivimedia_llc.server.services.auth import get_current_user
from fivimedia_llc.server.services.faqs import FALLBACK_LOCALE, clean_category_translations

router = APIRouter(tags=["admin-faq-categories"])


def _bad_request(message: str) -> HTTPException:
    return HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=message)


async def _read(repos: SqlRepoBundle, category: FaqCategory, faq_count: int) -> FaqCategoryRead:
    translations = (await repos.faq_categories.translations_for([category.id]))[category.id]
    return FaqCategoryRead(
        id=category.id,
        key=category.key,
        sort_order=category.sort_order,
        is_active=category.is_active,
        faq_count=faq_count,
        translations={t.locale: t.name for t in translations},
    )


async def _get_or_404(repos: SqlRepoBundle, category_id: int) -> FaqCategory:
    category = await repos.faq_categories.get_by_id(category_id)
    if category is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Category not found")
    return category


@router.get("", response_model=List[FaqCategoryRead], summary="List FAQ Categories")
async def list_categories(
    repos: SqlRepoBundle = Depends(get_repos), _: User = Depends(get_current_user)
) -> List[FaqCategoryRead]:
    """All categories in display order, with FAQ counts and names per locale."""
    categories = await repos.faq_categories.list_ordered()
    counts = await repos.faq_categories.faq_counts()
    texts = await repos.faq_categories.translations_for(c.id for c in categories)
    return [
        FaqCategoryRead(
            id=c.id,
            key=c.key,
            sort_order=c.sort_order,
            is_active=c.is_active,
            faq_count=counts.get(c.id, 0),
            translations={t.locale: t.name for t in texts[c.id]},
        )
        for c in categories
    ]


@router.post(
    "",
    response_model=FaqCategoryRead,
    status_code=status.HTTP_201_CREATED,
    summary="Create FAQ Category",
    responses={400: {"description": "Missing key or English name, or duplicate key"}},
)
async def create_category(
    payload: FaqCategoryCreate,
    repos: SqlRepoBundle = Depends(get_repos),
    audit: AuditLogger = Depends(get_audit_logger),
    user: User = Depends(get_current_user),
) -> FaqCategoryRead:
    """
    Create a FAQ category.

    - **key**: Unique identifier.
    - **translations**: ``{locale: name}``; the English name is required.
    """
    if not payload.key or not payload.key.strip():
        raise _bad_request("Category key is required")
    translations = clean_category_translations(payload.translations)
    if FALLBACK_LOCALE not in translations:
        raise _bad_request("English translation is required")

    key = payload.key.strip()
    if await repos.faq_categories.get_by_key(key) is not None:
        raise _bad_request("Category key already exists")

    session = repos.session
    try:
        category = await repos.faq_categories.create(
            FaqCategory(key=key, sort_order=payload.sort_order, is_active=payload.is_active), commit=False
        )
        await repos.faq_categories.replace_translations(category.id, translations)
        await session.commit()
    except Exception:
        await session.rollback()
        raise

    await audit.log(user, AuditAction.create, AuditEntity.faq_category, category.id)
    return await _read(repos, category, faq_count=0)


@router.put(
    "/{category_id}",
    response_model=FaqCategoryRead,
    summary="Update FAQ Category",
    responses={
        400: {"description": "Duplicate key or missing English name"},
        404: {"description": "Category not found"},
    },
)
async def update_category(
    category_id: int,
    payload: FaqCategoryUpdate,
    repos: SqlRepoBundle = Depends(get_repos),
    audit: AuditLogger = Depends(get_audit_logger),
    user: User = Depends(get_current_user),
) -> FaqCategoryRead:
    """
    Update a FAQ category.

    When ``translations`` is given it replaces all existing names.
    """
    category = await _get_or_404(repos, category_id)
    before = {"key": category.key, "sort_order": category.sort_order, "is_active": category.is_active}

    if payload.key is not None:
        key = payload.key.strip()
        if not key:
            raise _bad_request("Category key is required")
        if key != category.key and await repos.faq_categories.get_by_key(key) is not None:
            raise _bad_request("Category key already exists")
        category.key = key
    if payload.sort_order is not None:
        category.sort_order = payload.sort_order
    if payload.is_active is not None:
        category.is_active = payload.is_active

    translations = None
    if payload.translations is not None:
        translations = clean_category_translations(payload.translations)
        if FALLBACK_LOCALE not in translations:
            raise _bad_request("English translation is required")

    session = repos.session
    try:
        await repos.faq_categories.update(category, commit=False)
        if translations is not None:
            await repos.faq_categories.replace_translations(category.id, translations)
        await session.commit()
    except Exception:
        await session.rollback()
        raise

    after = {"key": category.key, "sort_order": category.sort_order, "is_active": category.is_active}
    await audit.log(
        user,
        AuditAction.update,
        AuditEntity.faq_category,
        category.id,
        create_changes(before, after, before.keys()),
    )
    return await _read(repos, category, await repos.faqs.count_for_category(category.id))


@router.delete(
    "/{category_id}",
    response_model=SuccessResponse,
    summary="Delete FAQ Category",
    responses={
        400: {"description": "The category still has FAQs"},
        404: {"description": "Category not found"},
    },
)
async def delete_category(
    category_id: int,
    repos: SqlRepoBundle = Depends(get_repos),
    audit: AuditLogger = Depends(get_audit_logger),
    user: User = Depends(get_current_user),
) -> SuccessResponse:
    """Delete an empty FAQ category and its names."""
    category = await _get_or_404(repos, category_id)
    if await repos.faqs.count_for_category(category.id) > 0:
        raise _bad_request("Cannot delete category with FAQs. Delete FAQs first.")

    session = repos.session
    await session.execute(delete(FaqCategoryTranslation).where(FaqCategoryTranslation.category_id == category.id))
    await session.delete(category)
    await session.commit()

    await audit.log(
        user, AuditAction.delete, AuditEntity.faq_category, category_id, {"key": {"from": category.key, "to": None}}
    )
    return SuccessResponse()
