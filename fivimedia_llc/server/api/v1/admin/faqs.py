"""
Admin FAQ endpoints.
"""

from __future__ import annotations

from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, status

from fivimedia_llc.core.database.entities.faqs import Faq
from fivimedia_llc.core.database.entities.users import User
from fivimedia_llc.core.database.repositories import SqlRepoBundle, get_repos
from fivimedia_llc.core.errors import ValidationError
from fivimedia_llc.core.models.domain import AuditAction, AuditEntity
from fivimedia_llc.core.models.io.common import SuccessResponse
from fivimedia_llc.core.models.io.faqs import FaqCreate, FaqRead, FaqText, FaqUpdate
from fivimedia_llc.server.services.audit import AuditLogger, create_changes, get_audit_logger
from fivimedia_llc.server.services.auth import get_current_user
from fivimedia_llc.server.services.faqs import clean_faq_translations, require_english_faq

router = APIRouter(tags=["admin-faqs"])


async def _read(repos: SqlRepoBundle, faq: Faq) -> FaqRead:
    translations = (await repos.faqs.translations_for([faq.id]))[faq.id]
    return FaqRead(
        id=faq.id,
        category_id=faq.category_id,
        sort_order=faq.sort_order,
        is_active=faq.is_active,
        translations={t.locale: FaqText(question=t.question, answer=t.answer) for t in translations},
    )


async def _require_category(repos: SqlRepoBundle, category_id: int) -> None:
    if await repos.faq_categories.get_by_id(category_id) is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Category not found")


async def _get_or_404(repos: SqlRepoBundle, faq_id: int) -> Faq:
    faq = await repos.faqs.get_by_id(faq_id)
    if faq is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="FAQ not found")
    return faq


@router.get("", response_model=List[FaqRead], summary="List FAQs")
async def list_faqs(
    category_id: Optional[int] = None,
    repos: SqlRepoBundle = Depends(get_repos),
    _: User = Depends(get_current_user),
) -> List[FaqRead]:
    """All FAQs with every translation, optionally limited to one category."""
    faqs = await repos.faqs.list_ordered(category_id=category_id)
    texts = await repos.faqs.translations_for(f.id for f in faqs)
    return [
        FaqRead(
            id=f.id,
            category_id=f.category_id,
            sort_order=f.sort_order,
            is_active=f.is_active,
            translations={t.locale: FaqText(question=t.question, answer=t.answer) for t in texts[f.id]},
        )
        for f in faqs
    ]


@router.post(
    "",
    response_model=FaqRead,
    status_code=status.HTTP_201_CREATED,
    summary="Create FAQ",
    responses={
        400: {"description": "Missing category or English text"},
        404: {"description": "Category not found"},
    },
)
async def create_faq(
    payload: FaqCreate,
    repos: SqlRepoBundle = Depends(get_repos),
    audit: AuditLogger = Depends(get_audit_logger),
    user: User = Depends(get_current_user),
) -> FaqRead:
    """
    Create a FAQ.

    - **category_id**: Existing category.
    - **translations**: ``{locale: {question, answer}}``; English is required.
    """
    if payload.category_id is None:
        raise ValidationError("Category ID is required")
    translations = clean_faq_translations(payload.translations)
    require_english_faq(translations)
    await _require_category(repos, payload.category_id)

    sort_order = payload.sort_order
    if sort_order is None:
        sort_order = await repos.faqs.max_sort_order_in(payload.category_id) + 1

    session = repos.session
    try:
        faq = await repos.faqs.create(
            Faq(category_id=payload.category_id, sort_order=sort_order, is_active=payload.is_active), commit=False
        )
        await repos.faqs.replace_translations(faq.id, translations)
        await session.commit()
    except Exception:
        await session.rollback()
        raise

    await audit.log(user, AuditAction.create, AuditEntity.faq, faq.id)
    return await _read(repos, faq)


@router.put(
    "/{faq_id}",
    response_model=FaqRead,
    summary="Update FAQ",
    responses={
        400: {"description": "Missing English text"},
        404: {"description": "FAQ or category not found"},
    },
)
async def update_faq(
    faq_id: int,
    payload: FaqUpdate,
    repos: SqlRepoBundle = Depends(get_repos),
    audit: AuditLogger = Depends(get_audit_logger),
    user: User = Depends(get_current_user),
) -> FaqRead:
    """
    Update a FAQ.

    When ``translations`` is given it replaces all existing texts.
    """
    faq = await _get_or_404(repos, faq_id)
    before = {"category_id": faq.category_id, "sort_order": faq.sort_order, "is_active": faq.is_active}

    if payload.category_id is not None and payload.category_id != faq.category_id:
        await _require_category(repos, payload.category_id)
        faq.category_id = payload.category_id
    if payload.sort_order is not None:
        faq.sort_order = payload.sort_order
    if payload.is_active is not None:
        faq.is_active = payload.is_active

    translations = None
    if payload.translations is not None:
        translations = clean_faq_translations(payload.translations)
        require_english_faq(translations)

    session = repos.session
    try:
        await repos.faqs.update(faq, commit=False)
        if translations is not None:
            await repos.faqs.replace_translations(faq.id, translations)
        await session.commit()
    except Exception:
        await session.rollback()
        raise

    after = {"category_id": faq.category_id, "sort_order": faq.sort_order, "is_active": faq.is_active}
    await audit.log(user, AuditAction.update, AuditEntity.faq, faq.id, create_changes(before, after, before.keys()))
    return await _read(repos, faq)


@router.delete(
    "/{faq_id}",
    response_model=SuccessResponse,
    summary="Delete FAQ",
    responses={404: {"description": "FAQ not found"}},
)
async def delete_faq(
    faq_id: int,
    repos: SqlRepoBundle = Depends(get_repos),
    audit: AuditLogger = Depends(get_audit_logger),
    user: User = Depends(get_current_user),
) -> SuccessResponse:
    """Delete a FAQ and its translations."""
    faq = await _get_or_404(repos, faq_id)
    await repos.faqs.delete_with_translations(faq)
    await audit.log(user, AuditAction.delete, AuditEntity.faq, faq_id)
    return SuccessResponse()
