"""
Admin add-on endpoints.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, status

from fivimedia_llc.core.database.entities.catalogue import AddOn
from fivimedia_llc.core.database.entities.users import User
from fivimedia_llc.core.database.repositories import SqlRepoBundle, get_repos
from fivimedia_llc.core.models.domain import AuditAction, AuditEntity
from fivimedia_llc.core.models.io.catalogue import AddOnCreate, AddOnRead
from fivimedia_llc.server.services.audit import AuditLogger, get_audit_logger
from fivimedia_llc.server.services.auth import get_current_user

router = APIRouter(tags=["admin-add-ons"])


@router.post(
    "",
    response_model=AddOnRead,
    status_code=status.HTTP_201_CREATED,
    summary="Create Add-on",
    description="Create a new add-on, placed after the existing ones.",
    responses={
        201: {"description": "Add-on created"},
        400: {"description": "Invalid data or duplicate slug"},
    },
)
async def create_add_on(
    payload: AddOnCreate,
    repos: SqlRepoBundle = Depends(get_repos),
    audit: AuditLogger = Depends(get_audit_logger),
    user: User = Depends(get_current_user),
) -> AddOnRead:
    """
    Create an add-on.

    - **slug**: Unique identifier used in orders.
    - **name_en** / **name_ar**: Display names.
    - **price**: Price in USD, not negative.
    """
    if await repos.add_ons.get_by_slug(payload.slug) is not None:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST, detail="An add-on with this slug already exists"
        )

    add_on = AddOn(
        **payload.model_dump(),
        sort_order=await repos.add_ons.max_sort_order() + 1,
        is_active=True,
    )
    add_on = await repos.add_ons.create(add_on)
    await audit.log(
        user, AuditAction.create, AuditEntity.pricing, add_on.slug, {"price": {"from": None, "to": add_on.price}}
    )
    return AddOnRead.model_validate(add_on)
