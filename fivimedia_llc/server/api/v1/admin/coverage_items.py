"""
Admin coverage item endpoints.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, status

from fivimedia_llc.core.database.entities.catalogue import CoverageItem, StateCoverage
from fivimedia_llc.core.database.entities.users import User
from fivimedia_llc.core.database.repositories import SqlRepoBundle, get_repos
from fivimedia_llc.core.models.domain import AuditAction, AuditEntity
from fivimedia_llc.core.models.io.catalogue import CoverageItemCreate, CoverageItemRead
from fivimedia_llc.server.services.audit import AuditLogger, get_audit_logger
from fivimedia_llc.server.services.auth import get_current_user

router = APIRouter(tags=["admin-coverage-items"])


@router.post(
    "",
    response_model=CoverageItemRead,
    status_code=status.HTTP_201_CREATED,
    summary="Create Coverage Item",
    description="Create a coverage item and enable it for every state.",
    responses={
        201: {"description": "Coverage item created"},
        400: {"description": "Invalid data or duplicate key"},
    },
)
async def create_coverage_item(
    payload: CoverageItemCreate,
    repos: SqlRepoBundle = Depends(get_repos),
    audit: AuditLogger = Depends(get_audit_logger),
    user: User = Depends(get_current_user),
) -> CoverageItemRead:
    """
    Create a coverage item.

    A coverage row (enabled, no processing time) is added for each existing
    state in the same transaction.
    """
    if await repos.coverage_items.get_by_key(payload.key) is not None:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST, detail="A coverage item with this key already exists"
        )

    item = CoverageItem(**payload.model_dump(), sort_order=await repos.coverage_items.max_sort_order() + 1)
    session = repos.session
    try:
        item = await repos.coverage_items.create(item, commit=False)
        repos.state_coverage.add_all(
            StateCoverage(state_id=state.id, coverage_item_id=item.id, enabled=True, processing_time=None)
            for state in await repos.states.list_by_name()
        )
        await session.commit()
    except Exception:
        await session.rollback()
        raise

    await audit.log(user, AuditAction.create, AuditEntity.state, item.key)
    return CoverageItemRead.model_validate(item)
