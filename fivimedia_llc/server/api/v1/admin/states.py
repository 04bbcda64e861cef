"""
Admin state and coverage endpoints.

Toggle which states are offered and edit the coverage matrix of a state.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, status

from fivimedia_llc.core.database.entities.catalogue import StateCoverage
from fivimedia_llc.core.database.entities.users import User
from fivimedia_llc.core.database.repositories import SqlRepoBundle, get_repos
from fivimedia_llc.core.models.domain import AuditAction, AuditEntity
from fivimedia_llc.core.models.io.catalogue import (
    AdminStatesRead,
    AdminStatesUpdate,
    CoverageItemRead,
    StateCoverageRead,
    StateRead,
)
from fivimedia_llc.server.services.audit import AuditLogger, get_audit_logger
from fivimedia_llc.server.services.auth import get_current_user

router = APIRouter(tags=["admin-states"])


async def _states_screen(repos: SqlRepoBundle) -> AdminStatesRead:
    return AdminStatesRead(
        states=[StateRead.model_validate(s) for s in await repos.states.list_by_name()],
        coverage_items=[CoverageItemRead.model_validate(c) for c in await repos.coverage_items.list_ordered()],
        state_coverage=[StateCoverageRead.model_validate(r) for r in await repos.state_coverage.list_all()],
    )


@router.get("", response_model=AdminStatesRead, summary="Get States and Coverage")
async def get_states(repos: SqlRepoBundle = Depends(get_repos), _: User = Depends(get_current_user)) -> AdminStatesRead:
    """All states, all coverage items and the full state/coverage matrix."""
    return await _states_screen(repos)


@router.put(
    "",
    response_model=AdminStatesRead,
    summary="Update States and Coverage",
    description="Toggle states on or off and upsert the coverage rows of one state.",
    responses={400: {"description": "Unknown state code"}},
)
async def update_states(
    update: AdminStatesUpdate,
    repos: SqlRepoBundle = Depends(get_repos),
    audit: AuditLogger = Depends(get_audit_logger),
    user: User = Depends(get_current_user),
) -> AdminStatesRead:
    """
    Update states and coverage.

    - **states**: ``[{code, is_active}]`` toggles. Unknown codes are skipped.
    - **state_code** + **coverage**: coverage rows of that state to create or update.
    """
    session = repos.session
    changes = {}

    for item in update.states or []:
        state = await repos.states.get_by_code(item.code)
        if state is not None and state.is_active != item.is_active:
            changes[state.code] = {"from": state.is_active, "to": item.is_active}
            state.is_active = item.is_active
            session.add(state)

    if update.state_code and update.coverage is not None:
        state = await repos.states.get_by_code(update.state_code)
        if state is None:
            await session.rollback()
            raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Invalid state")

        for cell in update.coverage:
            if await repos.coverage_items.get_by_id(cell.coverage_item_id) is None:
                await session.rollback()
                raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Invalid coverage item")
            row = await repos.state_coverage.get_pair(state.id, cell.coverage_item_id)
            if row is None:
                row = StateCoverage(state_id=state.id, coverage_item_id=cell.coverage_item_id)
            row.enabled = cell.enabled
            row.processing_time = cell.processing_time or None
            session.add(row)
        changes[f"{state.code}:coverage"] = {"from": None, "to": len(update.coverage)}

    await session.commit()
    if changes:
        await audit.log(user, AuditAction.update, AuditEntity.state, update.state_code, changes)
    return await _states_screen(repos)
