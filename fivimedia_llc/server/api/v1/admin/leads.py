"""
Admin lead endpoints.
"""

from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query, status

from fivimedia_llc.core.database.entities.users import User
from fivimedia_llc.core.database.repositories import SqlRepoBundle, get_repos
from fivimedia_llc.core.models.domain import AuditAction, AuditEntity, LeadStatus
from fivimedia_llc.core.models.io.common import Pagination
from fivimedia_llc.core.models.io.leads import LeadPage, LeadRead, LeadUpdate
from fivimedia_llc.server.services.audit import AuditLogger, get_audit_logger
from fivimedia_llc.server.services.auth import get_current_user

router = APIRouter(tags=["admin-leads"])


@router.get("", response_model=LeadPage, summary="List Leads")
async def list_leads(
    status_filter: Optional[str] = Query(default=None, alias="status"),
    search: Optional[str] = None,
    page: int = Query(default=1, ge=1),
    limit: int = Query(default=25, ge=1, le=100),
    repos: SqlRepoBundle = Depends(get_repos),
    _: User = Depends(get_current_user),
) -> LeadPage:
    """
    List leads, newest first.

    - **status**: Only leads with this status.
    - **search**: Matches the name or email, case-insensitively.
    - **page** / **limit**: Pagination, 25 per page by default.
    """
    leads, total = await repos.leads.search(
        status=status_filter, search=search.strip() if search else None, limit=limit, offset=(page - 1) * limit
    )
    return LeadPage(
        leads=[LeadRead.model_validate(lead) for lead in leads],
        pagination=Pagination.build(page=page, limit=limit, total_count=total),
    )


@router.put(
    "/{lead_id}",
    response_model=LeadRead,
    summary="Update Lead",
    responses={
        400: {"description": "Invalid status"},
        404: {"description": "Lead not found"},
    },
)
async def update_lead(
    lead_id: int,
    payload: LeadUpdate,
    repos: SqlRepoBundle = Depends(get_repos),
    audit: AuditLogger = Depends(get_audit_logger),
    user: User = Depends(get_current_user),
) -> LeadRead:
    """
    Update a lead's status and notes.

    - **status**: ``new``, ``contacted`` or ``closed``.
    - **notes**: Free-form staff notes.

    Only fields that actually change are written.
    """
    lead = await repos.leads.get_by_id(lead_id)
    if lead is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Lead not found")

    changes = {}
    if payload.status is not None and payload.status != lead.status:
        if payload.status not in {s.value for s in LeadStatus}:
            raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Invalid status")
        changes["status"] = {"from": lead.status, "to": payload.status}
        lead.status = payload.status
    if payload.notes is not None and payload.notes != (lead.notes or ""):
        changes["notes"] = {"from": lead.notes, "to": payload.notes}
        lead.notes = payload.notes

    if changes:
        lead = await repos.leads.update(lead)
        await audit.log(user, AuditAction.update, AuditEntity.lead, lead.id, changes)
    return LeadRead.model_validate(lead)
