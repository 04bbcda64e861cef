"""
Admin audit log endpoint.
"""

from __future__ import annotations

from typing import List, Optional

from fastapi import APIRouter, Depends, Query

from fivimedia_llc.core.database.entities.users import User
from fivimedia_llc.core.database.repositories import SqlRepoBundle, get_repos
from fivimedia_llc.core.models.io.audit import AuditLogRead
from fivimedia_llc.server.services.audit import format_audit_action, format_audit_entity
from fivimedia_llc.server.services.auth import get_current_user

router = APIRouter(tags=["admin-audit-log"])


@router.get("", response_model=List[AuditLogRead], summary="List Audit Log")
async def list_audit_log(
    entity: Optional[str] = None,
    user_id: Optional[int] = None,
    page: int = Query(default=1, ge=1),
    limit: int = Query(default=50, ge=1, le=200),
    repos: SqlRepoBundle = Depends(get_repos),
    _: User = Depends(get_current_user),
) -> List[AuditLogRead]:
    """
    List audit entries, newest first.

    - **entity**: Only entries about this entity type (e.g. ``order``).
    - **user_id**: Only entries made by this user.
    """
    entries = await repos.audit_logs.list_newest_first(
        entity=entity, user_id=user_id, limit=limit, offset=(page - 1) * limit
    )
    return [
        AuditLogRead.model_validate(entry).model_copy(
            update={
                "action_label": format_audit_action(entry.action),
                "entity_label": format_audit_entity(entry.entity),
            }
        )
        for entry in entries
    ]
