"""
Admin promo code endpoints.
"""

from __future__ import annotations

from datetime import timezone
from typing import Any, Dict, List, Optional

from fastapi import APIRouter, Depends, HTTPException, status

from fivimedia_llc.core.database.entities.promo_codes import PromoCode
from fivimedia_llc.core.database.entities.users import User
from fivimedia_llc.core.database.repositories import SqlRepoBundle, get_repos
from fivimedia_llc.core.models.domain import AuditAction, AuditEntity, PromoCodeType
from fivimedia_llc.core.models.io.common import SuccessResponse
from fivimedia_llc.core.models.io.promo_codes import PromoCodeCreate, PromoCodeRead, PromoCodeUpdate
from fivimedia_llc.server.services.audit import AuditLogger, create_changes, get_audit_logger
from fivimedia_llc.server.services.auth import get_current_user

router = APIRouter(tags=["admin-promo-codes"])

_AUDITED_FIELDS = ("code", "type", "value", "usage_limit", "expires_at", "min_order_amount", "is_active")


def _bad_request(message: str) -> HTTPException:
    return HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=message)


def _check_type_and_value(promo_type: str, value: float) -> None:
    if promo_type not in {t.value for t in PromoCodeType}:
        raise _bad_request("Type must be 'percentage' or 'fixed'")
    if promo_type == PromoCodeType.percentage.value and not 0 <= value <= 100:
        raise _bad_request("Percentage must be between 0 and 100")
    if value < 0:
        raise _bad_request("Value must not be negative")


def _normalize(fields: Dict[str, Any]) -> Dict[str, Any]:
    """Upper-case the code, store falsy limits as null and expiry as naive UTC."""
    if fields.get("code") is not None:
        fields["code"] = fields["code"].strip().upper()
    expires_at = fields.get("expires_at")
    if expires_at is not None and expires_at.tzinfo is not None:
        fields["expires_at"] = expires_at.astimezone(timezone.utc).replace(tzinfo=None)
    if "is_active" in fields and fields["is_active"] is None:
        del fields["is_active"]
    for name in ("usage_limit", "min_order_amount"):
        if name in fields and not fields[name]:
            fields[name] = None
    return fields


async def _get_or_404(repos: SqlRepoBundle, promo_id: int) -> PromoCode:
    promo = await repos.promo_codes.get_by_id(promo_id)
    if promo is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Promo code not found")
    return promo


@router.get("", response_model=List[PromoCodeRead], summary="List Promo Codes")
async def list_promo_codes(
    repos: SqlRepoBundle = Depends(get_repos), _: User = Depends(get_current_user)
) -> List[PromoCodeRead]:
    """All promo codes, newest first."""
    return [PromoCodeRead.model_validate(p) for p in await repos.promo_codes.list_newest_first()]


@router.post(
    "",
    response_model=PromoCodeRead,
    status_code=status.HTTP_201_CREATED,
    summary="Create Promo Code",
    responses={400: {"description": "Invalid type/value or duplicate code"}},
)
async def create_promo_code(
    payload: PromoCodeCreate,
    repos: SqlRepoBundle = Depends(get_repos),
    audit: AuditLogger = Depends(get_audit_logger),
    user: User = Depends(get_current_user),
) -> PromoCodeRead:
    """
    Create a promo code.

    - **code**: Stored upper-case, must be unique.
    - **type**: ``percentage`` or ``fixed``.
    - **value**: Percent (0 to 100) or dollar amount.
    - **usage_limit** / **min_order_amount**: Empty or zero means no limit.
    - **expires_at**: Optional expiry (UTC).
    """
    if not payload.code or not payload.code.strip():
        raise _bad_request("Code, type, and value are required")
    _check_type_and_value(payload.type, payload.value)

    fields = _normalize(payload.model_dump())
    if await repos.promo_codes.get_by_code(fields["code"]) is not None:
        raise _bad_request("Promo code already exists")

    promo = await repos.promo_codes.create(PromoCode(**fields))
    await audit.log(user, AuditAction.create, AuditEntity.promo_code, promo.id)
    return PromoCodeRead.model_validate(promo)


@router.put(
    "/{promo_id}",
    response_model=PromoCodeRead,
    summary="Update Promo Code",
    responses={
        400: {"description": "Invalid type/value or duplicate code"},
        404: {"description": "Promo code not found"},
    },
)
async def update_promo_code(
    promo_id: int,
    payload: PromoCodeUpdate,
    repos: SqlRepoBundle = Depends(get_repos),
    audit: AuditLogger = Depends(get_audit_logger),
    user: User = Depends(get_current_user),
) -> PromoCodeRead:
    """
    Update a promo code.

    Only the fields present in the request are changed.
    """
    promo = await _get_or_404(repos, promo_id)
    fields = _normalize(payload.model_dump(exclude_unset=True))

    new_code: Optional[str] = fields.get("code")
    if "code" in fields and not new_code:
        raise _bad_request("Code, type, and value are required")
    if new_code and new_code != promo.code and await repos.promo_codes.get_by_code(new_code) is not None:
        raise _bad_request("Promo code already exists")

    if "type" in fields or "value" in fields:
        if fields.get("type", promo.type) is None or fields.get("value", promo.value) is None:
            raise _bad_request("Code, type, and value are required")
        _check_type_and_value(fields.get("type", promo.type), fields.get("value", promo.value))

    before = promo.model_dump()
    for name, value in fields.items():
        setattr(promo, name, value)
    promo = await repos.promo_codes.update(promo)

    changes = create_changes(before, promo.model_dump(), _AUDITED_FIELDS)
    await audit.log(user, AuditAction.update, AuditEntity.promo_code, promo.id, changes)
    return PromoCodeRead.model_validate(promo)


@router.delete(
    "/{promo_id}",
    response_model=SuccessResponse,
    summary="Delete Promo Code",
    responses={404: {"description": "Promo code not found"}},
)
async def delete_promo_code(
    promo_id: int,
    repos: SqlRepoBundle = Depends(get_repos),
    audit: AuditLogger = Depends(get_audit_logger),
    user: User = Depends(get_current_user),
) -> SuccessResponse:
    """Delete a promo code. Orders keep the code text they were placed with."""
    promo = await _get_or_404(repos, promo_id)
    await repos.promo_codes.delete(promo.id)
    await audit.log(user, AuditAction.delete, AuditEntity.promo_code, promo_id, {"code": {"from": promo.code, "to": None}})
    return SuccessResponse()
