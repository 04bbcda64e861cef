"""
Admin pricing endpoints.

Edit state base prices and add-on prices in bulk.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends

from fivimedia_llc.core.database.entities.users import User
from fivimedia_llc.core.database.repositories import SqlRepoBundle, get_repos
from fivimedia_llc.core.logging_config import get_logger
from fivimedia_llc.core.models.domain import AuditAction, AuditEntity
from fivimedia_llc.core.models.io.catalogue import AddOnRead, PricingRead, PricingUpdate, StateRead
from fivimedia_llc.server.services.audit import AuditLogger, get_audit_logger
from fivimedia_llc.server.services.auth import get_current_user

logger = get_logger(__name__)

router = APIRouter(tags=["admin-pricing"])


async def _pricing(repos: SqlRepoBundle) -> PricingRead:
    return PricingRead(
        states=[StateRead.model_validate(s) for s in await repos.states.list_by_name()],
        add_ons=[AddOnRead.model_validate(a) for a in await repos.add_ons.list_ordered()],
    )


@router.get("", response_model=PricingRead, summary="Get Pricing")
async def get_pricing(repos: SqlRepoBundle = Depends(get_repos), _: User = Depends(get_current_user)) -> PricingRead:
    """All states by name and all add-ons in display order."""
    return await _pricing(repos)


@router.put(
    "",
    response_model=PricingRead,
    summary="Update Pricing",
    description="Update state base prices and add-on prices, names and availability in one request.",
)
async def update_pricing(
    update: PricingUpdate,
    repos: SqlRepoBundle = Depends(get_repos),
    audit: AuditLogger = Depends(get_audit_logger),
    user: User = Depends(get_current_user),
) -> PricingRead:
    """
    Update prices.

    Unknown state codes and add-on slugs are skipped. Add-on names and the
    active flag are only changed when provided.
    """
    changes = {}
    for item in update.states:
        state = await repos.states.get_by_code(item.code)
        if state is None:
            logger.warning(f"Pricing update skipped unknown state {item.code!r}")
            continue
        if state.base_price != item.base_price:
            changes[f"state:{state.code}"] = {"from": state.base_price, "to": item.base_price}
            state.base_price = item.base_price
            repos.session.add(state)

    for item in update.add_ons:
        add_on = await repos.add_ons.get_by_slug(item.slug)
        if add_on is None:
            logger.warning(f"Pricing update skipped unknown add-on {item.slug!r}")
            continue
        if add_on.price != item.price:
            changes[f"add_on:{add_on.slug}"] = {"from": add_on.price, "to": item.price}
        add_on.price = item.price
        if item.name_en is not None:
            add_on.name_en = item.name_en
        if item.name_ar is not None:
            add_on.name_ar = item.name_ar
        if item.is_active is not None:
            add_on.is_active = item.is_active
        repos.session.add(add_on)

    await repos.session.commit()
    await audit.log(user, AuditAction.update, AuditEntity.pricing, "pricing", changes or None)
    return await _pricing(repos)
