"""
Audit trail for back-office mutations.

``AuditLogger.log`` writes one entry in a session of its own, after the
caller's transaction has committed. A failure to write the entry is logged
and swallowed so it never fails the operation being audited.
"""

from __future__ import annotations

from typing import Any, Dict, Iterable, Mapping, Optional

from fastapi import Depends
from fastapi.encoders import jsonable_encoder
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from fivimedia_llc.core.database import get_session_factory
from fivimedia_llc.core.database.entities.audit_logs import AuditLog
from fivimedia_llc.core.database.entities.users import User
from fivimedia_llc.core.logging_config import get_logger
from fivimedia_llc.core.models.domain import AuditAction, AuditEntity

logger = get_logger(__name__)

_ACTION_LABELS = {
    AuditAction.create.value: "Created",
    AuditAction.update.value: "Updated",
    AuditAction.delete.value: "Deleted",
}

_ENTITY_LABELS = {
    AuditEntity.order.value: "Order",
    AuditEntity.pricing.value: "Pricing",
    AuditEntity.user.value: "User",
    AuditEntity.promo_code.value: "Promo Code",
    AuditEntity.state.value: "State",
    AuditEntity.lead.value: "Lead",
    AuditEntity.faq.value: "FAQ",
    AuditEntity.faq_category.value: "FAQ Category",
}

Changes = Dict[str, Dict[str, Any]]


def format_audit_action(action: str) -> str:
    """Human-readable label of an audit action, e.g. ``Created``."""
    return _ACTION_LABELS.get(action, action)


def format_audit_entity(entity: str) -> str:
    """Human-readable label of an audited entity type, e.g. ``Promo Code``."""
    return _ENTITY_LABELS.get(entity, entity)


def create_changes(
    old_values: Mapping[str, Any], new_values: Mapping[str, Any], fields: Iterable[str]
) -> Optional[Changes]:
    """
    Describe which fields differ between two snapshots.

    Args:
        old_values: Field values before the change
        new_values: Field values after the change
        fields: Fields to compare

    Returns:
        ``{field: {"from": old, "to": new}}`` for every differing field, or
        None when nothing changed
    """
    changes: Changes = {}
    for field in fields:
        before = old_values.get(field)
        after = new_values.get(field)
        if before != after:
            changes[field] = {"from": before, "to": after}
    return changes or None


class AuditLogger:
    """Writes audit entries through an independent session."""

    def __init__(self, session_factory: async_sessionmaker[AsyncSession]) -> None:
        self._session_factory = session_factory

    async def log(
        self,
        user: Optional[User],
        action: AuditAction,
        entity: AuditEntity,
        entity_id: Optional[str | int] = None,
        changes: Optional[Changes] = None,
    ) -> None:
        """
        Record an admin action.

        Args:
            user: Admin who performed the action
            action: create, update or delete
            entity: Type of the affected record
            entity_id: Identifier of the affected record
            changes: Optional field-level diff
        """
        entry = AuditLog(
            user_id=user.id if user is not None else None,
            user_email=user.email if user is not None else None,
            action=action.value,
            entity=entity.value,
            entity_id=str(entity_id) if entity_id is not None else None,
            changes=jsonable_encoder(changes) if changes else None,
        )
        try:
            async with self._session_factory() as session:
                session.add(entry)
                await session.commit()
        except Exception as e:
            logger.error(f"Failed to create audit log for {entity.value} {entity_id}: {e}", exc_info=True)


def get_audit_logger(
    session_factory: async_sessionmaker[AsyncSession] = Depends(get_session_factory),
) -> AuditLogger:
    """FastAPI dependency providing the audit logger."""
    return AuditLogger(session_factory)
