"""Domain enums shared between entities, services and API models.

The values are persisted as plain strings so they stay readable in the
database and in the audit log.
"""

from .enums import (
    AuditAction,
    AuditEntity,
    LeadStatus,
    OrderStatus,
    PromoCodeType,
    TextDirection,
    UserRole,
)

__all__ = [
    "AuditAction",
    "AuditEntity",
    "LeadStatus",
    "OrderStatus",
    "PromoCodeType",
    "TextDirection",
    "UserRole",
]
