"""Domain enums for the ordering and back-office models."""

from __future__ import annotations

from enum import Enum


class OrderStatus(str, Enum):
    """
    Lifecycle status of an LLC formation order.

    Every transition is recorded in the order status history.
    """

    pending = "pending"
    processing = "processing"
    completed = "completed"
    cancelled = "cancelled"


class LeadStatus(str, Enum):
    """Follow-up status of a contact form submission."""

    new = "new"
    contacted = "contacted"
    closed = "closed"


class PromoCodeType(str, Enum):
    """How a promo code's value is applied to an order total."""

    percentage = "percentage"  # value is a percent of the order total
    fixed = "fixed"  # value is an amount in dollars


class TextDirection(str, Enum):
    """Writing direction of a site language."""

    ltr = "ltr"
    rtl = "rtl"


class UserRole(str, Enum):
    """Back-office user roles."""

    admin = "admin"


class AuditAction(str, Enum):
    """Kind of change recorded in the audit log."""

    create = "create"
    update = "update"
    delete = "delete"


class AuditEntity(str, Enum):
    """Type of record an audit log entry refers to."""

    order = "order"
    pricing = "pricing"
    user = "user"
    promo_code = "promo_code"
    state = "state"
    lead = "lead"
    faq = "faq"
    faq_category = "faq_category"
