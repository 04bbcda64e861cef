"""
Database entities for the ordering service.

Importing this package registers every table on the shared SQLModel
metadata, which Alembic and ``create_all`` rely on.
"""

from .audit_logs import AuditLog
from .catalogue import AddOn, CoverageItem, State, StateCoverage
from .faqs import Faq, FaqCategory, FaqCategoryTranslation, FaqTranslation
from .languages import Language
from .leads import ContactSubmission
from .orders import Order, OrderStatusHistory
from .promo_codes import PromoCode
from .users import User

__all__ = [
    "AddOn",
    "AuditLog",
    "ContactSubmission",
    "CoverageItem",
    "Faq",
    "FaqCategory",
    "FaqCategoryTranslation",
    "FaqTranslation",
    "Language",
    "Order",
    "OrderStatusHistory",
    "PromoCode",
    "State",
    "StateCoverage",
    "User",
]
