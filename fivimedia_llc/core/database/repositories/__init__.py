"""
Repositories for the ordering service.

Each repository wraps one aggregate. ``SqlRepoBundle`` groups them over a
single session so a request can compose them inside one transaction.
"""

from .audit_logs import AuditLogRepository
from .base import BaseRepository, QueryBuilder
from .bundle import SqlRepoBundle, build_sql_repos_from_session, get_repos
from .catalogue import AddOnRepository, CoverageItemRepository, StateCoverageRepository, StateRepository
from .faqs import FaqCategoryRepository, FaqRepository
from .languages import LanguageRepository
from .leads import LeadRepository
from .orders import OrderRepository, OrderStatusHistoryRepository
from .promo_codes import PromoCodeRepository
from .users import UserRepository

__all__ = [
    "AddOnRepository",
    "AuditLogRepository",
    "BaseRepository",
    "CoverageItemRepository",
    "FaqCategoryRepository",
    "FaqRepository",
    "LanguageRepository",
    "LeadRepository",
    "OrderRepository",
    "OrderStatusHistoryRepository",
    "PromoCodeRepository",
    "QueryBuilder",
    "SqlRepoBundle",
    "StateCoverageRepository",
    "StateRepository",
    "UserRepository",
    "build_sql_repos_from_session",
    "get_repos",
]
