"""
Repository bundle for dependency injection.

This module provides a convenience bundle of all repository instances
for easy dependency injection in services and API handlers.
"""

from __future__ import annotations

from dataclasses import dataclass

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from ..session import get_session
from .audit_logs import AuditLogRepository
from .catalogue import AddOnRepository, CoverageItemRepository, StateCoverageRepository, StateRepository
from .faqs import FaqCategoryRepository, FaqRepository
from .languages import LanguageRepository
from .leads import LeadRepository
from .orders import OrderRepository, OrderStatusHistoryRepository
from .promo_codes import PromoCodeRepository
from .users import UserRepository


@dataclass(frozen=True)
class SqlRepoBundle:
    """Convenience bundle of all SQL repositories sharing one session."""

    session: AsyncSession
    users: UserRepository
    states: StateRepository
    coverage_items: CoverageItemRepository
    state_coverage: StateCoverageRepository
    add_ons: AddOnRepository
    orders: OrderRepository
    order_history: OrderStatusHistoryRepository
    promo_codes: PromoCodeRepository
    languages: LanguageRepository
    faq_categories: FaqCategoryRepository
    faqs: FaqRepository
    leads: LeadRepository
    audit_logs: AuditLogRepository


def build_sql_repos_from_session(*, session: AsyncSession) -> SqlRepoBundle:
    """Build a SqlRepoBundle from an existing session.

    Args:
        session: Existing async session

    Returns:
        Bundle containing all repository instances
    """
    return SqlRepoBundle(
        session=session,
        users=UserRepository(session),
        states=StateRepository(session),
        coverage_items=CoverageItemRepository(session),
        state_coverage=StateCoverageRepository(session),
        add_ons=AddOnRepository(session),
        orders=OrderRepository(session),
        order_history=OrderStatusHistoryRepository(session),
        promo_codes=PromoCodeRepository(session),
        languages=LanguageRepository(session),
        faq_categories=FaqCategoryRepository(session),
        faqs=FaqRepository(session),
        leads=LeadRepository(session),
        audit_logs=AuditLogRepository(session),
    )


async def get_repos(session: AsyncSession = Depends(get_session)) -> SqlRepoBundle:
    """FastAPI dependency yielding the repository bundle for the request session."""
    return build_sql_repos_from_session(session=session)
