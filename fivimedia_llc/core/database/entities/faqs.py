"""
FAQ entity models.

Categories and questions carry no text themselves. Their display text lives
in per-locale translation rows, one per (parent, locale) pair.
"""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from sqlalchemy import DateTime, UniqueConstraint
from sqlmodel import Field

from ..base import Base, utc_now_naive


class FaqCategory(Base, table=True):
    """Group of FAQs shown under one heading.

    Table: faq_categories
    """

    __tablename__ = "faq_categories"
    __table_args__ = ({"extend_existing": True},)

    id: Optional[int] = Field(default=None, primary_key=True)
    key: str = Field(unique=True, index=True, max_length=100)
    sort_order: int = Field(default=0)
    is_active: bool = Field(default=True)

    created_at: datetime = Field(default_factory=utc_now_naive, sa_type=DateTime())
    updated_at: datetime = Field(default_factory=utc_now_naive, sa_column_kwargs={"onupdate": utc_now_naive}, sa_type=DateTime())


class FaqCategoryTranslation(Base, table=True):
    """Localized name of a FAQ category.

    Table: faq_category_translations
    """

    __tablename__ = "faq_category_translations"
    __table_args__ = (
        UniqueConstraint("category_id", "locale", name="uq_faq_category_translation_locale"),
        {"extend_existing": True},
    )

    id: Optional[int] = Field(default=None, primary_key=True)
    category_id: int = Field(foreign_key="faq_categories.id", index=True)
    locale: str = Field(max_length=10)
    name: str


class Faq(Base, table=True):
    """Single question/answer entry.

    Table: faqs
    """

    __tablename__ = "faqs"
    __table_args__ = ({"extend_existing": True},)

    id: Optional[int] = Field(default=None, primary_key=True)
    category_id: int = Field(foreign_key="faq_categories.id", index=True)
    sort_order: int = Field(default=0)
    is_active: bool = Field(default=True)

    created_at: datetime = Field(default_factory=utc_now_naive, sa_type=DateTime())
    updated_at: datetime = Field(default_factory=utc_now_naive, sa_column_kwargs={"onupdate": utc_now_naive}, sa_type=DateTime())


class FaqTranslation(Base, table=True):
    """Localized question and answer text.

    Table: faq_translations
    """

    __tablename__ = "faq_translations"
    __table_args__ = (
        UniqueConstraint("faq_id", "locale", name="uq_faq_translation_locale"),
        {"extend_existing": True},
    )

    id: Optional[int] = Field(default=None, primary_key=True)
    faq_id: int = Field(foreign_key="faqs.id", index=True)
    locale: str = Field(max_length=10)
    question: str
    answer: str
