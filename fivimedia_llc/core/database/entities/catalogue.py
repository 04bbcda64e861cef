"""
Catalogue entity models.

This module contains the entities describing what can be ordered:

- ``State``: a US state with its base formation price
- ``CoverageItem``: a service bundled into the base price (EIN filing, ...)
- ``StateCoverage``: per-state availability and processing time of a coverage item
- ``AddOn``: an optional paid extra
"""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from sqlalchemy import DateTime, UniqueConstraint
from sqlmodel import Field

from ..base import Base, utc_now_naive


class State(Base, table=True):
    """US state an LLC can be formed in.

    Table: states
    """

    __tablename__ = "states"
    __table_args__ = ({"extend_existing": True},)

    id: Optional[int] = Field(default=None, primary_key=True)
    code: str = Field(unique=True, index=True, max_length=2, description="Two-letter state code")
    name: str = Field(max_length=100)
    base_price: float = Field(ge=0, description="Formation price in USD")
    is_recommended: bool = Field(default=False)
    is_active: bool = Field(default=True)

    created_at: datetime = Field(default_factory=utc_now_naive, sa_type=DateTime())
    updated_at: datetime = Field(default_factory=utc_now_naive, sa_column_kwargs={"onupdate": utc_now_naive}, sa_type=DateTime())


class CoverageItem(Base, table=True):
    """Service included in the base formation price.

    Table: coverage_items
    """

    __tablename__ = "coverage_items"
    __table_args__ = ({"extend_existing": True},)

    id: Optional[int] = Field(default=None, primary_key=True)
    key: str = Field(unique=True, index=True, max_length=100)
    title_en: str
    title_ar: str
    description_en: Optional[str] = Field(default=None)
    description_ar: Optional[str] = Field(default=None)
    sort_order: int = Field(default=0)

    created_at: datetime = Field(default_factory=utc_now_naive, sa_type=DateTime())
    updated_at: datetime = Field(default_factory=utc_now_naive, sa_column_kwargs={"onupdate": utc_now_naive}, sa_type=DateTime())


class StateCoverage(Base, table=True):
    """Whether a coverage item is offered in a state, and how long it takes.

    Table: state_coverage
    """

    __tablename__ = "state_coverage"
    __table_args__ = (
        UniqueConstraint("state_id", "coverage_item_id", name="uq_state_coverage_state_item"),
        {"extend_existing": True},
    )

    id: Optional[int] = Field(default=None, primary_key=True)
    state_id: int = Field(foreign_key="states.id", index=True)
    coverage_item_id: int = Field(foreign_key="coverage_items.id", index=True)
    enabled: bool = Field(default=True)
    processing_time: Optional[str] = Field(default=None, max_length=100)


class AddOn(Base, table=True):
    """Optional paid extra selectable in the order wizard.

    Table: add_ons
    """

    __tablename__ = "add_ons"
    __table_args__ = ({"extend_existing": True},)

    id: Optional[int] = Field(default=None, primary_key=True)
    slug: str = Field(unique=True, index=True, max_length=100)
    name_en: str
    name_ar: str
    description_en: Optional[str] = Field(default=None)
    description_ar: Optional[str] = Field(default=None)
    price: float = Field(ge=0)
    sort_order: int = Field(default=0)
    is_active: bool = Field(default=True)

    created_at: datetime = Field(default_factory=utc_now_naive, sa_type=DateTime())
    updated_at: datetime = Field(default_factory=utc_now_naive, sa_column_kwargs={"onupdate": utc_now_naive}, sa_type=DateTime())
