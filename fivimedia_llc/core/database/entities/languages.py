"""
Site language entity model.
"""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from sqlalchemy import DateTime
from sqlmodel import Field

from ..base import Base, utc_now_naive


class Language(Base, table=True):
    """Language the public site can be browsed in.

    Table: languages
    """

    __tablename__ = "languages"
    __table_args__ = ({"extend_existing": True},)

    id: Optional[int] = Field(default=None, primary_key=True)
    code: str = Field(unique=True, index=True, max_length=10, description="Lower-case locale code")
    name: str = Field(max_length=100)
    direction: str = Field(default="ltr", max_length=3)
    is_active: bool = Field(default=True)
    is_default: bool = Field(default=False)
    sort_order: int = Field(default=0)

    created_at: datetime = Field(default_factory=utc_now_naive, sa_type=DateTime())
    updated_at: datetime = Field(default_factory=utc_now_naive, sa_column_kwargs={"onupdate": utc_now_naive}, sa_type=DateTime())
