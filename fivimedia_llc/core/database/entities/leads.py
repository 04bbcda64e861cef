"""
Lead entity model.

A lead is a message left through the public contact form.
"""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from sqlalchemy import DateTime
from sqlmodel import Field

from ..base import Base, utc_now_naive


class ContactSubmission(Base, table=True):
    """Contact form submission tracked as a sales lead.

    Table: contact_submissions
    """

    __tablename__ = "contact_submissions"
    __table_args__ = ({"extend_existing": True},)

    id: Optional[int] = Field(default=None, primary_key=True)
    name: str = Field(max_length=100)
    email: str = Field(max_length=255, index=True)
    message: str
    status: str = Field(default="new", index=True)
    notes: Optional[str] = Field(default=None)

    created_at: datetime = Field(default_factory=utc_now_naive, index=True, sa_type=DateTime())
    updated_at: datetime = Field(default_factory=utc_now_naive, sa_column_kwargs={"onupdate": utc_now_naive}, sa_type=DateTime())
