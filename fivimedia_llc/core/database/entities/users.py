"""
Back-office user entity.

Admin users sign in to the back office with an email and a bcrypt password
hash. Every mutation they make is attributed to them in the audit log.
"""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from sqlalchemy import DateTime
from sqlmodel import Field

from ..base import Base, utc_now_naive


class User(Base, table=True):
    """Admin user account.

    Table: users
    """

    __tablename__ = "users"
    __table_args__ = ({"extend_existing": True},)

    id: Optional[int] = Field(default=None, primary_key=True)
    email: str = Field(unique=True, index=True, max_length=255, description="Login email")
    password_hash: str = Field(description="bcrypt hash of the password")
    name: Optional[str] = Field(default=None, max_length=255)
    role: str = Field(default="admin", description="Back-office role")

    created_at: datetime = Field(default_factory=utc_now_naive, sa_type=DateTime())
    updated_at: datetime = Field(default_factory=utc_now_naive, sa_column_kwargs={"onupdate": utc_now_naive}, sa_type=DateTime())
