"""
Audit log entity model.

Entries are written after back-office mutations and are never updated.
"""

from __future__ import annotations

from datetime import datetime
from typing import Any, Dict, Optional

from sqlalchemy import JSON, DateTime
from sqlmodel import Field

from ..base import Base, utc_now_naive


class AuditLog(Base, table=True):
    """Record of who changed what in the back office.

    Table: audit_logs
    """

    __tablename__ = "audit_logs"
    __table_args__ = ({"extend_existing": True},)

    id: Optional[int] = Field(default=None, primary_key=True)
    user_id: Optional[int] = Field(default=None, index=True)
    user_email: Optional[str] = Field(default=None, max_length=255)
    action: str = Field(description="create, update or delete")
    entity: str = Field(index=True)
    entity_id: Optional[str] = Field(default=None, max_length=64)
    changes: Optional[Dict[str, Any]] = Field(default=None, sa_type=JSON)

    created_at: datetime = Field(default_factory=utc_now_naive, index=True, sa_type=DateTime())
