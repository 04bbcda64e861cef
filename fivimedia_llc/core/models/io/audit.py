"""
Audit log I/O models.
"""

from __future__ import annotations

from datetime import datetime
from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict


class AuditLogRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    user_id: Optional[int] = None
    user_email: Optional[str] = None
    action: str
    action_label: str = ""
    entity: str
    entity_label: str = ""
    entity_id: Optional[str] = None
    changes: Optional[Dict[str, Any]] = None
    created_at: datetime
