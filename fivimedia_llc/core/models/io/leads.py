"""
Lead I/O models for the contact form and the admin leads screen.
"""

from __future__ import annotations

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, field_validator

from .common import Pagination, require_email, require_text


class ContactRequest(BaseModel):
    """Schema for a public contact form submission."""

    name: str
    email: str
    message: str

    @field_validator("name", mode="before")
    @classmethod
    def _name(cls, value):
        value = require_text(value, "Name is required")
        if len(value) > 100:
            raise ValueError("Name must be at most 100 characters")
        return value

    @field_validator("email", mode="before")
    @classmethod
    def _email(cls, value):
        return require_email(value)

    @field_validator("message", mode="before")
    @classmethod
    def _message(cls, value):
        value = require_text(value, "Message is required")
        if len(value) > 5000:
            raise ValueError("Message must be at most 5000 characters")
        return value


class LeadRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    email: str
    message: str
    status: str
    notes: Optional[str] = None
    created_at: datetime
    updated_at: datetime


class LeadPage(BaseModel):
    leads: List[LeadRead]
    pagination: Pagination


class LeadUpdate(BaseModel):
    status: Optional[str] = None
    notes: Optional[str] = None
