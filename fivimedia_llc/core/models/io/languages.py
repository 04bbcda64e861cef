"""
Language I/O models for API requests and responses.
"""

from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, ConfigDict


class LanguageRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    code: str
    name: str
    direction: str
    is_active: bool
    is_default: bool
    sort_order: int


class LanguagePublic(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    code: str
    name: str
    direction: str
    is_default: bool


class LanguageCreate(BaseModel):
    code: Optional[str] = None
    name: Optional[str] = None
    direction: Optional[str] = None


class LanguageUpdateItem(BaseModel):
    id: int
    name: Optional[str] = None
    direction: Optional[str] = None
    is_active: bool
    is_default: bool
    sort_order: Optional[int] = None


class LanguageBulkUpdate(BaseModel):
    """Schema for saving the whole language table at once."""

    languages: List[LanguageUpdateItem]
