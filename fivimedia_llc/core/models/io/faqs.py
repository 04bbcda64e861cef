"""
FAQ I/O models for API requests and responses.

Translations are exchanged as maps keyed by locale code.
"""

from __future__ import annotations

from typing import Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field


class FaqText(BaseModel):
    question: str = ""
    answer: str = ""


class FaqPublic(BaseModel):
    id: int
    question: str
    answer: str


class FaqCategoryPublic(BaseModel):
    """Active category with its active FAQs in one language."""

    id: int
    key: str
    name: str
    faqs: List[FaqPublic]


class FaqCategoryRead(BaseModel):
    """Schema for reading a FAQ category (admin)."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    key: str
    sort_order: int
    is_active: bool
    faq_count: int = 0
    translations: Dict[str, str] = Field(default_factory=dict)


class FaqCategoryCreate(BaseModel):
    key: Optional[str] = None
    sort_order: int = 0
    is_active: bool = True
    translations: Dict[str, str] = Field(default_factory=dict)


class FaqCategoryUpdate(BaseModel):
    key: Optional[str] = None
    sort_order: Optional[int] = None
    is_active: Optional[bool] = None
    translations: Optional[Dict[str, str]] = None


class FaqRead(BaseModel):
    """Schema for reading a FAQ with all translations (admin)."""

    id: int
    category_id: int
    sort_order: int
    is_active: bool
    translations: Dict[str, FaqText] = Field(default_factory=dict)


class FaqCreate(BaseModel):
    category_id: Optional[int] = None
    sort_order: Optional[int] = None
    is_active: bool = True
    translations: Dict[str, FaqText] = Field(default_factory=dict)


class FaqUpdate(BaseModel):
    category_id: Optional[int] = None
    sort_order: Optional[int] = None
    is_active: Optional[bool] = None
    translations: Optional[Dict[str, FaqText]] = None
