"""
Catalogue I/O models for API requests and responses.

Covers states, coverage items, add-ons, quotes and the admin pricing and
state-coverage screens.
"""

from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .common import require_text


class StateRead(BaseModel):
    """Schema for reading a formation state."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    code: str
    name: str
    base_price: float
    is_recommended: bool
    is_active: bool


class AddOnRead(BaseModel):
    """Schema for reading an add-on with both languages (admin)."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    slug: str
    name_en: str
    name_ar: str
    description_en: Optional[str] = None
    description_ar: Optional[str] = None
    price: float
    sort_order: int
    is_active: bool


class AddOnLocalized(BaseModel):
    """Add-on as shown to a customer in one language."""

    slug: str
    name: str
    description: str = ""
    price: float


class AddOnCreate(BaseModel):
    """Schema for creating an add-on."""

    slug: str
    name_en: str
    name_ar: str
    description_en: Optional[str] = None
    description_ar: Optional[str] = None
    price: float = Field(ge=0)

    @field_validator("slug")
    @classmethod
    def _slug_required(cls, value: str) -> str:
        return require_text(value, "Slug is required").strip()

    @field_validator("name_en", "name_ar")
    @classmethod
    def _names_required(cls, value: str) -> str:
        return require_text(value, "Name is required in both languages").strip()


class QuoteRequest(BaseModel):
    """Schema for requesting a price quote."""

    state_code: str = Field(min_length=2, max_length=2)
    add_on_slugs: List[str] = Field(default_factory=list)
    locale: str = "en"


class QuoteResponse(BaseModel):
    """Server-authoritative quote for a state and add-on selection."""

    state_code: str
    state_name: str
    base_price: float
    selected_add_ons: List[AddOnLocalized]
    available_add_ons: List[AddOnLocalized]
    add_on_total: float
    total: float


class CoverageEntry(BaseModel):
    """Localized coverage item included in a state's base price."""

    key: str
    title: str
    description: Optional[str] = None
    processing_time: Optional[str] = None


class CoverageResponse(BaseModel):
    """Coverage of one state."""

    state_code: str
    state_name: str
    base_price: float
    coverage: List[CoverageEntry]


class CoverageItemRead(BaseModel):
    """Schema for reading a coverage item (admin)."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    key: str
    title_en: str
    title_ar: str
    description_en: Optional[str] = None
    description_ar: Optional[str] = None
    sort_order: int


class CoverageItemCreate(BaseModel):
    """Schema for creating a coverage item."""

    key: str
    title_en: str
    title_ar: str
    description_en: Optional[str] = None
    description_ar: Optional[str] = None

    @field_validator("key")
    @classmethod
    def _key_required(cls, value: str) -> str:
        return require_text(value, "Key is required").strip()

    @field_validator("title_en", "title_ar")
    @classmethod
    def _titles_required(cls, value: str) -> str:
        return require_text(value, "Title is required in both languages").strip()


class StateCoverageRead(BaseModel):
    """One cell of the state/coverage-item matrix."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    state_id: int
    coverage_item_id: int
    enabled: bool
    processing_time: Optional[str] = None


class AdminStatesRead(BaseModel):
    """Everything the admin states screen needs."""

    states: List[StateRead]
    coverage_items: List[CoverageItemRead]
    state_coverage: List[StateCoverageRead]


class StateActiveUpdate(BaseModel):
    code: str
    is_active: bool


class StateCoverageUpdate(BaseModel):
    coverage_item_id: int
    enabled: bool
    processing_time: Optional[str] = None


class AdminStatesUpdate(BaseModel):
    """Schema for toggling states and editing one state's coverage."""

    states: Optional[List[StateActiveUpdate]] = None
    state_code: Optional[str] = None
    coverage: Optional[List[StateCoverageUpdate]] = None


class PricingRead(BaseModel):
    """Current prices of all states and add-ons."""

    states: List[StateRead]
    add_ons: List[AddOnRead]


class StatePriceUpdate(BaseModel):
    code: str
    base_price: float = Field(ge=0)


class AddOnPriceUpdate(BaseModel):
    slug: str
    price: float = Field(ge=0)
    name_en: Optional[str] = None
    name_ar: Optional[str] = None
    is_active: Optional[bool] = None


class PricingUpdate(BaseModel):
    """Schema for bulk price updates."""

    states: List[StatePriceUpdate] = Field(default_factory=list)
    add_ons: List[AddOnPriceUpdate] = Field(default_factory=list)
