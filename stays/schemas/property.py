"""
Pydantic schemas for property listings and the admin property form.
"""
from __future__ import annotations

from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from stays.models.property import PropertyCategory


# ── List fields ────────────────────────────────────────────────────────────────

class ListField(str, Enum):
    """The free-text list fields of a property, edited the same way."""
    AMENITIES = "amenities"
    HIGHLIGHTS = "highlights"
    ACTIVITIES = "activities"
    POLICIES = "policies"


# ── Form schemas ───────────────────────────────────────────────────────────────

class PropertyForm(BaseModel):
    """Every stored property field, with the admin form's defaults."""

    model_config = ConfigDict(use_enum_values=True)

    title: str = Field(..., min_length=1, max_length=255)
    slug: str = ""
    description: str = Field(..., min_length=1)
    category: PropertyCategory = Field(PropertyCategory.CAMPING, validate_default=True)
    location: str = Field(..., min_length=1)
    price: int = 0
    price_note: str = "per person with meal"
    capacity: int = 2
    max_capacity: int = 4
    rating: float = 4.5
    is_top_selling: bool = False
    is_active: bool = True
    check_in_time: str = "2:00 PM"
    check_out_time: str = "11:00 AM"
    contact: str = "+91 8669505727"
    address: str = ""
    amenities: List[str] = Field(default_factory=list)
    highlights: List[str] = Field(default_factory=list)
    activities: List[str] = Field(default_factory=list)
    policies: List[str] = Field(default_factory=list)

    def add_item(self, field: ListField, value: str) -> bool:
        """Append a trimmed entry to one of the list fields; blanks are ignored."""
        value = value.strip()
        if not value:
            return False
        getattr(self, ListField(field).value).append(value)
        return True

    def remove_item(self, field: ListField, index: int) -> str:
        return getattr(self, ListField(field).value).pop(index)


PROPERTY_FIELDS = frozenset(PropertyForm.model_fields)


class PropertyDraft(PropertyForm):
    """
    The form together with its ordered image URLs.

    This is what the edit screen loads and what the admin API accepts on
    create and update. ``id`` is only set when loaded from the store.
    """

    id: Optional[str] = None
    images: List[str] = Field(default_factory=list)

    @field_validator("images")
    @classmethod
    def drop_blank_images(cls, v: List[str]) -> List[str]:
        return [url.strip() for url in v if url and url.strip()]

    def add_image(self, url: str) -> bool:
        url = url.strip()
        if not url:
            return False
        self.images.append(url)
        return True

    def remove_image(self, index: int) -> str:
        return self.images.pop(index)

    def form(self) -> PropertyForm:
        return PropertyForm(**self.model_dump(include=PROPERTY_FIELDS))


# ── Listing schemas ────────────────────────────────────────────────────────────

class ListingSummary(BaseModel):
    """Row shown in the admin dashboard table."""
    id: str
    title: str
    slug: str
    category: str
    location: str
    price: int
    is_active: bool
    is_top_selling: bool
    rating: float


SUMMARY_COLUMNS = ", ".join(ListingSummary.model_fields)


class ActiveToggle(BaseModel):
    is_active: bool


class PropertySaved(BaseModel):
    success: bool = True
    id: str
    message: str


class ImageRetryOut(BaseModel):
    success: bool = True
    id: str
    images: List[str]
