"""
Shape of the hardcoded listings the old static site shipped with.
"""
from typing import List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator


class LegacyListing(BaseModel):
    """A seed listing as written in the old site's data file (camelCase keys)."""

    model_config = ConfigDict(populate_by_name=True)

    id: Optional[str] = None
    title: str
    description: str = ""
    category: str = "camping"
    location: str = ""
    # Display string such as "₹2,500/night"
    price: str = "0"
    price_note: str = Field("", alias="priceNote")
    capacity: int = 2
    max_capacity: Optional[int] = Field(None, alias="maxCapacity")
    rating: float = 0.0
    is_top_selling: bool = Field(False, alias="isTopSelling")
    check_in_time: Optional[str] = Field(None, alias="checkInTime")
    check_out_time: Optional[str] = Field(None, alias="checkOutTime")
    contact: Optional[str] = None
    address: Optional[str] = None
    amenities: List[str] = Field(default_factory=list)
    highlights: Optional[List[str]] = None
    activities: Optional[List[str]] = None
    policies: Optional[List[str]] = None
    images: Optional[List[str]] = None
    image: Optional[str] = None

    @field_validator("price", mode="before")
    @classmethod
    def price_as_text(cls, v: Union[str, int, float, None]) -> str:
        if v is None:
            return ""
        if isinstance(v, (int, float)):
            return str(int(v))
        return v


class MigrationReport(BaseModel):
    success: bool = True
    migrated: List[str] = Field(default_factory=list)
    failed: List[str] = Field(default_factory=list)
    image_failures: List[str] = Field(default_factory=list)
