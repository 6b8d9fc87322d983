"""
Property Listing Models
Covers: Property, PropertyImage
"""
import uuid
from enum import Enum as PyEnum

from sqlalchemy import Column, String, Integer, Float, Text, Boolean, ForeignKey, JSON, Index

from stays.db.base import Base, TimestampMixin


# ── Enums ──────────────────────────────────────────────────────────────────────

class PropertyCategory(str, PyEnum):
    CAMPING = "camping"
    COTTAGE = "cottage"
    VILLA = "villa"


def _new_id() -> str:
    return str(uuid.uuid4())


# ── Models ─────────────────────────────────────────────────────────────────────

class Property(TimestampMixin, Base):
    __tablename__ = "properties"

    # Stored as text so rows read back with the same id shape Supabase returns
    id = Column(String(36), primary_key=True, default=_new_id)

    title = Column(String(255), nullable=False)
    slug = Column(String(255), nullable=False, unique=True, index=True)
    description = Column(Text, nullable=False, default="")
    category = Column(String(20), nullable=False, default=PropertyCategory.CAMPING.value)
    location = Column(String(255), nullable=False, default="")

    price = Column(Integer, nullable=False, default=0)
    price_note = Column(String(255), nullable=False, default="")
    capacity = Column(Integer, nullable=False, default=2)
    max_capacity = Column(Integer, nullable=False, default=4)
    rating = Column(Float, nullable=False, default=4.5)

    is_top_selling = Column(Boolean, nullable=False, default=False)
    is_active = Column(Boolean, nullable=False, default=True, index=True)

    check_in_time = Column(String(50), nullable=False, default="2:00 PM")
    check_out_time = Column(String(50), nullable=False, default="11:00 AM")
    contact = Column(String(50), nullable=False, default="")
    address = Column(Text, nullable=False, default="")

    amenities = Column(JSON, nullable=False, default=lambda: [])
    highlights = Column(JSON, nullable=False, default=lambda: [])
    activities = Column(JSON, nullable=False, default=lambda: [])
    policies = Column(JSON, nullable=False, default=lambda: [])


class PropertyImage(Base):
    __tablename__ = "property_images"

    id = Column(String(36), primary_key=True, default=_new_id)
    # No ondelete cascade: image rows are removed by the listing service
    property_id = Column(String(36), ForeignKey("properties.id"), nullable=False)
    image_url = Column(Text, nullable=False)
    display_order = Column(Integer, nullable=False, default=0)

    __table_args__ = (
        Index("ix_property_images_property_order", "property_id", "display_order"),
    )
