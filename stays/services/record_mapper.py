"""
Record Mapper
Converts between the admin form shape and the stored rows
(`properties` + ordered `property_images`), including the legacy seed adapter.
"""
from __future__ import annotations

import re
from typing import Any, Dict, Iterable, List, Mapping, Optional

from stays.schemas.legacy import LegacyListing
from stays.schemas.property import PROPERTY_FIELDS, PropertyDraft, PropertyForm


PROPERTIES_TABLE = "properties"
PROPERTY_IMAGES_TABLE = "property_images"

DEFAULT_CHECK_IN = "2:00 PM"
DEFAULT_CHECK_OUT = "11:00 AM"
DEFAULT_CONTACT = "+91 8669505727"


# ── Helpers ────────────────────────────────────────────────────────────────────

_NON_SLUG_RUN = re.compile(r"[^a-z0-9]+")
_EDGE_HYPHEN = re.compile(r"(^-|-$)")
_NON_DIGIT = re.compile(r"[^\d]")


def slugify(title: str) -> str:
    """
    Convert a title to a URL-safe slug, e.g. 'Luxury Lakeside Cottage!! '
    -> 'luxury-lakeside-cottage'. Returns '' when the title has no [a-z0-9].
    """
    slug = _NON_SLUG_RUN.sub("-", title.lower())
    return _EDGE_HYPHEN.sub("", slug)


def parse_display_price(text: str) -> int:
    """'₹2,500/night' -> 2500; anything without digits -> 0."""
    digits = _NON_DIGIT.sub("", text or "")
    return int(digits) if digits else 0


# ── Form <-> rows ──────────────────────────────────────────────────────────────

def to_stored_property(form: PropertyForm) -> Dict[str, Any]:
    """Every property column from the form; images and id are not part of the row."""
    return form.model_dump(include=PROPERTY_FIELDS)


def to_persisted_images(property_id: str, urls: Iterable[str]) -> List[Dict[str, Any]]:
    return [
        {"property_id": property_id, "image_url": url, "display_order": index}
        for index, url in enumerate(urls)
    ]


def from_stored_property(
    row: Mapping[str, Any],
    image_rows: Optional[Iterable[Mapping[str, Any]]] = None,
) -> PropertyDraft:
    """
    Hydrate the edit form from a stored row and its image rows.

    Columns the store left NULL fall back to the form defaults. Image rows are
    sorted by display_order so callers may pass them in any order.
    """
    fields = {key: row[key] for key in PROPERTY_FIELDS if row.get(key) is not None}
    images = sorted(image_rows or [], key=lambda img: img.get("display_order", 0))
    return PropertyDraft(
        **fields,
        id=str(row["id"]),
        images=[img["image_url"] for img in images],
    )


# ── Legacy seed adapter ────────────────────────────────────────────────────────

def legacy_to_stored_property(item: LegacyListing) -> Dict[str, Any]:
    """Map a seed listing onto a `properties` row, filling the old site's defaults."""
    return {
        "title": item.title,
        "slug": item.id or slugify(item.title),
        "description": item.description,
        "category": item.category,
        "location": item.location,
        "price": parse_display_price(item.price),
        "price_note": item.price_note,
        "capacity": item.capacity,
        "max_capacity": item.max_capacity or item.capacity,
        "rating": item.rating,
        "is_top_selling": item.is_top_selling,
        "is_active": True,
        "check_in_time": item.check_in_time or DEFAULT_CHECK_IN,
        "check_out_time": item.check_out_time or DEFAULT_CHECK_OUT,
        "contact": item.contact or DEFAULT_CONTACT,
        "address": item.address or "",
        "amenities": list(item.amenities),
        "highlights": list(item.highlights or []),
        "activities": list(item.activities or []),
        "policies": list(item.policies or []),
    }


def legacy_image_urls(item: LegacyListing) -> List[str]:
    if item.images is not None:
        return list(item.images)
    if item.image:
        return [item.image]
    return []
