"""
Listing Service
Admin dashboard projection, the active toggle, deletion, and the public
(active-only) read side.
"""
from __future__ import annotations

import logging
from typing import List

from stays.core.exceptions import NotFoundError
from stays.schemas.property import SUMMARY_COLUMNS, ListingSummary, PropertyDraft
from stays.services.record_mapper import PROPERTIES_TABLE, PROPERTY_IMAGES_TABLE, from_stored_property
from stays.services.store import Store

logger = logging.getLogger(__name__)


class ListingService:
    def __init__(self, store: Store):
        self.store = store

    # ── Admin ─────────────────────────────────────────────────────────────────

    async def list(self) -> List[ListingSummary]:
        """All properties, newest first. No cache: call again after each mutation."""
        rows = await self.store.select(
            PROPERTIES_TABLE,
            columns=SUMMARY_COLUMNS,
            order_by="created_at",
            descending=True,
        )
        return [ListingSummary(**row) for row in rows]

    async def set_active(self, property_id: str, active: bool) -> None:
        await self.store.update(PROPERTIES_TABLE, {"is_active": active}, {"id": property_id})
        logger.info(f"Property {property_id} {'enabled' if active else 'disabled'}")

    async def delete(self, property_id: str) -> None:
        """Delete a property together with its image rows."""
        await self.store.delete(PROPERTY_IMAGES_TABLE, {"property_id": property_id})
        await self.store.delete(PROPERTIES_TABLE, {"id": property_id})
        logger.info(f"Deleted property {property_id}")

    # ── Public ────────────────────────────────────────────────────────────────

    async def list_public(self) -> List[ListingSummary]:
        rows = await self.store.select(
            PROPERTIES_TABLE,
            columns=SUMMARY_COLUMNS,
            filters={"is_active": True},
            order_by="created_at",
            descending=True,
        )
        return [ListingSummary(**row) for row in rows]

    async def get_public_by_slug(self, slug: str) -> PropertyDraft:
        rows = await self.store.select(PROPERTIES_TABLE, filters={"slug": slug, "is_active": True})
        if not rows:
            raise NotFoundError("Property", slug)

        row = rows[0]
        image_rows = await self.store.select(
            PROPERTY_IMAGES_TABLE,
            columns="image_url, display_order",
            filters={"property_id": row["id"]},
            order_by="display_order",
        )
        return from_stored_property(row, image_rows)
