"""
Property Synchronization Service
Loads the admin edit form from the store and writes it back:
create-or-update of the `properties` row, then full replacement of its images.
"""
from __future__ import annotations

import logging
from typing import Any, Dict, Iterable, List, Optional

from stays.core.exceptions import NotFoundError, PartialReplacementFailure, PersistenceError
from stays.schemas.property import PropertyDraft, PropertyForm
from stays.services.record_mapper import (
    PROPERTIES_TABLE,
    PROPERTY_IMAGES_TABLE,
    from_stored_property,
    slugify,
    to_persisted_images,
    to_stored_property,
)
from stays.services.store import Store

logger = logging.getLogger(__name__)

IMAGE_COLUMNS = "image_url, display_order"


class PropertySyncService:
    def __init__(self, store: Store):
        self.store = store
        # property id -> image URLs whose replacement did not complete
        self.pending_replacements: Dict[str, List[str]] = {}

    # ── Read ──────────────────────────────────────────────────────────────────

    async def load(self, property_id: str) -> PropertyDraft:
        """Fetch one property and its images (in display order) for editing."""
        rows = await self.store.select(PROPERTIES_TABLE, filters={"id": property_id})
        if not rows:
            raise NotFoundError("Property", property_id)

        image_rows = await self._image_rows(property_id)
        return from_stored_property(rows[0], image_rows)

    # ── Write ─────────────────────────────────────────────────────────────────

    async def save(
        self,
        form: PropertyForm,
        images: Iterable[str],
        existing_id: Optional[str] = None,
    ) -> str:
        """
        Create or update a property and replace its image set.

        Without ``existing_id`` a new row is inserted, its slug derived from the
        title when left blank. With ``existing_id`` every column is rewritten
        (the slug exactly as supplied) and the images are deleted and
        re-inserted in the given order. An unknown ``existing_id`` raises
        NotFoundError before anything is written.
        """
        row = to_stored_property(form)
        urls = list(images)

        if existing_id is None:
            if not row["slug"].strip():
                row["slug"] = slugify(row["title"])

            inserted = await self.store.insert(PROPERTIES_TABLE, [row])
            if not inserted:
                raise PersistenceError("Insert returned no property row", operation="insert", table=PROPERTIES_TABLE)
            property_id = str(inserted[0]["id"])

            if urls:
                await self.store.insert(PROPERTY_IMAGES_TABLE, to_persisted_images(property_id, urls))

            logger.info(f"Created property {property_id} ({row['slug']}) with {len(urls)} images")
            return property_id

        await self._require_property(existing_id)
        await self.store.update(PROPERTIES_TABLE, row, {"id": existing_id})
        await self._replace_images(existing_id, urls)
        logger.info(f"Updated property {existing_id} with {len(urls)} images")
        return existing_id

    async def retry_image_replacement(self, property_id: str) -> List[str]:
        """Re-run an image replacement that failed part-way; returns the URLs written."""
        urls = self.pending_replacements.get(property_id)
        if urls is None:
            raise NotFoundError("Pending image replacement", property_id)

        if not await self._property_exists(property_id):
            # Deleted since the failed save
            self.pending_replacements.pop(property_id, None)
            raise NotFoundError("Property", property_id)

        await self._replace_images(property_id, urls)
        logger.info(f"Retried image replacement for property {property_id}")
        return urls

    async def _property_exists(self, property_id: str) -> bool:
        rows = await self.store.select(PROPERTIES_TABLE, columns="id", filters={"id": property_id})
        return bool(rows)

    async def _require_property(self, property_id: str) -> None:
        if not await self._property_exists(property_id):
            raise NotFoundError("Property", property_id)

    # ── Image replacement ─────────────────────────────────────────────────────

    async def _image_rows(self, property_id: str) -> List[Dict[str, Any]]:
        return await self.store.select(
            PROPERTY_IMAGES_TABLE,
            columns=IMAGE_COLUMNS,
            filters={"property_id": property_id},
            order_by="display_order",
        )

    async def _replace_images(self, property_id: str, urls: List[str]) -> None:
        rows = to_persisted_images(property_id, urls)
        filters = {"property_id": property_id}

        if self.store.supports_transactions:
            try:
                await self.store.replace(PROPERTY_IMAGES_TABLE, filters, rows)
            except PersistenceError as e:
                # Rolled back: the previous images are untouched
                self._fail_replacement(property_id, urls, True, e)
            self.pending_replacements.pop(property_id, None)
            return

        try:
            previous = await self._image_rows(property_id)
            await self.store.delete(PROPERTY_IMAGES_TABLE, filters)
        except PersistenceError as e:
            self._fail_replacement(property_id, urls, True, e)

        if rows:
            try:
                await self.store.insert(PROPERTY_IMAGES_TABLE, rows)
            except PersistenceError as e:
                restored = await self._restore_images(property_id, previous)
                self._fail_replacement(property_id, urls, restored, e)

        self.pending_replacements.pop(property_id, None)

    async def _restore_images(self, property_id: str, previous: List[Dict[str, Any]]) -> bool:
        if not previous:
            return True
        rows = [
            {"property_id": property_id, "image_url": img["image_url"], "display_order": img["display_order"]}
            for img in previous
        ]
        try:
            await self.store.insert(PROPERTY_IMAGES_TABLE, rows)
        except PersistenceError as e:
            logger.error(f"Could not restore {len(rows)} images for property {property_id}: {e.message}")
            return False
        logger.warning(f"Restored previous images for property {property_id}")
        return True

    def _fail_replacement(self, property_id: str, urls: List[str], restored: bool, error: PersistenceError):
        self.pending_replacements[property_id] = list(urls)
        logger.error(f"Image replacement failed for property {property_id}: {error.message}")
        raise PartialReplacementFailure(property_id, urls, restored, error.message) from error
