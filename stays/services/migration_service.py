"""
Bulk Migration Runner
One-shot copy of the old site's hardcoded listings into the store.

Runs straight through: a listing whose insert fails is logged and skipped,
image failures are logged without retry. Not safe to run twice (slugs are
unique, so a second run fails per item).
"""
from __future__ import annotations

import logging
from typing import Any, Mapping, Optional, Sequence, Union

from pydantic import ValidationError

from stays.core.exceptions import PersistenceError
from stays.data.legacy_properties import LEGACY_PROPERTIES
from stays.schemas.legacy import LegacyListing, MigrationReport
from stays.services.record_mapper import (
    PROPERTIES_TABLE,
    PROPERTY_IMAGES_TABLE,
    legacy_image_urls,
    legacy_to_stored_property,
    to_persisted_images,
)
from stays.services.store import Store

logger = logging.getLogger(__name__)

SeedItem = Union[LegacyListing, Mapping[str, Any]]


class MigrationRunner:
    def __init__(self, store: Store, seeds: Optional[Sequence[SeedItem]] = None):
        self.store = store
        self.seeds = LEGACY_PROPERTIES if seeds is None else seeds

    async def run(self) -> MigrationReport:
        report = MigrationReport()
        logger.info(f"Starting property migration ({len(self.seeds)} listings)...")

        for seed in self.seeds:
            try:
                item = seed if isinstance(seed, LegacyListing) else LegacyListing.model_validate(seed)
            except ValidationError as e:
                title = seed.get("title", "<untitled>") if isinstance(seed, Mapping) else repr(seed)
                logger.error(f"Skipping malformed listing {title}: {e}")
                report.failed.append(title)
                continue

            try:
                inserted = await self.store.insert(PROPERTIES_TABLE, [legacy_to_stored_property(item)])
            except PersistenceError as e:
                logger.error(f"Failed to migrate property: {item.title} ({e.message})")
                report.failed.append(item.title)
                continue

            report.migrated.append(item.title)
            logger.info(f"Migrated property: {item.title}")

            urls = legacy_image_urls(item)
            if not urls:
                continue
            if not inserted:
                logger.warning(f"Insert returned no row for: {item.title}; {len(urls)} images not migrated")
                report.image_failures.append(item.title)
                continue

            try:
                await self.store.insert(PROPERTY_IMAGES_TABLE, to_persisted_images(str(inserted[0]["id"]), urls))
            except PersistenceError as e:
                logger.error(f"Failed to migrate images for: {item.title} ({e.message})")
                report.image_failures.append(item.title)
            else:
                logger.info(f"Migrated {len(urls)} images for: {item.title}")

        report.success = not report.failed and not report.image_failures
        logger.info(
            f"Migration complete! {len(report.migrated)} migrated, "
            f"{len(report.failed)} failed, {len(report.image_failures)} with image errors"
        )
        return report
