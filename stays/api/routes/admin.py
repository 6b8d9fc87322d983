"""
Admin Endpoints
Property management for the signed-in admin: dashboard listing, the
create/edit form, the active toggle, deletion and the one-off seed migration.
"""
import logging
from typing import List

from fastapi import APIRouter, Depends, status

from stays.core.deps import (
    get_listing_service,
    get_migration_runner,
    get_sync_service,
    require_admin,
)
from stays.schemas.legacy import MigrationReport
from stays.schemas.property import (
    ActiveToggle,
    ImageRetryOut,
    ListingSummary,
    PropertyDraft,
    PropertySaved,
)
from stays.services.listing_service import ListingService
from stays.services.migration_service import MigrationRunner
from stays.services.property_sync import PropertySyncService

logger = logging.getLogger(__name__)

router = APIRouter(dependencies=[Depends(require_admin)])


# ==================== DASHBOARD ====================

@router.get("/properties", response_model=List[ListingSummary])
async def list_properties(listings: ListingService = Depends(get_listing_service)):
    """Every property, newest first"""
    return await listings.list()


@router.patch("/properties/{property_id}/active", response_model=List[ListingSummary])
async def toggle_property_active(
    property_id: str,
    toggle: ActiveToggle,
    listings: ListingService = Depends(get_listing_service),
):
    """Enable or disable a property; returns the refreshed dashboard listing"""
    await listings.set_active(property_id, toggle.is_active)
    return await listings.list()


@router.delete("/properties/{property_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_property(
    property_id: str,
    listings: ListingService = Depends(get_listing_service),
):
    """Delete a property and its images"""
    await listings.delete(property_id)
    return None


# ==================== PROPERTY FORM ====================

@router.get("/properties/{property_id}", response_model=PropertyDraft)
async def get_property(
    property_id: str,
    sync: PropertySyncService = Depends(get_sync_service),
):
    """Load a property and its ordered images into the edit form"""
    return await sync.load(property_id)


@router.post("/properties", response_model=PropertySaved, status_code=status.HTTP_201_CREATED)
async def create_property(
    draft: PropertyDraft,
    sync: PropertySyncService = Depends(get_sync_service),
):
    """Create a property; the slug is derived from the title when left blank"""
    property_id = await sync.save(draft.form(), draft.images)
    return PropertySaved(id=property_id, message="Property created successfully")


@router.put("/properties/{property_id}", response_model=PropertySaved)
async def update_property(
    property_id: str,
    draft: PropertyDraft,
    sync: PropertySyncService = Depends(get_sync_service),
):
    """Rewrite every field of a property and replace its images"""
    await sync.save(draft.form(), draft.images, existing_id=property_id)
    return PropertySaved(id=property_id, message="Property updated successfully")


@router.post("/properties/{property_id}/images/retry", response_model=ImageRetryOut)
async def retry_image_replacement(
    property_id: str,
    sync: PropertySyncService = Depends(get_sync_service),
):
    """Write the image set of a save that failed after the property row was updated"""
    images = await sync.retry_image_replacement(property_id)
    return ImageRetryOut(id=property_id, images=images)


# ==================== MIGRATION ====================

@router.post("/migrations/properties", response_model=MigrationReport)
async def migrate_legacy_properties(runner: MigrationRunner = Depends(get_migration_runner)):
    """Copy the old site's hardcoded listings into the store (run once)"""
    logger.info("Legacy property migration triggered from the admin API")
    return await runner.run()
