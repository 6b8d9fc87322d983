from fastapi import APIRouter, Depends
from typing import List

from stays.core.deps import get_listing_service
from stays.schemas.property import ListingSummary, PropertyDraft
from stays.services.listing_service import ListingService

router = APIRouter()


@router.get("/", response_model=List[ListingSummary])
async def list_active_properties(listings: ListingService = Depends(get_listing_service)):
    """Active properties for the public site"""
    return await listings.list_public()


@router.get("/{slug}", response_model=PropertyDraft)
async def get_property_by_slug(slug: str, listings: ListingService = Depends(get_listing_service)):
    """Property details page; inactive properties are not found"""
    return await listings.get_public_by_slug(slug)
