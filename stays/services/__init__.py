from stays.services.store import Store, SqlStore
from stays.services.supabase_service import SupabaseStore, SupabaseAuthService
from stays.services.property_sync import PropertySyncService
from stays.services.listing_service import ListingService
from stays.services.migration_service import MigrationRunner

__all__ = [
    "Store",
    "SqlStore",
    "SupabaseStore",
    "SupabaseAuthService",
    "PropertySyncService",
    "ListingService",
    "MigrationRunner",
]
