from functools import lru_cache
from typing import Optional

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from supabase import Client
import logging

from stays.core.config import get_settings
from stays.schemas.auth import CurrentUser
from stays.services.listing_service import ListingService
from stays.services.migration_service import MigrationRunner
from stays.services.property_sync import PropertySyncService
from stays.services.store import SqlStore, Store
from stays.services.supabase_service import SupabaseAuthService, SupabaseStore, create_supabase_client

logger = logging.getLogger(__name__)

bearer_scheme = HTTPBearer(auto_error=False)


# ==================== Shared handles ====================

@lru_cache()
def get_supabase_client() -> Client:
    return create_supabase_client(get_settings())


@lru_cache()
def get_store() -> Store:
    """Process-wide store handle, picked by STORE_BACKEND"""
    settings = get_settings()
    if settings.uses_supabase:
        logger.info("Using Supabase store")
        return SupabaseStore(get_supabase_client())

    from stays.database import SessionLocal
    logger.info("Using SQL store")
    return SqlStore(SessionLocal)


@lru_cache()
def get_auth_service() -> SupabaseAuthService:
    settings = get_settings()
    return SupabaseAuthService(
        get_supabase_client(),
        jwt_secret=settings.SUPABASE_JWT_SECRET,
        audience=settings.SUPABASE_JWT_AUDIENCE,
        algorithm=settings.JWT_ALGORITHM,
    )


# ==================== Services ====================

@lru_cache()
def get_sync_service() -> PropertySyncService:
    # Cached so pending image replacements survive between requests
    return PropertySyncService(get_store())


def get_listing_service(store: Store = Depends(get_store)) -> ListingService:
    return ListingService(store)


def get_migration_runner(store: Store = Depends(get_store)) -> MigrationRunner:
    return MigrationRunner(store)


# ==================== Admin guard ====================

def get_bearer_token(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
) -> Optional[str]:
    return credentials.credentials if credentials else None


async def require_admin(
    token: Optional[str] = Depends(get_bearer_token),
    auth: SupabaseAuthService = Depends(get_auth_service),
) -> CurrentUser:
    """
    Admin routes need a live session.
    Returns 401 if the token is missing or no session is behind it.
    """
    credentials_exception = HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail="Admin session required",
        headers={"WWW-Authenticate": "Bearer"},
    )

    if not token:
        raise credentials_exception

    user = await auth.current_user(token)
    if user is None:
        logger.warning("Rejected admin request without a valid session")
        raise credentials_exception

    return user
