"""
Authentication Endpoints
Admin login, logout and session lookup
"""
from fastapi import APIRouter, Depends, status

from stays.core.deps import get_auth_service, get_bearer_token, require_admin
from stays.schemas.auth import AdminLogin, AdminSession, CurrentUser
from stays.services.supabase_service import SupabaseAuthService

router = APIRouter()


@router.post("/login", response_model=AdminSession)
async def login(
    credentials: AdminLogin,
    auth: SupabaseAuthService = Depends(get_auth_service),
):
    """Sign in and get an access token for the admin routes"""
    return await auth.sign_in(credentials.email, credentials.password)


@router.post("/logout", status_code=status.HTTP_204_NO_CONTENT)
async def logout(
    token: str = Depends(get_bearer_token),
    current_user: CurrentUser = Depends(require_admin),
    auth: SupabaseAuthService = Depends(get_auth_service),
):
    """End the current admin session"""
    await auth.sign_out(token)
    return None


@router.get("/me", response_model=CurrentUser)
async def get_current_admin(current_user: CurrentUser = Depends(require_admin)):
    """Get the signed-in admin"""
    return current_user
