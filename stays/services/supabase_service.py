"""
Supabase Integration Service
Table access for the listing services and admin authentication
"""
import logging
from typing import Optional

from fastapi.concurrency import run_in_threadpool
from jose import JWTError, jwt
from supabase import Client, create_client

from stays.core.config import Settings
from stays.core.exceptions import AuthError, PersistenceError
from stays.schemas.auth import AdminSession, CurrentUser
from stays.services.store import Store

logger = logging.getLogger(__name__)


def create_supabase_client(settings: Settings) -> Client:
    """Initialize Supabase client"""
    try:
        client = create_client(settings.SUPABASE_URL, settings.SUPABASE_KEY)
        logger.info("Supabase client initialized successfully")
        return client
    except Exception as e:
        logger.error(f"Failed to initialize Supabase client: {e}")
        raise


def _error_message(error: Exception) -> str:
    # postgrest APIError carries the PostgREST message separately
    return getattr(error, "message", None) or str(error)


class SupabaseStore(Store):
    """Store backed by the hosted Supabase (PostgREST) tables"""

    supports_transactions = False

    def __init__(self, client: Client):
        self.client = client

    async def _execute(self, query, operation: str, table: str):
        # supabase-py is synchronous
        try:
            return await run_in_threadpool(query.execute)
        except Exception as e:
            message = _error_message(e)
            logger.error(f"[SUPABASE] {operation} on {table} failed: {message}")
            raise PersistenceError(message, operation=operation, table=table) from e

    def _filtered(self, query, filters):
        for column, value in (filters or {}).items():
            query = query.eq(column, value)
        return query

    async def select(self, table, columns="*", filters=None, order_by=None, descending=False):
        query = self._filtered(self.client.table(table).select(columns), filters)
        if order_by:
            query = query.order(order_by, desc=descending)
        response = await self._execute(query, "select", table)
        return response.data or []

    async def insert(self, table, rows):
        response = await self._execute(self.client.table(table).insert(list(rows)), "insert", table)
        return response.data or []

    async def update(self, table, patch, filters):
        query = self._filtered(self.client.table(table).update(patch), filters)
        await self._execute(query, "update", table)

    async def delete(self, table, filters):
        query = self._filtered(self.client.table(table).delete(), filters)
        await self._execute(query, "delete", table)


class SupabaseAuthService:
    """Admin sign-in, sign-out and session lookup against Supabase Auth"""

    def __init__(
        self,
        client: Client,
        jwt_secret: str = "",
        audience: str = "authenticated",
        algorithm: str = "HS256",
    ):
        self.client = client
        self.auth = client.auth
        self.jwt_secret = jwt_secret
        self.audience = audience
        self.algorithm = algorithm

    async def sign_in(self, email: str, password: str) -> AdminSession:
        """
        Sign in an admin

        Args:
            email: Admin email
            password: Admin password

        Returns:
            Session with the access token the admin routes expect

        Raises:
            AuthError: If Supabase rejects the credentials
        """
        try:
            response = await run_in_threadpool(self.auth.sign_in_with_password, {
                "email": email,
                "password": password
            })
        except Exception as e:
            logger.warning(f"Sign-in failed for {email}: {e}")
            raise AuthError(_error_message(e)) from e

        session = response.session
        if session is None:
            raise AuthError("Invalid login credentials")

        logger.info(f"Admin signed in: {email}")
        return AdminSession(
            access_token=session.access_token,
            refresh_token=session.refresh_token,
            expires_in=session.expires_in,
            email=response.user.email if response.user else email,
        )

    async def sign_out(self, token: str) -> None:
        """Revoke the session behind ``token``"""
        try:
            await run_in_threadpool(self.auth.admin.sign_out, token)
        except Exception as e:
            logger.error(f"Error signing out: {e}")
            raise AuthError(_error_message(e)) from e

    async def current_user(self, token: str) -> Optional[CurrentUser]:
        """
        Resolve the admin behind an access token, or None when there is no
        valid session. Verifies locally when the project JWT secret is known.
        """
        if self.jwt_secret:
            try:
                payload = jwt.decode(
                    token,
                    self.jwt_secret,
                    algorithms=[self.algorithm],
                    audience=self.audience,
                )
            except JWTError as e:
                logger.warning(f"JWT decode error: {e}")
                return None
            email = payload.get("email")
            if not email:
                logger.warning("Token missing 'email' claim")
                return None
            return CurrentUser(id=payload.get("sub"), email=email)

        try:
            response = await run_in_threadpool(self.auth.get_user, token)
        except Exception as e:
            logger.warning(f"Token verification failed: {e}")
            return None
        if response is None or response.user is None or not response.user.email:
            return None
        return CurrentUser(id=str(response.user.id), email=response.user.email)
