from stays.api.routes.auth import router as auth_router
from stays.api.routes.admin import router as admin_router
from stays.api.routes.properties import router as properties_router

__all__ = [
    "auth_router",
    "admin_router",
    "properties_router",
]
