"""API routers for RecordVault."""

from .auth import router as auth_router
from .collection import router as collection_router
from .health import router as health_router
from .records import router as records_router
from .users import router as users_router

__all__ = ["auth_router", "users_router", "records_router", "collection_router", "health_router"]
