"""API routers for apirelay."""

from .dashboard import router as dashboard_router
from .debug import router as debug_router
from .health import router as health_router
from .proxy import router as proxy_router
from .status import router as status_router

__all__ = [
    "dashboard_router",
    "debug_router",
    "health_router",
    "proxy_router",
    "status_router",
]
