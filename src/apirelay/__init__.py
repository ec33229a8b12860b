"""apirelay - prefix-based reverse proxy for third-party API hosts."""

__version__ = "0.1.0"

from .app import app, create_app
from .config import Settings
from .errors import GatewayTimeout, NoRouteMatch, ProxyError, UpstreamUnreachable
from .models import ProbeResult, Route
from .routes import ROUTES, match_route

__all__ = [
    "ROUTES",
    "GatewayTimeout",
    "NoRouteMatch",
    "ProbeResult",
    "ProxyError",
    "Route",
    "Settings",
    "UpstreamUnreachable",
    "app",
    "create_app",
    "match_route",
]
