"""ASGI middleware answering CORS preflight for every path."""

from starlette.responses import Response
from starlette.types import ASGIApp, Receive, Scope, Send

from .services.headers import CORS_HEADERS


class PreflightMiddleware:
    """Answer any OPTIONS request with 204 and the CORS headers.

    Runs before routing, so preflight never reaches an upstream.
    """

    def __init__(self, app: ASGIApp):
        self.app = app

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] == "http" and scope["method"] == "OPTIONS":
            response = Response(status_code=204, headers=CORS_HEADERS)
            await response(scope, receive, send)
            return
        await self.app(scope, receive, send)
