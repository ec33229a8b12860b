"""Catch-all proxy endpoint."""

from typing import AsyncIterator, Optional

from fastapi import APIRouter, Request

from ..services.forwarder import Forwarder

router = APIRouter(tags=["proxy"])


def _request_body(request: Request) -> Optional[AsyncIterator[bytes]]:
    """Stream the incoming body, or None when the request declares none."""
    if "transfer-encoding" in request.headers:
        return request.stream()
    if request.headers.get("content-length", "0") not in ("", "0"):
        return request.stream()
    return None


def _raw_path(request: Request) -> str:
    """Request path as received, percent-encoding preserved."""
    raw_path = request.scope.get("raw_path")
    if raw_path:
        return raw_path.split(b"?", 1)[0].decode("latin-1")
    return request.url.path


async def proxy(request: Request):
    """Forward anything under a configured prefix to its upstream."""
    config = request.app.state.settings
    forwarder = Forwarder(request.app.state.http_client, timeout=config.upstream_timeout)
    return await forwarder.forward(
        request.method,
        _raw_path(request),
        request.url.query,
        [
            (name.decode("latin-1"), value.decode("latin-1"))
            for name, value in request.headers.raw
        ],
        _request_body(request),
    )


# A plain Starlette route without a method list accepts every method, so
# unknown methods are forwarded or answered 404 rather than 405.
router.add_route("/{path:path}", proxy, include_in_schema=False)
