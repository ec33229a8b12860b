"""Forwarding engine: route lookup, upstream dispatch and response relay."""

import asyncio
from typing import AsyncIterator, Dict, List, Optional, Tuple

import httpx
import structlog
from fastapi.responses import StreamingResponse
from starlette.requests import ClientDisconnect

from ..config import settings
from ..errors import GatewayTimeout, UpstreamUnreachable
from ..models import Route
from ..routes import match_route
from .headers import HeaderItems, build_forward_headers, build_response_headers

logger = structlog.get_logger(__name__)


def build_target_url(route: Route, remainder: str, query: str = "") -> str:
    """Join upstream base, path remainder and the untouched query string."""
    target = f"{route.upstream_base}{remainder}"
    if query:
        target = f"{target}?{query}"
    return target


def _encode_headers(headers: Dict[str, str]) -> List[Tuple[bytes, bytes]]:
    """Encode header pairs back to the latin-1 bytes they arrived as."""
    return [
        (name.encode("latin-1"), value.encode("latin-1"))
        for name, value in headers.items()
    ]


class Forwarder:
    """Forwards one request per call to the upstream its prefix maps to."""

    def __init__(self, client: httpx.AsyncClient, timeout: Optional[float] = None):
        self.client = client
        self.timeout = timeout or settings.upstream_timeout
        self.logger = logger.bind(component="Forwarder")

    async def forward(
        self,
        method: str,
        path: str,
        query: str,
        headers: HeaderItems,
        body: Optional[AsyncIterator[bytes]] = None,
    ) -> StreamingResponse:
        """Forward a request and return the streamed upstream response.

        Raises NoRouteMatch, GatewayTimeout or UpstreamUnreachable. A single
        attempt is made; nothing is retried.
        """
        route, remainder = match_route(path)
        target = build_target_url(route, remainder, query)
        # Never log the remainder or query: they can hold credentials
        # (Telegram bot tokens, Gemini keys).
        log = self.logger.bind(method=method, prefix=route.prefix)

        try:
            upstream_request = self.client.build_request(
                method,
                target,
                headers=_encode_headers(build_forward_headers(headers)),
                content=body,
                timeout=self.timeout,
            )
            upstream = await asyncio.wait_for(
                self.client.send(upstream_request, stream=True), timeout=self.timeout
            )
        except (httpx.TimeoutException, asyncio.TimeoutError) as e:
            log.warning("Upstream timed out", timeout=self.timeout)
            raise GatewayTimeout() from e
        except (httpx.RequestError, httpx.InvalidURL, ClientDisconnect) as e:
            log.warning("Upstream unreachable", error_type=type(e).__name__)
            raise UpstreamUnreachable() from e

        log.info("Forwarded request", status=upstream.status_code)
        return StreamingResponse(
            self._relay(upstream, log),
            status_code=upstream.status_code,
            headers=build_response_headers(upstream.headers),
        )

    async def _relay(self, upstream: httpx.Response, log) -> AsyncIterator[bytes]:
        """Yield the raw upstream body and close the response afterwards."""
        try:
            async for chunk in upstream.aiter_raw():
                yield chunk
        except httpx.HTTPError as e:
            log.warning("Upstream body interrupted", error_type=type(e).__name__)
            raise
        finally:
            await upstream.aclose()
