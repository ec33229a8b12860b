"""Concurrent reachability probes against every upstream."""

import asyncio
import time
from typing import List, Optional, Sequence

import httpx
import structlog

from ..config import settings
from ..models import ProbeResult, Route
from ..routes import ROUTES

logger = structlog.get_logger(__name__)


async def probe_upstream(
    client: httpx.AsyncClient, route: Route, timeout: float
) -> ProbeResult:
    """Send one HEAD to the route's upstream base. Never raises.

    Any answer below 500 counts as reachable, 4xx included.
    """
    start = time.monotonic()
    try:
        response = await asyncio.wait_for(
            client.head(route.upstream_base, timeout=timeout), timeout=timeout
        )
    except Exception as e:
        logger.debug(
            "Probe failed", name=route.name, error=str(e), error_type=type(e).__name__
        )
        return ProbeResult(name=route.name, target=route.upstream_base, ok=False)

    return ProbeResult(
        name=route.name,
        target=route.upstream_base,
        ok=response.status_code < 500,
        latency_ms=int((time.monotonic() - start) * 1000),
        status=response.status_code,
    )


async def probe_upstreams(
    client: httpx.AsyncClient,
    routes: Sequence[Route] = ROUTES,
    timeout: Optional[float] = None,
) -> List[ProbeResult]:
    """Probe all routes in parallel; results follow route table order."""
    timeout = timeout or settings.probe_timeout
    results = await asyncio.gather(
        *(probe_upstream(client, route, timeout) for route in routes)
    )
    reachable = sum(1 for result in results if result.ok)
    logger.info("Probed upstreams", total=len(results), reachable=reachable)
    return list(results)
