"""Placement and outbound network diagnostics for /debug."""

import asyncio
from typing import Mapping, Optional

import httpx
import structlog

from ..config import settings
from ..models import DebugInfo

logger = structlog.get_logger(__name__)


def entry_colo_from_ray(cf_ray: Optional[str]) -> Optional[str]:
    """Return the edge location from a ``<id>-<COLO>`` CF-Ray value."""
    if not cf_ray or "-" not in cf_ray:
        return None
    return cf_ray.rsplit("-", 1)[1] or None


async def lookup_outbound(
    client: httpx.AsyncClient,
    url: Optional[str] = None,
    timeout: Optional[float] = None,
) -> dict:
    """Fetch outbound IP details; an empty dict when the lookup fails."""
    url = url or settings.ip_lookup_url
    timeout = timeout or settings.ip_lookup_timeout
    try:
        response = await asyncio.wait_for(client.get(url, timeout=timeout), timeout=timeout)
        data = response.json()
    except Exception as e:
        logger.warning("Outbound IP lookup failed", error=str(e), error_type=type(e).__name__)
        return {}
    if not isinstance(data, dict):
        return {}
    return data


def _as_str(value) -> Optional[str]:
    return None if value is None else str(value)


async def collect_debug_info(
    client: httpx.AsyncClient,
    request_headers: Mapping[str, str],
    url: Optional[str] = None,
    timeout: Optional[float] = None,
) -> DebugInfo:
    """Gather placement headers and the outbound lookup into one record."""
    outbound = await lookup_outbound(client, url=url, timeout=timeout)
    return DebugInfo(
        placement=request_headers.get("cf-placement"),
        entry_colo=entry_colo_from_ray(request_headers.get("cf-ray")),
        outbound_ip=_as_str(outbound.get("ip")),
        outbound_city=_as_str(outbound.get("city")),
        outbound_region=_as_str(outbound.get("region")),
        outbound_country=_as_str(outbound.get("country")),
    )
