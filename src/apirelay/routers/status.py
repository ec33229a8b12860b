"""Upstream status endpoint."""

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse

from ..services.headers import CORS_HEADERS
from ..services.prober import probe_upstreams

router = APIRouter(prefix="/api", tags=["status"])


@router.get("/status")
async def upstream_status(request: Request):
    """Probe every upstream and report reachability in route table order."""
    results = await probe_upstreams(
        request.app.state.http_client, timeout=request.app.state.settings.probe_timeout
    )
    return JSONResponse(
        [result.model_dump() for result in results], headers=CORS_HEADERS
    )
