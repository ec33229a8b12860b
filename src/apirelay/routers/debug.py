"""Placement diagnostics endpoint."""

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse

from ..services.diagnostics import collect_debug_info
from ..services.headers import CORS_HEADERS

router = APIRouter(tags=["debug"])


@router.get("/debug")
async def debug_info(request: Request):
    """Report edge placement and outbound IP details.

    The outbound lookup degrades to null fields; this endpoint does not fail.
    """
    config = request.app.state.settings
    info = await collect_debug_info(
        request.app.state.http_client,
        request.headers,
        url=config.ip_lookup_url,
        timeout=config.ip_lookup_timeout,
    )
    return JSONResponse(info.model_dump(), headers=CORS_HEADERS)
