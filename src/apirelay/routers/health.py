"""Health check and crawler endpoints."""

from fastapi import APIRouter
from fastapi.responses import JSONResponse, PlainTextResponse

from ..services.headers import CORS_HEADERS

router = APIRouter(tags=["health"])


@router.get("/health")
async def health_check():
    """Health check endpoint."""
    return JSONResponse({"status": "ok"}, headers=CORS_HEADERS)


@router.get("/robots.txt", response_class=PlainTextResponse)
async def robots_txt():
    """Disallow all crawling."""
    return PlainTextResponse("User-agent: *\nDisallow: /")
