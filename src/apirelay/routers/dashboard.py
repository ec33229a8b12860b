"""Dashboard endpoints."""

from fastapi import APIRouter, Request
from fastapi.responses import HTMLResponse

from ..services.dashboard import render_dashboard
from ..services.headers import CORS_HEADERS

router = APIRouter(tags=["dashboard"])


@router.get("/", response_class=HTMLResponse)
@router.get("/index.html", response_class=HTMLResponse)
async def dashboard(request: Request):
    """Render the upstream overview for the host the caller used."""
    host = request.headers.get("host") or request.url.netloc
    return HTMLResponse(render_dashboard(host), headers=CORS_HEADERS)
