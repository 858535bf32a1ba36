"""Static pages"""

from typing import Any

from fastapi import APIRouter, Request
from fastapi.responses import HTMLResponse

from ..utils.templates import render_page


router = APIRouter(tags=["pages"])


@router.get("/", response_class=HTMLResponse)
async def home(request: Request) -> Any:
    """Render the home page."""

    return render_page(request, "index.html", "Home")
