"""Server-rendered contact form with reCAPTCHA verification, email notification and newsletter signup."""

from pathlib import Path
from typing import Any

from fastapi import FastAPI, Request, status
from fastapi.exception_handlers import http_exception_handler
from fastapi.staticfiles import StaticFiles
from starlette.exceptions import HTTPException as StarletteHTTPException

from . import __version__
from .endpoints import ROUTERS
from .logger import get_logger, setup_sentry
from .settings import settings
from .utils.templates import render_page


logger = get_logger(__name__)

app = FastAPI(
    title="Contact Form",
    description=__doc__,
    version=__version__,
    root_path=settings.root_path,
    openapi_tags=[{"name": name, "description": doc} for name, (_, doc) in ROUTERS.items()],
)

for router, _ in ROUTERS.values():
    app.include_router(router)

app.mount("/static", StaticFiles(directory=Path(__file__).parent / "../static"), name="static")

if settings.sentry_dsn:
    logger.debug("initializing sentry")
    setup_sentry(settings.sentry_dsn, "contact-form", __version__)


@app.exception_handler(StarletteHTTPException)
async def not_found_handler(request: Request, exc: StarletteHTTPException) -> Any:
    if exc.status_code == status.HTTP_404_NOT_FOUND:
        return render_page(request, "404.html", "404", status.HTTP_404_NOT_FOUND)
    return await http_exception_handler(request, exc)
