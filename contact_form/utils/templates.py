from pathlib import Path

from fastapi import Request, status
from fastapi.responses import HTMLResponse
from fastapi.templating import Jinja2Templates

from ..schemas.contact import ContactContext


templates = Jinja2Templates(directory=Path(__file__).parent / "../../templates")


def render_contact(request: Request, context: ContactContext, status_code: int = status.HTTP_200_OK) -> HTMLResponse:
    return templates.TemplateResponse(request, "contact.html", context.model_dump(), status_code=status_code)


def render_page(request: Request, template: str, title: str, status_code: int = status.HTTP_200_OK) -> HTMLResponse:
    return templates.TemplateResponse(request, template, {"title": title}, status_code=status_code)
