import uvicorn

from .settings import settings


def main() -> None:
    uvicorn.run(
        "contact_form.app:app",
        host=settings.host,
        port=settings.port,
        root_path=settings.root_path,
        reload=settings.reload,
    )
