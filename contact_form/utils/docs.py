from typing import Any

from ..exceptions.api_exception import APIException


def responses(*args: type[APIException]) -> dict[int | str, dict[str, Any]]:
    """Build the OpenAPI `responses` of an endpoint from the exceptions it may raise."""

    exceptions: dict[int, list[type[APIException]]] = {}
    for exc in args:
        exceptions.setdefault(exc.status_code, []).append(exc)

    return {code: {"description": " / ".join(exc.description for exc in excs)} for code, excs in exceptions.items()}
