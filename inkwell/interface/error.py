"""Interface layer error handling.

Domain errors are rendered as ``{"detail": <message>, "error": <kind>}``
with the status mapped below.
"""

import logfire
from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from inkwell.domain.error import (
    DomainError,
    NotAuthorizedError,
    NotFoundError,
    StorageError,
    ValidationError,
)

ERROR_STATUS: dict[type[DomainError], int] = {
    ValidationError: status.HTTP_400_BAD_REQUEST,
    NotFoundError: status.HTTP_404_NOT_FOUND,
    NotAuthorizedError: status.HTTP_403_FORBIDDEN,
    StorageError: status.HTTP_500_INTERNAL_SERVER_ERROR,
}

ERROR_KIND: dict[type[DomainError], str] = {
    ValidationError: "validation",
    NotFoundError: "not_found",
    NotAuthorizedError: "not_authorized",
    StorageError: "storage",
}


def _lookup(error: DomainError, table: dict, default):
    for cls in type(error).__mro__:
        if cls in table:
            return table[cls]
    return default


async def domain_error_handler(request: Request, exc: DomainError) -> JSONResponse:
    """Render a domain error as JSON."""
    status_code = _lookup(exc, ERROR_STATUS, status.HTTP_400_BAD_REQUEST)
    kind = _lookup(exc, ERROR_KIND, "domain")

    if isinstance(exc, StorageError):
        logfire.error("Storage failure", path=request.url.path, error=str(exc))
        detail = "Internal storage error"
    else:
        logfire.warn(
            "Request rejected",
            path=request.url.path,
            error_kind=kind,
            error=str(exc),
        )
        detail = str(exc)

    return JSONResponse(
        status_code=status_code, content={"detail": detail, "error": kind}
    )


def register_error_handlers(app: FastAPI) -> None:
    """Register domain error handlers on the app.

    Args:
        app: FastAPI application
    """
    app.add_exception_handler(DomainError, domain_error_handler)
