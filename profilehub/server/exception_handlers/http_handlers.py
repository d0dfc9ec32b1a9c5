"""
HTTP and Validation Exception Handlers.

Error bodies carry the FastAPI ``detail`` key plus the ``message`` key the
browser client displays. Request validation failures are reported as 400
with the individual validation errors under ``errors``. An id in the URL
path that does not parse cannot name an existing record, so it is reported
as 404 instead.
"""

from typing import Any, Optional, Sequence

from fastapi import Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from profilehub.core.logging_config import get_logger

logger = get_logger(__name__)

# Most specific path fragment first
VALIDATION_MESSAGES = (
    ("/custom-fields", "Invalid custom field data"),
    ("/documents", "Invalid document data"),
    ("/profiles", "Invalid profile data"),
    ("/settings", "Invalid setting data"),
    ("/auth", "Invalid login data"),
)

PATH_NOT_FOUND_MESSAGES = {
    "profile_id": "Profile not found",
    "document_id": "Document not found",
    "field_id": "Custom field not found",
}


def validation_message_for(path: str) -> str:
    """Resource-specific message for a request validation failure."""
    for fragment, message in VALIDATION_MESSAGES:
        if fragment in path:
            return message
    return "Invalid request data"


def path_not_found_message(errors: Sequence[dict[str, Any]]) -> Optional[str]:
    """Not-found message for the first invalid path parameter, if any."""
    for error in errors:
        loc = error.get("loc") or ()
        if len(loc) >= 2 and loc[0] == "path":
            return PATH_NOT_FOUND_MESSAGES.get(str(loc[1]), "Not found")
    return None


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    """Render an HTTPException with both ``detail`` and ``message``."""
    if exc.status_code >= 500:
        logger.error(f"{request.method} {request.url.path} failed with {exc.status_code}: {exc.detail}")
    return JSONResponse(
        status_code=exc.status_code,
        content={"detail": exc.detail, "message": exc.detail},
        headers=getattr(exc, "headers", None),
    )


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Render request validation errors as a 400 response, or 404 for an unparsable path id."""
    not_found = path_not_found_message(exc.errors())
    if not_found is not None:
        logger.debug(f"{request.method} {request.url.path}: {not_found}")
        return JSONResponse(
            status_code=status.HTTP_404_NOT_FOUND,
            content={"detail": not_found, "message": not_found},
        )

    errors = jsonable_encoder(exc.errors())
    message = validation_message_for(request.url.path)
    logger.debug(f"{message} for {request.method} {request.url.path}: {errors}")
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"detail": errors, "message": message, "errors": errors},
    )
