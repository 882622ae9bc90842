"""
Maps :class:`~fitcoach.core.exceptions.DomainError` to the JSON error envelope.

Error responses keep the shape of success responses with ``data`` set to
null, so API clients parse a single envelope::

    {"data": null,
     "meta": {"path": ..., "timestamp": ..., "request_id": ...},
     "errors": [{"code": ..., "message": ..., "details": {...}}]}
"""

import datetime

from fastapi import Request, status
from fastapi.responses import JSONResponse

from fitcoach.core.exceptions import (
    ConflictError,
    DomainError,
    ForbiddenError,
    NotFoundError,
    ValidationError,
)
from fitcoach.core.logging import get_logger

logger = get_logger(__name__)

ERROR_STATUS_MAP: dict[type[DomainError], int] = {
    NotFoundError: status.HTTP_404_NOT_FOUND,
    ValidationError: status.HTTP_400_BAD_REQUEST,
    ConflictError: status.HTTP_409_CONFLICT,
    ForbiddenError: status.HTTP_403_FORBIDDEN,
}


def status_for(exc: DomainError) -> int:
    """HTTP status of *exc*, resolved along its class hierarchy."""
    for cls in type(exc).__mro__:
        if cls in ERROR_STATUS_MAP:
            return ERROR_STATUS_MAP[cls]
    return status.HTTP_500_INTERNAL_SERVER_ERROR


async def domain_error_handler(request: Request, exc: DomainError) -> JSONResponse:
    status_code = status_for(exc)
    if status_code >= status.HTTP_500_INTERNAL_SERVER_ERROR:
        logger.error("domain_error_unmapped", code=exc.code, error_type=type(exc).__name__)
    else:
        logger.info("domain_error", code=exc.code, status_code=status_code)

    state = getattr(request, "state", None)
    return JSONResponse(
        status_code=status_code,
        content={
            "data": None,
            "meta": {
                "path": request.url.path if getattr(request, "url", None) else None,
                "timestamp": datetime.datetime.utcnow().isoformat() + "Z",
                "request_id": getattr(state, "request_id", None),
            },
            "errors": [
                {
                    "code": exc.code,
                    "message": exc.message,
                    "details": exc.details,
                }
            ],
        },
    )
