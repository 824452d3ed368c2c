"""Translate domain errors into HTTP responses.

Register these on a FastAPI app instance via `register_exception_handlers(app)`.
"""
import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from rankboard.core.errors import (
    DuplicateActionError,
    InsufficientSubjectsError,
    InvalidInputError,
    NotFoundError,
    RankboardError,
)

logger = logging.getLogger(__name__)

_STATUS_BY_ERROR: dict[type[RankboardError], int] = {
    NotFoundError: status.HTTP_404_NOT_FOUND,
    DuplicateActionError: status.HTTP_409_CONFLICT,
    InsufficientSubjectsError: status.HTTP_404_NOT_FOUND,
    InvalidInputError: status.HTTP_400_BAD_REQUEST,
}


def status_for(exc: RankboardError) -> int:
    """Return the HTTP status code for a domain error."""
    for error_type, status_code in _STATUS_BY_ERROR.items():
        if isinstance(exc, error_type):
            return status_code
    return status.HTTP_400_BAD_REQUEST


async def rankboard_error_handler(request: Request, exc: RankboardError) -> JSONResponse:
    """Render a domain error as ``{"detail": message}``."""
    status_code = status_for(exc)
    logger.debug("%s %s -> %d: %s", request.method, request.url.path, status_code, exc)
    return JSONResponse(status_code=status_code, content={"detail": str(exc)})


def register_exception_handlers(app: FastAPI) -> None:
    """Attach the domain error handler to ``app``."""
    app.add_exception_handler(RankboardError, rankboard_error_handler)
