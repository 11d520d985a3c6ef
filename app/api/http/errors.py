import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from app.core.errors import (
    DocumentNotFoundError, InterviewNotFoundError, NotFoundError, ServiceError,
    StageTransitionError, TakeNotFoundError, UnauthorizedError, UserNotFoundError
)

logger = logging.getLogger(__name__)


def error_response(exc: ServiceError) -> JSONResponse:
    """Map a service failure onto a status code and body"""
    if isinstance(exc, NotFoundError):
        if isinstance(exc, InterviewNotFoundError):
            detail = "Interview not found"
        elif isinstance(exc, DocumentNotFoundError):
            detail = "Document not found"
        elif isinstance(exc, TakeNotFoundError):
            detail = "Take not found"
        elif isinstance(exc, UserNotFoundError):
            detail = "User not found"
        else:
            detail = "Not found"
        return JSONResponse(status_code=status.HTTP_404_NOT_FOUND, content={"detail": detail})

    if isinstance(exc, UnauthorizedError):
        return JSONResponse(status_code=status.HTTP_403_FORBIDDEN, content={"detail": "Unauthorized"})

    if isinstance(exc, StageTransitionError):
        return JSONResponse(status_code=status.HTTP_409_CONFLICT, content={"detail": str(exc)})

    logger.error("Unmapped service error: %r", exc)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": "Internal server error"}
    )


def register_error_handlers(app: FastAPI) -> None:
    @app.exception_handler(ServiceError)
    async def service_error_handler(request: Request, exc: ServiceError):
        return error_response(exc)
