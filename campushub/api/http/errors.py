import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from campushub.core.exceptions import (
    CampusHubError, NotFoundError, AuthorizationDenied, ValidationError,
    ConflictError, InvalidStateError, DepthLimitExceeded
)

logger = logging.getLogger(__name__)

# Порядок важен: берется первый подходящий класс
ERROR_STATUS_CODES = [
    (NotFoundError, status.HTTP_404_NOT_FOUND),
    (AuthorizationDenied, status.HTTP_403_FORBIDDEN),
    (ValidationError, status.HTTP_400_BAD_REQUEST),
    (ConflictError, status.HTTP_409_CONFLICT),
    (InvalidStateError, status.HTTP_400_BAD_REQUEST),
    (DepthLimitExceeded, status.HTTP_400_BAD_REQUEST),
]


def status_code_for(error: CampusHubError) -> int:
    for error_class, status_code in ERROR_STATUS_CODES:
        if isinstance(error, error_class):
            return status_code
    return status.HTTP_500_INTERNAL_SERVER_ERROR


async def campushub_error_handler(request: Request, exc: CampusHubError) -> JSONResponse:
    status_code = status_code_for(exc)
    logger.info(f"{request.method} {request.url.path} -> {status_code}: {exc.message}")
    return JSONResponse(
        status_code=status_code,
        content={"detail": exc.message, "error": type(exc).__name__}
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Перевод ошибок ядра в HTTP-ответы"""
    app.add_exception_handler(CampusHubError, campushub_error_handler)
