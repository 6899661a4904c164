import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from todo_app.errors import ConnectivityError, ConstraintViolationError, NotFoundError

logger = logging.getLogger(__name__)

STATUS_CODES = {
    NotFoundError: 404,
    ConstraintViolationError: 409,
    ConnectivityError: 503,
}


def register_error_handlers(app: FastAPI) -> None:
    for exc_class, status_code in STATUS_CODES.items():
        app.add_exception_handler(exc_class, _handler(status_code))


def _handler(status_code: int):
    async def handle(request: Request, exc: Exception) -> JSONResponse:
        logger.info("%s %s -> %s: %s", request.method, request.url.path, status_code, exc)
        return JSONResponse(status_code=status_code, content={"detail": str(exc)})
    return handle
