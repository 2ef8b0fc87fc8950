"""Exception handlers that render every failure as ``{"error": message}``."""

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from chirpy.exceptions import ChirpyError, InternalError, MalformedRequest

logger = logging.getLogger(__name__)


def error_response(error: ChirpyError) -> JSONResponse:
    return JSONResponse(status_code=error.status_code, content={"error": error.message})


def register_exception_handlers(app: FastAPI) -> None:
    """Attach the error envelope handlers to an application."""

    @app.exception_handler(ChirpyError)
    async def chirpy_error_handler(request: Request, exc: ChirpyError) -> JSONResponse:
        return error_response(exc)

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        # Field locations only; the rejected input may contain a password
        fields = [".".join(str(part) for part in err["loc"]) for err in exc.errors()]
        logger.info(f"Malformed request to {request.url.path}: {fields}")
        return error_response(MalformedRequest())

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
        return JSONResponse(
            status_code=exc.status_code,
            content={"error": str(exc.detail)},
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(Exception)
    async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
        logger.exception(f"Unhandled error on {request.method} {request.url.path}")
        return error_response(InternalError())
