"""JSON error responses for domain and framework exceptions.

Every error body is an envelope {"error", "message", "details", "request_id"}.
Domain errors take their HTTP status from error_code; a refused status
change (blocked gate, stale version) is a 409 the client is expected to
handle, so it is logged at INFO rather than as an error.
"""

import logging
from typing import Any

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.core.config import get_settings
from app.domain.exceptions import FleetGateException
from app.shared.telemetry.logging import request_id_var

logger = logging.getLogger(__name__)

STATUS_BY_ERROR_CODE: dict[str, int] = {
    "RESOURCE_NOT_FOUND": 404,
    "ENTITY_VERSION_CONFLICT": 409,
    "TRANSITION_BLOCKED": 409,
    "TRANSITION_NOT_PERMITTED": 422,
    "CONFIGURATION_ERROR": 500,
    "SERVICE_UNAVAILABLE": 503,
}


def _envelope(
    status_code: int, error: str, message: Any, details: Any = None
) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={
            "error": error,
            "message": message,
            "details": details if details is not None else {},
            "request_id": request_id_var.get(),
        },
    )


def _domain_error(request: Request, exc: FleetGateException) -> JSONResponse:
    status_code = STATUS_BY_ERROR_CODE.get(exc.error_code, 400)
    if status_code >= 500:
        logger.error("%s on %s %s: %s", exc.error_code, request.method, request.url.path, exc.message)
    elif status_code == 409:
        logger.info("%s on %s %s: %s", exc.error_code, request.method, request.url.path, exc.message)
    return _envelope(status_code, exc.error_code, exc.message, exc.details)


def _request_validation_error(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    return _envelope(
        422, "VALIDATION_ERROR", "Request validation failed", jsonable_encoder(exc.errors())
    )


def _http_error(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    return _envelope(exc.status_code, "HTTP_ERROR", exc.detail)


def _unhandled_error(request: Request, exc: Exception) -> JSONResponse:
    """500 envelope; the exception text is only exposed when DEBUG is on."""
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    message = str(exc) if get_settings().debug else "Internal server error"
    return _envelope(500, "INTERNAL_ERROR", message)


def register_exception_handlers(app: FastAPI) -> None:
    """Install the JSON error handlers on app."""
    app.add_exception_handler(FleetGateException, _domain_error)
    app.add_exception_handler(RequestValidationError, _request_validation_error)
    app.add_exception_handler(StarletteHTTPException, _http_error)
    app.add_exception_handler(Exception, _unhandled_error)
