"""Exception handlers mapping errors to the JSON error envelope.

Every known error is rendered once, here, as ``{"ok": false, "error": code}``.
Unexpected exceptions are handled by ``ErrorBoundaryMiddleware``.
"""

import logfire
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException

from remark.domain.error import (
    AuthError,
    ConcurrentModificationError,
    DomainError,
    NotFoundError,
    QuotaExceededError,
    ValidationError,
)
from remark.interface.api.responses import NoStoreJSONResponse, error_response
from remark.interface.error import InterfaceError
from remark.util.error import ConfigError

DOMAIN_ERROR_STATUS: list[tuple[type[DomainError], int]] = [
    (ValidationError, status.HTTP_400_BAD_REQUEST),
    (QuotaExceededError, status.HTTP_400_BAD_REQUEST),
    (AuthError, status.HTTP_401_UNAUTHORIZED),
    (NotFoundError, status.HTTP_404_NOT_FOUND),
    (ConcurrentModificationError, status.HTTP_409_CONFLICT),
]


def status_for(error: DomainError) -> int:
    """HTTP status for a domain error (500 for unmapped ones)."""
    for error_type, status_code in DOMAIN_ERROR_STATUS:
        if isinstance(error, error_type):
            return status_code
    return status.HTTP_500_INTERNAL_SERVER_ERROR


async def domain_error_handler(request: Request, exc: DomainError) -> NoStoreJSONResponse:
    status_code = status_for(exc)
    logfire.info(
        "Request rejected",
        method=request.method,
        path=request.url.path,
        error=exc.code,
        status_code=status_code,
    )
    return error_response(exc.code, status_code)


async def interface_error_handler(
    request: Request, exc: InterfaceError
) -> NoStoreJSONResponse:
    logfire.info(
        "Malformed request", method=request.method, path=request.url.path, error=exc.code
    )
    return error_response(exc.code, exc.status_code)


async def config_error_handler(request: Request, exc: ConfigError) -> NoStoreJSONResponse:
    logfire.error("Service misconfigured", path=request.url.path, error=exc.code)
    return error_response(exc.code, status.HTTP_500_INTERNAL_SERVER_ERROR)


async def http_exception_handler(
    request: Request, exc: StarletteHTTPException
) -> NoStoreJSONResponse:
    # Unknown paths and known paths with the wrong method look the same
    if exc.status_code in (status.HTTP_404_NOT_FOUND, status.HTTP_405_METHOD_NOT_ALLOWED):
        return error_response("not_found", status.HTTP_404_NOT_FOUND)
    return error_response(f"http_{exc.status_code}", exc.status_code)


async def request_validation_handler(
    request: Request, exc: RequestValidationError
) -> NoStoreJSONResponse:
    return error_response("invalid_request", status.HTTP_400_BAD_REQUEST)


def register_error_handlers(app: FastAPI) -> None:
    """Install the error envelope handlers on an application."""
    app.add_exception_handler(DomainError, domain_error_handler)
    app.add_exception_handler(InterfaceError, interface_error_handler)
    app.add_exception_handler(ConfigError, config_error_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
