"""HTTP middleware: CORS headers and the last-resort error boundary."""

from collections.abc import Awaitable, Callable

import logfire
from fastapi import Request, Response, status
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.types import ASGIApp

from remark.interface.api.responses import error_response


class ErrorBoundaryMiddleware(BaseHTTPMiddleware):
    """Turn any exception no handler claimed into a generic 500 envelope.

    Internal details never reach the client; they go to Logfire.
    """

    async def dispatch(
        self,
        request: Request,
        call_next: Callable[[Request], Awaitable[Response]],
    ) -> Response:
        try:
            return await call_next(request)
        except Exception as e:
            logfire.exception(
                "Unhandled error",
                method=request.method,
                path=request.url.path,
                error_type=type(e).__name__,
            )
            return error_response("internal_error", status.HTTP_500_INTERNAL_SERVER_ERROR)


class CORSHeadersMiddleware(BaseHTTPMiddleware):
    """CORS for browser clients on other origins.

    - ``OPTIONS`` on any path is answered directly with 204.
    - Every response gets the allowed methods, headers and preflight max age.
    - The request's ``Origin`` is echoed back when the allow-list is empty or
      contains it; otherwise no allow-origin header is sent.
    """

    ALLOW_METHODS = "GET,POST,DELETE,OPTIONS"
    ALLOW_HEADERS = "content-type,authorization"
    MAX_AGE = "86400"

    def __init__(self, app: ASGIApp, allow_origins: list[str] | None = None) -> None:
        """Initialize the middleware.

        Args:
            app: The ASGI application.
            allow_origins: Allowed origins; empty or None allows any origin.
        """
        super().__init__(app)
        self.allow_origins = list(allow_origins or [])

    def is_allowed(self, origin: str) -> bool:
        """Whether a request origin may read responses."""
        return not self.allow_origins or origin in self.allow_origins

    async def dispatch(
        self,
        request: Request,
        call_next: Callable[[Request], Awaitable[Response]],
    ) -> Response:
        if request.method == "OPTIONS":
            response = Response(status_code=status.HTTP_204_NO_CONTENT)
        else:
            response = await call_next(request)

        origin = request.headers.get("origin")
        if origin and self.is_allowed(origin):
            response.headers["access-control-allow-origin"] = origin
            response.headers["vary"] = "Origin"
        response.headers["access-control-allow-methods"] = self.ALLOW_METHODS
        response.headers["access-control-allow-headers"] = self.ALLOW_HEADERS
        response.headers["access-control-max-age"] = self.MAX_AGE
        return response
