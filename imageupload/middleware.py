import time
import logging
from fastapi import Request
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.types import ASGIApp

from .config import settings
from .exceptions import create_error_response

logger = logging.getLogger(__name__)

SECURITY_HEADERS = {
    "X-Content-Type-Options": "nosniff",
    "X-Frame-Options": "DENY",
    "Referrer-Policy": "strict-origin-when-cross-origin",
}


class SecurityMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request: Request, call_next):
        response = await call_next(request)
        for header, value in SECURITY_HEADERS.items():
            response.headers.setdefault(header, value)
        return response


class LoggingMiddleware(BaseHTTPMiddleware):
    """Logs one line per request with status and elapsed time."""

    async def dispatch(self, request: Request, call_next):
        started = time.perf_counter()
        response = await call_next(request)
        elapsed_ms = (time.perf_counter() - started) * 1000
        client = request.client.host if request.client else "-"
        logger.info(
            f"{client} {request.method} {request.url.path} -> {response.status_code} ({elapsed_ms:.1f} ms)"
        )
        return response


class ErrorHandlingMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request: Request, call_next):
        try:
            return await call_next(request)
        except Exception as e:
            logger.error(f"Unhandled error on {request.method} {request.url.path}: {e}", exc_info=True)
            message = f"Internal server error: {e}" if settings.DEBUG else "Internal server error"
            return JSONResponse(status_code=500, content=create_error_response(message))


class RequestSizeLimitMiddleware(BaseHTTPMiddleware):
    """Rejects requests whose declared Content-Length exceeds ``max_size``.

    Bodies without the header pass through; the per-file checks in the
    upload service still bound each image.
    """

    def __init__(self, app: ASGIApp, max_size: int = None):
        super().__init__(app)
        self.max_size = max_size or settings.MAX_REQUEST_SIZE

    async def dispatch(self, request: Request, call_next):
        declared = request.headers.get("content-length", "")
        if declared.isdigit() and int(declared) > self.max_size:
            logger.warning(f"Rejected {request.url.path}: body of {declared} bytes exceeds {self.max_size}")
            return JSONResponse(status_code=413, content=create_error_response("Request entity too large"))
        return await call_next(request)
