"""
Middleware components for the application.
"""
import time
import logging
from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware

logger = logging.getLogger(__name__)

class LoggingMiddleware(BaseHTTPMiddleware):
    """Middleware for logging request/response details."""

    async def dispatch(self, request: Request, call_next):
        start_time = time.time()

        logger.info("Request started", extra={
            "method": request.method,
            "path": request.url.path,
            "client_host": request.client.host if request.client else None
        })

        try:
            response = await call_next(request)
            process_time = time.time() - start_time

            logger.info("Request completed", extra={
                "method": request.method,
                "path": request.url.path,
                "status_code": response.status_code,
                "process_time": f"{process_time:.3f}s"
            })

            return response
        except Exception as exc:
            process_time = time.time() - start_time
            logger.error("Request failed", extra={
                "method": request.method,
                "path": request.url.path,
                "error": str(exc),
                "process_time": f"{process_time:.3f}s"
            })
            raise
