"""Request Logging Middleware — one access-log line per HTTP request.

Invariants:
    - Logs method, path, client IP, status code and latency for every request
    - Never reads request or response bodies (amounts and descriptions stay out of logs)
    - Unhandled exceptions are re-raised after logging so the global handler still runs

Design Decisions:
    - BaseHTTPMiddleware: runs inside Starlette's stack, sees the final status code
"""

import logging
import time

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint

logger = logging.getLogger(__name__)


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Access log with latency."""

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint,
    ) -> Response:
        start = time.perf_counter()
        client_ip = request.client.host if request.client else None
        try:
            response = await call_next(request)
        except Exception:
            logger.exception(
                f"{request.method} {request.url.path} raised",
                extra={
                    "method": request.method,
                    "path": request.url.path,
                    "client_ip": client_ip,
                    "latency_ms": _elapsed_ms(start),
                },
            )
            raise

        logger.info(
            f"{request.method} {request.url.path} -> {response.status_code}",
            extra={
                "method": request.method,
                "path": request.url.path,
                "client_ip": client_ip,
                "status_code": response.status_code,
                "latency_ms": _elapsed_ms(start),
            },
        )
        return response


def _elapsed_ms(start: float) -> float:
    return round((time.perf_counter() - start) * 1000, 2)
