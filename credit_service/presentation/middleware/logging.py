"""Request/response logging middleware with timing."""

import time
from typing import Callable

import structlog
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response

from credit_service.core.metrics import record_http_request

logger = structlog.get_logger(__name__)


def _endpoint(request: Request) -> str:
    """Route template of the request, e.g. /credits/{credit_id}."""
    route = request.scope.get("route")
    return getattr(route, "path", request.url.path)


class LoggingMiddleware(BaseHTTPMiddleware):
    """Logs request start, completion and duration; records HTTP metrics."""

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        start_time = time.perf_counter()
        method = request.method
        query = str(request.query_params) if request.query_params else None

        log = logger.bind(method=method, path=request.url.path)

        log.info("request_started", query=query)

        try:
            response = await call_next(request)
        except Exception as e:
            duration_ms = (time.perf_counter() - start_time) * 1000

            log.error(
                "request_failed",
                error=str(e),
                error_type=type(e).__name__,
                duration_ms=round(duration_ms, 2),
            )
            record_http_request(
                method, _endpoint(request), 500, duration_ms / 1000
            )
            raise

        duration = time.perf_counter() - start_time

        log.info(
            "request_completed",
            status_code=response.status_code,
            duration_ms=round(duration * 1000, 2),
        )
        record_http_request(method, _endpoint(request), response.status_code, duration)

        return response
