"""Request ID propagation for logs and error bodies."""

import uuid
from contextvars import ContextVar
from typing import Optional

import structlog
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request

REQUEST_ID_HEADER = "X-Request-ID"

request_id_var: ContextVar[Optional[str]] = ContextVar("request_id", default=None)


def get_request_id(request: Optional[Request] = None) -> Optional[str]:
    """
    Current request ID.

    Inside the middleware the context variable holds it. Handlers that run
    after the middleware has unwound (the catch-all 500 handler) read the
    copy kept on ``request.state``.
    """
    request_id = request_id_var.get()
    if request_id is None and request is not None:
        request_id = getattr(request.state, "request_id", None)
    return request_id


class RequestContextMiddleware(BaseHTTPMiddleware):
    """Assigns each request an ID, binds it into structlog and echoes it."""

    async def dispatch(self, request: Request, call_next):
        request_id = request.headers.get(REQUEST_ID_HEADER) or uuid.uuid4().hex
        request.state.request_id = request_id

        token = request_id_var.set(request_id)
        try:
            with structlog.contextvars.bound_contextvars(request_id=request_id):
                response = await call_next(request)
        finally:
            request_id_var.reset(token)

        response.headers[REQUEST_ID_HEADER] = request_id
        return response
