"""
RequestContext Middleware - Adds request tracking to all requests.

Every request gets a request_id stored on request.state and bound to the
structlog context, so engine log lines emitted while serving it carry the
same id. The id is echoed back in the X-Request-ID response header.
"""

import uuid

import structlog
from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware

from app.infrastructure.observability.logging import get_logger

logger = get_logger(__name__)


class RequestContextMiddleware(BaseHTTPMiddleware):
    """
    Add request context to all incoming requests.

    Honors an incoming X-Request-ID header so callers can correlate their
    own logs; otherwise generates a UUID.
    """

    async def dispatch(self, request: Request, call_next):
        """Process request and add context."""
        request_id = request.headers.get("x-request-id") or str(uuid.uuid4())
        request.state.request_id = request_id

        structlog.contextvars.clear_contextvars()
        structlog.contextvars.bind_contextvars(request_id=request_id)

        logger.debug("Request started", method=request.method, path=request.url.path)

        try:
            response = await call_next(request)
        finally:
            structlog.contextvars.unbind_contextvars("request_id")

        response.headers["X-Request-ID"] = request_id
        return response
