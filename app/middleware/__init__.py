"""
Middleware components for request processing.

This package contains middleware for:
- Request context (request ID propagated to logs and response headers)
"""

from app.middleware.request_context import RequestContextMiddleware

__all__ = ["RequestContextMiddleware"]
