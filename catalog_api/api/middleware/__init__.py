"""HTTP middleware."""

from .logging import StructuredLoggingMiddleware, CORRELATION_HEADER

__all__ = ["StructuredLoggingMiddleware", "CORRELATION_HEADER"]
