"""API middleware."""

from aqualedger.api.middleware.error_handler import ErrorHandlerMiddleware
from aqualedger.api.middleware.logging import LoggingMiddleware

__all__ = ["LoggingMiddleware", "ErrorHandlerMiddleware"]
