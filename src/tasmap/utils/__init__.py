"""
Utility modules for the tasmap service.

Logging setup, per-request context and HTTP middleware.
"""

from .logging import configure_logging, get_logger
from .middleware import CorrelationMiddleware
from .request_context import (
    bind_map_request,
    current_correlation_id,
    request_context,
    start_request,
)

__all__ = [
    "CorrelationMiddleware",
    "bind_map_request",
    "configure_logging",
    "current_correlation_id",
    "get_logger",
    "request_context",
    "start_request",
]
