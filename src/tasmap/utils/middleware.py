"""Middleware utilities for the FastAPI application."""

from typing import Callable

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware

from .request_context import start_request

CORRELATION_HEADER = "X-Correlation-ID"


class CorrelationMiddleware(BaseHTTPMiddleware):
    """Start a fresh request context and echo its correlation id."""

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        correlation_id = start_request(request.headers.get(CORRELATION_HEADER))

        response = await call_next(request)

        response.headers[CORRELATION_HEADER] = correlation_id
        return response
