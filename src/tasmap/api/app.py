"""FastAPI application builder for the tasmap service."""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import Callable, Optional

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from .. import __version__
from ..config.settings import TasmapSettings
from ..core.cache import RenderCache
from ..core.generator import MapGenerator
from ..errors import TasmapError
from ..utils.request_context import current_correlation_id
from ..utils.logging import configure_logging, get_logger
from ..utils.middleware import CorrelationMiddleware
from .pages import PageRenderer
from .routes import router

logger = get_logger(__name__)


class TasmapAppBuilder:
    """Builder for creating the FastAPI map application.

    The render cache is created here, once per application, and shared with
    the request handlers through ``app.state``.
    """

    def __init__(self, settings: TasmapSettings, configure_logs: bool = True):
        self.settings = settings
        self.configure_logs = configure_logs
        self.render_cache = RenderCache()
        self.map_generator = MapGenerator.from_settings(settings, self.render_cache)
        self.page_renderer = PageRenderer(settings.resolve_templates_dir())
        self.app: Optional[FastAPI] = None

    def _create_lifespan_handler(self) -> Callable:
        """Create lifespan handler for the FastAPI app."""

        @asynccontextmanager
        async def lifespan(_app: FastAPI):
            if self.configure_logs:
                configure_logging(
                    "tasmap",
                    log_level=self.settings.log_level,
                    log_format=self.settings.log_format,
                )
            logger.info(
                "Starting tasmap service",
                environment=self.settings.environment,
                classifier=self.settings.classifier,
            )
            try:
                yield
            finally:
                logger.info("Tasmap service shutdown complete")

        return lifespan

    def _add_exception_handlers(self, app: FastAPI) -> None:
        """Add exception handlers."""

        async def tasmap_exception_handler(_request: Request, exc: TasmapError):
            body = exc.to_dict()
            body["correlation_id"] = current_correlation_id()
            return JSONResponse(status_code=exc.http_status, content={"detail": body})

        async def unhandled_exception_handler(_request: Request, exc: Exception):
            logger.error("Unhandled error", error=str(exc), error_type=type(exc).__name__)
            body = TasmapError("An unexpected error occurred").to_dict()
            body["correlation_id"] = current_correlation_id()
            return JSONResponse(status_code=500, content={"detail": body})

        app.add_exception_handler(TasmapError, tasmap_exception_handler)
        app.add_exception_handler(Exception, unhandled_exception_handler)

    def build(self) -> FastAPI:
        app = FastAPI(
            title="Tasmap",
            description="Distribution maps for Tasmanian taxa from coordinate lists",
            version=__version__,
            lifespan=self._create_lifespan_handler(),
        )
        app.state.settings = self.settings
        app.state.render_cache = self.render_cache
        app.state.map_generator = self.map_generator
        app.state.page_renderer = self.page_renderer

        app.add_middleware(CorrelationMiddleware)
        self._add_exception_handlers(app)
        app.include_router(router)

        self.app = app
        return app


def create_app(settings: Optional[TasmapSettings] = None, **kwargs) -> FastAPI:
    """Build the application with the given (or environment) settings."""
    return TasmapAppBuilder(settings or TasmapSettings(), **kwargs).build()
