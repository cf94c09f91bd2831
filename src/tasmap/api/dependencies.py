"""
FastAPI dependencies for the tasmap service.

Single responsibility: hand the objects owned by the application (render
cache, generator and page renderer) to request handlers. All of them are
created once by the app builder and live on ``app.state``.
"""

from fastapi import Request

from ..core.cache import RenderCache
from ..core.generator import MapGenerator
from .pages import PageRenderer


def get_render_cache(request: Request) -> RenderCache:
    return request.app.state.render_cache


def get_map_generator(request: Request) -> MapGenerator:
    return request.app.state.map_generator


def get_page_renderer(request: Request) -> PageRenderer:
    return request.app.state.page_renderer
