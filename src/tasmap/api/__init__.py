"""
HTTP boundary for the tasmap service.

Single responsibility: adapt HTTP requests and responses to the map core.
"""

from .app import TasmapAppBuilder, create_app
from .routes import router

__all__ = [
    "TasmapAppBuilder",
    "create_app",
    "router",
]
