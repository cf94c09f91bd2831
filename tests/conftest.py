"""
Shared pytest configuration for the tasmap test suite.
"""

import logging

import pytest
import structlog
from fastapi.testclient import TestClient

from tasmap.api import create_app
from tasmap.config import TasmapSettings
from tasmap.core import MapGenerator, RenderCache


@pytest.fixture
def settings() -> TasmapSettings:
    """Settings with defaults, independent of the calling environment."""
    return TasmapSettings(
        environment="test",
        log_level="WARNING",
        classifier="first_line",
        map_width=600,
        grid_cell_degrees=0.1,
        templates_dir=None,
    )


@pytest.fixture
def reset_logging():
    """Undo logging configuration made by the code under test."""
    yield
    structlog.reset_defaults()
    logging.getLogger().handlers.clear()


@pytest.fixture
def render_cache() -> RenderCache:
    return RenderCache()


@pytest.fixture
def generator(settings: TasmapSettings, render_cache: RenderCache) -> MapGenerator:
    return MapGenerator.from_settings(settings, render_cache)


@pytest.fixture
def app(settings: TasmapSettings):
    return create_app(settings, configure_logs=False)


@pytest.fixture
def client(app):
    """Provide test client for the FastAPI app."""
    with TestClient(app) as test_client:
        yield test_client
