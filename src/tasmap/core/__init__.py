"""
Core map functionality.

Single responsibility: classification, dispatch and caching of maps.
"""

from .cache import RenderCache
from .classifier import (
    FirstLineClassifier,
    StrictClassifier,
    build_classifier,
    classify,
    first_line,
)
from .dispatcher import DISPATCH_TABLE, MapDispatcher, RenderStrategy, select_strategy
from .domain import CoordinateFormat, CoordinateInput, MapType, RenderedMap, map_file_name
from .generator import MapGenerator
from .records import build_record_list

__all__ = [
    "CoordinateFormat",
    "CoordinateInput",
    "DISPATCH_TABLE",
    "FirstLineClassifier",
    "MapDispatcher",
    "MapGenerator",
    "MapType",
    "RenderCache",
    "RenderStrategy",
    "RenderedMap",
    "StrictClassifier",
    "build_classifier",
    "build_record_list",
    "classify",
    "first_line",
    "map_file_name",
    "select_strategy",
]
