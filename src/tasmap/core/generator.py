"""
Map generation for a single display request.

Handles:
- Classification of the coordinate list (hard validation gate)
- Record list construction through the rendering engine
- Strategy dispatch and storage of the result in the render cache
"""

from __future__ import annotations

from typing import Optional

from ..config.settings import TasmapSettings
from ..engine import RenderOptions
from ..errors import InvalidCoordinateFormatError, UnsupportedMapTypeError
from ..utils.logging import get_logger
from .cache import RenderCache
from .classifier import build_classifier, first_line
from .dispatcher import MapDispatcher
from .domain import CoordinateFormat, CoordinateInput, RenderedMap
from .ports import CoordinateClassifierPort
from .records import build_record_list

logger = get_logger(__name__)


class MapGenerator:
    """Turns a ``CoordinateInput`` into a ``RenderedMap`` and caches it."""

    def __init__(
        self,
        cache: RenderCache,
        classifier: CoordinateClassifierPort,
        dispatcher: Optional[MapDispatcher] = None,
    ):
        self.cache = cache
        self._classifier = classifier
        self._dispatcher = dispatcher or MapDispatcher()

    @classmethod
    def from_settings(cls, settings: TasmapSettings, cache: RenderCache) -> "MapGenerator":
        """Wire a generator from service settings around an existing cache."""

        options = RenderOptions(
            width=settings.map_width,
            cell_degrees=settings.grid_cell_degrees,
        )
        return cls(
            cache=cache,
            classifier=build_classifier(settings.classifier),
            dispatcher=MapDispatcher(options),
        )

    def classify(self, coordinate_input: CoordinateInput) -> CoordinateFormat:
        return self._classifier.classify_text(coordinate_input.raw_coordinates)

    def generate(self, coordinate_input: CoordinateInput) -> RenderedMap:
        """Render the input and store it as the current map.

        Raises:
            InvalidCoordinateFormatError: the first line matches neither grammar.
            RecordParseError: a later line cannot be parsed by the engine.
            UnsupportedMapTypeError: no strategy exists for the map type.

        The cache is left untouched whenever an exception is raised.
        """
        coordinate_format = self.classify(coordinate_input)
        if coordinate_format is CoordinateFormat.INVALID:
            offending_line = first_line(coordinate_input.raw_coordinates)
            logger.warning(
                "Coordinates contain an error in the first line and cannot be interpreted",
                first_line=offending_line,
                taxon=coordinate_input.taxon,
            )
            raise InvalidCoordinateFormatError(offending_line)

        record_list = build_record_list(
            coordinate_format, coordinate_input.raw_coordinates, coordinate_input.taxon
        )
        svg_body = self._dispatcher.render(
            record_list, coordinate_format, coordinate_input.map_type
        )
        if not svg_body:
            raise UnsupportedMapTypeError(coordinate_input.map_type_name)

        rendered = RenderedMap(
            taxon_name=coordinate_input.taxon,
            map_type=coordinate_input.map_type_name,
            svg_body=svg_body,
        )
        self.cache.store(rendered)

        logger.info(
            "Map generated",
            taxon=rendered.taxon_name,
            map_type=rendered.map_type,
            coordinate_format=coordinate_format.value,
            records=len(record_list),
            file_name=rendered.file_name,
        )
        return rendered

    def latest(self) -> Optional[RenderedMap]:
        """Return the current map or None; absence is a normal state."""
        return self.cache.load()
