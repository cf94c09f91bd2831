"""Tests for map generation and caching of the result."""

from unittest.mock import Mock

import pytest

from tasmap.core.cache import RenderCache
from tasmap.core.classifier import FirstLineClassifier, StrictClassifier
from tasmap.core.dispatcher import MapDispatcher, RenderStrategy
from tasmap.core.domain import CoordinateFormat, CoordinateInput, RenderedMap
from tasmap.core.generator import MapGenerator
from tasmap.errors import (
    InvalidCoordinateFormatError,
    RecordParseError,
    UnsupportedMapTypeError,
)

from tests.fixtures.coordinates import (
    MALFORMED_FIRST_LINE,
    MIXED_GRAMMAR,
    PLAIN_COORDINATES,
    VOUCHER_COORDINATES,
)


def coordinate_input(coordinates: str, map_type: str = "plain", taxon: str = "Eucalyptus gunnii"):
    return CoordinateInput.from_form(taxon, map_type, coordinates)


class TestMapGenerator:
    def test_from_settings_uses_configured_classifier(self, settings, render_cache):
        settings.classifier = "strict"
        generator = MapGenerator.from_settings(settings, render_cache)

        assert generator.classify(coordinate_input(MIXED_GRAMMAR)) is CoordinateFormat.INVALID

    def test_plain_scenario_populates_cache(self, generator, render_cache):
        rendered = generator.generate(coordinate_input(PLAIN_COORDINATES, "plain"))

        assert render_cache.load() is rendered
        assert rendered.svg_body
        assert rendered.file_name.endswith(".plain.svg")
        assert rendered.file_name == "eucalyptus-gunnii.plain.svg"

    def test_voucher_grid_scenario_marks_both_kinds(self, generator):
        rendered = generator.generate(coordinate_input(VOUCHER_COORDINATES, "grid"))

        assert rendered.svg_body.count('class="vouchered"') == 1
        assert rendered.svg_body.count('class="anecdotal"') == 1

    def test_dispatches_on_classified_format(self, render_cache):
        dispatcher = Mock(spec=MapDispatcher)
        dispatcher.render.return_value = "<svg/>"
        generator = MapGenerator(render_cache, FirstLineClassifier(), dispatcher)

        generator.generate(coordinate_input(VOUCHER_COORDINATES, "grid"))

        record_list, coordinate_format, map_type = dispatcher.render.call_args.args
        assert coordinate_format is CoordinateFormat.VOUCHER
        assert record_list.has_vouchers is True
        assert map_type == "grid"

    def test_invalid_first_line_leaves_cache_unchanged(self, generator, render_cache):
        previous = RenderedMap("Earlier taxon", "grid", "<svg>earlier</svg>")
        render_cache.store(previous)

        with pytest.raises(InvalidCoordinateFormatError) as exc_info:
            generator.generate(coordinate_input(MALFORMED_FIRST_LINE))

        assert exc_info.value.first_line == "not,coords"
        assert exc_info.value.message == "I can't interpret these coordinates"
        assert render_cache.load() is previous

    def test_invalid_first_line_never_builds_records(self, render_cache):
        dispatcher = Mock(spec=MapDispatcher)
        generator = MapGenerator(render_cache, FirstLineClassifier(), dispatcher)

        with pytest.raises(InvalidCoordinateFormatError):
            generator.generate(coordinate_input("abc"))

        dispatcher.render.assert_not_called()
        assert render_cache.load() is None

    def test_unsupported_map_type_leaves_cache_absent(self, generator, render_cache):
        with pytest.raises(UnsupportedMapTypeError) as exc_info:
            generator.generate(coordinate_input(PLAIN_COORDINATES, "contour"))

        assert exc_info.value.map_type == "contour"
        assert render_cache.load() is None

    def test_parse_error_in_later_line_leaves_cache_unchanged(self, generator, render_cache):
        with pytest.raises(RecordParseError):
            generator.generate(coordinate_input(MIXED_GRAMMAR))

        assert render_cache.load() is None

    def test_strict_classifier_rejects_before_parsing(self, render_cache):
        generator = MapGenerator(render_cache, StrictClassifier())

        with pytest.raises(InvalidCoordinateFormatError):
            generator.generate(coordinate_input(MIXED_GRAMMAR))

    def test_latest_reflects_last_generation(self, generator):
        assert generator.latest() is None

        generator.generate(coordinate_input(PLAIN_COORDINATES, "plain"))
        rendered = generator.generate(coordinate_input(PLAIN_COORDINATES, "web", taxon="Other taxon"))

        assert generator.latest() is rendered
        assert generator.latest().file_name == "other-taxon.web.svg"


def test_render_strategy_values_are_stable():
    assert [s.value for s in RenderStrategy] == ["voucher_grid", "grid", "exact", "web"]
