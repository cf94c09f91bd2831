"""Tests for domain value objects."""

import dataclasses

import pytest

from tasmap.core.domain import (
    CoordinateInput,
    MapType,
    RenderedMap,
    map_file_name,
    normalize_coordinates,
)


class TestMapFileName:
    def test_lowercases_and_hyphenates_taxon(self):
        assert map_file_name("Eucalyptus gunnii", "plain") == "eucalyptus-gunnii.plain.svg"

    def test_rendered_map_derives_file_name(self):
        rendered = RenderedMap(taxon_name="Prasophyllum Apoxychilum", map_type="grid", svg_body="<svg/>")
        assert rendered.file_name == "prasophyllum-apoxychilum.grid.svg"

    def test_rendered_map_is_immutable(self):
        rendered = RenderedMap(taxon_name="A b", map_type="web", svg_body="<svg/>")
        with pytest.raises(dataclasses.FrozenInstanceError):
            rendered.svg_body = "<svg></svg>"  # type: ignore[misc]


class TestCoordinateInput:
    def test_from_form_strips_spaces_and_blank_lines(self):
        coordinate_input = CoordinateInput.from_form(
            " Eucalyptus gunnii ",
            "grid",
            "  -42.12344, 147.43321\r\n\r\n-41.34221 ,145.43442 \r\n",
        )

        assert coordinate_input.taxon == "Eucalyptus gunnii"
        assert coordinate_input.map_type is MapType.GRID
        assert coordinate_input.raw_coordinates == "-42.12344,147.43321\n-41.34221,145.43442"

    def test_unknown_map_type_is_kept_as_text(self):
        coordinate_input = CoordinateInput.from_form("A b", "contour", "-42.1,147.1")

        assert coordinate_input.map_type == "contour"
        assert coordinate_input.map_type_name == "contour"

    def test_map_type_name_for_known_type(self):
        coordinate_input = CoordinateInput.from_form("A b", "web", "-42.1,147.1")
        assert coordinate_input.map_type_name == "web"


def test_normalize_coordinates_handles_empty_text():
    assert normalize_coordinates("") == ""
    assert normalize_coordinates("   \n \n") == ""


def test_map_type_parse():
    assert MapType.parse("plain") is MapType.PLAIN
    assert MapType.parse("PLAIN") == "PLAIN"
