"""Tests for SVG map drawing."""

import xml.etree.ElementTree as ET

import pytest

from tasmap.engine import (
    TASMANIA,
    Projection,
    RenderOptions,
    exact_map,
    grid_map,
    new_record_list,
    new_voucher_record_list,
    voucher_map,
    web_map,
)

from tests.fixtures.coordinates import FOUR_RECORDS, VOUCHER_COORDINATES

SVG = "{http://www.w3.org/2000/svg}"


def parse(svg: str) -> ET.Element:
    return ET.fromstring(svg)


def record_elements(root: ET.Element):
    group = root.find(f"{SVG}g")
    assert group is not None
    return list(group)


class TestProjection:
    def test_corners_map_to_frame(self):
        projection = Projection(RenderOptions(width=600))

        assert projection.point(TASMANIA.north, TASMANIA.west) == (0.0, 0.0)
        x, y = projection.point(TASMANIA.south, TASMANIA.east)
        assert x == pytest.approx(600.0)
        assert y == pytest.approx(projection.height)

    def test_height_follows_latitude_correction(self):
        projection = Projection(RenderOptions(width=600))
        # Tasmania is taller than it is wide once longitude is scaled by cos(latitude)
        assert projection.height > 600


class TestMaps:
    @pytest.mark.parametrize("draw", [grid_map, exact_map, web_map])
    def test_documents_are_well_formed(self, draw):
        root = parse(draw(new_record_list(FOUR_RECORDS, "Eucalyptus gunnii")))

        assert root.tag == f"{SVG}svg"
        assert "Eucalyptus gunnii" in "".join(root.itertext())

    def test_grid_map_merges_records_in_one_cell(self):
        records = new_record_list(FOUR_RECORDS, "A b")
        cells = record_elements(parse(grid_map(records)))

        # the last two records share a 0.1 degree cell
        assert len(cells) == 3
        assert all(cell.get("class") == "cell" for cell in cells)

    def test_grid_cell_size_is_configurable(self):
        records = new_record_list(FOUR_RECORDS, "A b")
        cells = record_elements(parse(grid_map(records, RenderOptions(cell_degrees=1.0))))
        assert len(cells) == 3

    def test_voucher_map_fills_vouchered_cells_only(self):
        records = new_voucher_record_list(VOUCHER_COORDINATES, "A b")
        markers = record_elements(parse(voucher_map(records)))

        by_class = {m.get("class"): m for m in markers}
        assert set(by_class) == {"vouchered", "anecdotal"}
        assert by_class["vouchered"].get("fill") != "none"
        assert by_class["anecdotal"].get("fill") == "none"

    def test_voucher_cell_with_any_vouchered_record_is_filled(self):
        records = new_voucher_record_list("-43.22134,146.35521,0\n-43.22133,146.35522,1", "A b")
        markers = record_elements(parse(voucher_map(records)))

        assert [m.get("class") for m in markers] == ["vouchered"]

    def test_exact_map_draws_every_record(self):
        records = new_record_list(FOUR_RECORDS, "A b")
        dots = record_elements(parse(exact_map(records)))
        assert len(dots) == 4

    def test_records_outside_extent_are_skipped(self):
        records = new_record_list("-42.1,147.1\n-33.86,151.21", "A b")
        dots = record_elements(parse(exact_map(records)))
        assert len(dots) == 1

    def test_web_map_is_responsive(self):
        root = parse(web_map(new_record_list(FOUR_RECORDS, "A b")))

        assert root.get("width") is None
        assert root.get("viewBox") is not None
        assert root.find(f"{SVG}title").text == "A b"

    def test_fixed_maps_have_pixel_size(self):
        root = parse(exact_map(new_record_list(FOUR_RECORDS, "A b"), RenderOptions(width=300)))
        assert root.get("width") == "300"

    def test_taxon_is_escaped(self):
        svg = exact_map(new_record_list(FOUR_RECORDS, "A <b> & c"))
        assert "A &lt;b&gt; &amp; c" in svg
        parse(svg)
