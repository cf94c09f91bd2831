"""
SVG map drawing.

Four entry points share one projection and document frame:

- ``grid_map``: shaded grid cells wherever at least one record falls
- ``voucher_map``: one circle per occupied cell, solid when any record in the
  cell is vouchered and hollow when all records are anecdotal
- ``exact_map``: a dot at every exact coordinate
- ``web_map``: the exact map scaled to its container, for embedding in pages
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Optional, Tuple
from xml.sax.saxutils import escape

from ..utils.logging import get_logger
from .records import Record, RecordList

logger = get_logger(__name__)

SVG_NS = "http://www.w3.org/2000/svg"
BACKGROUND = "#ffffff"
FRAME_STROKE = "#333333"
GRATICULE_STROKE = "#cccccc"
CELL_FILL = "#1f4e79"
MARKER_STROKE = "#000000"


@dataclass(frozen=True)
class MapExtent:
    """Geographic bounds of a map in decimal degrees."""

    north: float
    south: float
    west: float
    east: float

    def contains(self, latitude: float, longitude: float) -> bool:
        return self.south <= latitude <= self.north and self.west <= longitude <= self.east


TASMANIA = MapExtent(north=-39.5, south=-43.7, west=143.5, east=148.5)


@dataclass(frozen=True)
class RenderOptions:
    width: int = 600
    cell_degrees: float = 0.1
    extent: MapExtent = field(default=TASMANIA)


class Projection:
    """Equirectangular projection corrected for the latitude of the map centre."""

    def __init__(self, options: RenderOptions):
        extent = options.extent
        self.extent = extent
        mid_latitude = math.radians((extent.north + extent.south) / 2)
        self._cos_mid = math.cos(mid_latitude)
        self.pixels_per_degree = options.width / ((extent.east - extent.west) * self._cos_mid)
        self.width = float(options.width)
        self.height = (extent.north - extent.south) * self.pixels_per_degree

    def x(self, longitude: float) -> float:
        return (longitude - self.extent.west) * self._cos_mid * self.pixels_per_degree

    def y(self, latitude: float) -> float:
        return (self.extent.north - latitude) * self.pixels_per_degree

    def point(self, latitude: float, longitude: float) -> Tuple[float, float]:
        return self.x(longitude), self.y(latitude)


def _in_extent(records: Iterable[Record], extent: MapExtent) -> List[Record]:
    return [r for r in records if extent.contains(r.latitude, r.longitude)]


def _cells(
    records: Iterable[Record], options: RenderOptions
) -> Dict[Tuple[int, int], List[Record]]:
    extent = options.extent
    cells: Dict[Tuple[int, int], List[Record]] = {}
    for record in records:
        column = int((record.longitude - extent.west) // options.cell_degrees)
        row = int((extent.north - record.latitude) // options.cell_degrees)
        cells.setdefault((column, row), []).append(record)
    return cells


def _graticule(projection: Projection) -> List[str]:
    extent = projection.extent
    parts = []
    for latitude in range(math.ceil(extent.south), math.floor(extent.north) + 1):
        y = projection.y(latitude)
        parts.append(
            f'<line x1="0" y1="{y:.2f}" x2="{projection.width:.2f}" y2="{y:.2f}" '
            f'stroke="{GRATICULE_STROKE}" stroke-width="0.5"/>'
        )
    for longitude in range(math.ceil(extent.west), math.floor(extent.east) + 1):
        x = projection.x(longitude)
        parts.append(
            f'<line x1="{x:.2f}" y1="0" x2="{x:.2f}" y2="{projection.height:.2f}" '
            f'stroke="{GRATICULE_STROKE}" stroke-width="0.5"/>'
        )
    return parts


def _document(
    record_list: RecordList,
    projection: Projection,
    body: List[str],
    responsive: bool = False,
) -> str:
    title = escape(record_list.taxon)
    width = projection.width
    height = projection.height
    if responsive:
        size = f'viewBox="0 0 {width:.2f} {height:.2f}" preserveAspectRatio="xMidYMid meet"'
    else:
        size = (
            f'width="{width:.0f}" height="{height:.0f}" '
            f'viewBox="0 0 {width:.2f} {height:.2f}"'
        )

    parts = [f'<svg xmlns="{SVG_NS}" version="1.1" {size}>']
    if responsive:
        parts.append(f"<title>{title}</title>")
    parts.append(f'<rect x="0" y="0" width="{width:.2f}" height="{height:.2f}" fill="{BACKGROUND}"/>')
    parts.extend(_graticule(projection))
    parts.append('<g class="records">')
    parts.extend(body)
    parts.append("</g>")
    parts.append(
        f'<rect x="0" y="0" width="{width:.2f}" height="{height:.2f}" '
        f'fill="none" stroke="{FRAME_STROKE}" stroke-width="1"/>'
    )
    parts.append(
        f'<text x="10" y="20" font-family="sans-serif" font-size="14" '
        f'font-style="italic">{title}</text>'
    )
    parts.append("</svg>")
    return "\n".join(parts) + "\n"


def _cell_geometry(
    column: int, row: int, projection: Projection, options: RenderOptions
) -> Tuple[float, float, float, float]:
    west = options.extent.west + column * options.cell_degrees
    north = options.extent.north - row * options.cell_degrees
    x, y = projection.point(north, west)
    x2, y2 = projection.point(north - options.cell_degrees, west + options.cell_degrees)
    return x, y, x2 - x, y2 - y


def grid_map(record_list: RecordList, options: Optional[RenderOptions] = None) -> str:
    """Shade every grid cell holding at least one record."""
    options = options or RenderOptions()
    projection = Projection(options)
    records = _in_extent(record_list, options.extent)

    body = []
    for column, row in sorted(_cells(records, options)):
        x, y, w, h = _cell_geometry(column, row, projection, options)
        body.append(
            f'<rect class="cell" x="{x:.2f}" y="{y:.2f}" width="{w:.2f}" height="{h:.2f}" '
            f'fill="{CELL_FILL}"/>'
        )
    return _document(record_list, projection, body)


def voucher_map(record_list: RecordList, options: Optional[RenderOptions] = None) -> str:
    """Circle every occupied grid cell, solid for vouchered and hollow for anecdotal."""
    options = options or RenderOptions()
    projection = Projection(options)
    records = _in_extent(record_list, options.extent)

    body = []
    for (column, row), cell_records in sorted(_cells(records, options).items()):
        x, y, w, h = _cell_geometry(column, row, projection, options)
        radius = min(w, h) * 0.4
        vouchered = any(r.vouchered for r in cell_records)
        fill = MARKER_STROKE if vouchered else "none"
        marker_class = "vouchered" if vouchered else "anecdotal"
        body.append(
            f'<circle class="{marker_class}" cx="{x + w / 2:.2f}" cy="{y + h / 2:.2f}" '
            f'r="{radius:.2f}" fill="{fill}" stroke="{MARKER_STROKE}" stroke-width="1"/>'
        )
    return _document(record_list, projection, body)


def _dots(records: Iterable[Record], projection: Projection, radius: float) -> List[str]:
    body = []
    for record in records:
        cx, cy = projection.point(record.latitude, record.longitude)
        body.append(
            f'<circle class="record" cx="{cx:.2f}" cy="{cy:.2f}" r="{radius:.2f}" '
            f'fill="{CELL_FILL}"/>'
        )
    return body


def exact_map(record_list: RecordList, options: Optional[RenderOptions] = None) -> str:
    """Dot every record at its exact coordinate."""
    options = options or RenderOptions()
    projection = Projection(options)
    records = _in_extent(record_list, options.extent)
    skipped = len(record_list) - len(records)
    if skipped:
        logger.debug("Records outside map extent skipped", skipped=skipped)
    return _document(record_list, projection, _dots(records, projection, 3.0))


def web_map(record_list: RecordList, options: Optional[RenderOptions] = None) -> str:
    """Exact-coordinate map that scales to its container."""
    options = options or RenderOptions()
    projection = Projection(options)
    records = _in_extent(record_list, options.extent)
    return _document(record_list, projection, _dots(records, projection, 4.0), responsive=True)
