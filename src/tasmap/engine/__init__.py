"""Rendering engine: record parsing and SVG map drawing."""

from .records import Record, RecordList, new_record_list, new_voucher_record_list
from .svg import (
    TASMANIA,
    MapExtent,
    Projection,
    RenderOptions,
    exact_map,
    grid_map,
    voucher_map,
    web_map,
)

__all__ = [
    "MapExtent",
    "Projection",
    "Record",
    "RecordList",
    "RenderOptions",
    "TASMANIA",
    "exact_map",
    "grid_map",
    "new_record_list",
    "new_voucher_record_list",
    "voucher_map",
    "web_map",
]
