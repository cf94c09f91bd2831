"""Coordinate record parsing for the rendering engine."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Iterator, List, Optional, TextIO, Union

from ..errors import RecordParseError

CoordinateSource = Union[str, TextIO, Iterable[str]]


@dataclass(frozen=True)
class Record:
    """A single occurrence record in decimal degrees."""

    latitude: float
    longitude: float
    vouchered: Optional[bool] = None


@dataclass
class RecordList:
    """Ordered occurrence records for one taxon."""

    taxon: str
    records: List[Record] = field(default_factory=list)
    has_vouchers: bool = False

    def __iter__(self) -> Iterator[Record]:
        return iter(self.records)

    def __len__(self) -> int:
        return len(self.records)


def _lines(source: CoordinateSource) -> Iterable[str]:
    if isinstance(source, str):
        return source.splitlines()
    return source


def _parse_degrees(value: str, limit: float, name: str, line_number: int, line: str) -> float:
    try:
        if not value.isascii():
            raise ValueError(value)
        degrees = float(value)
    except ValueError:
        raise RecordParseError(line_number, line, f"{name} '{value}' is not a number") from None
    if not -limit <= degrees <= limit:
        raise RecordParseError(line_number, line, f"{name} {degrees} is out of range")
    return degrees


def _parse_lines(source: CoordinateSource, *, vouchers: bool) -> List[Record]:
    expected_fields = 3 if vouchers else 2
    records: List[Record] = []
    for line_number, raw_line in enumerate(_lines(source), start=1):
        line = raw_line.replace(" ", "").strip()
        if not line:
            continue
        fields = line.split(",")
        if len(fields) != expected_fields:
            raise RecordParseError(
                line_number,
                line,
                f"expected {expected_fields} comma-separated fields, found {len(fields)}",
            )
        latitude = _parse_degrees(fields[0], 90.0, "latitude", line_number, line)
        longitude = _parse_degrees(fields[1], 180.0, "longitude", line_number, line)

        vouchered: Optional[bool] = None
        if vouchers:
            if fields[2] not in ("0", "1"):
                raise RecordParseError(
                    line_number, line, f"voucher flag '{fields[2]}' must be 0 or 1"
                )
            vouchered = fields[2] == "1"
        records.append(Record(latitude, longitude, vouchered))
    return records


def new_record_list(source: CoordinateSource, taxon: str) -> RecordList:
    """Parse ``lat,long`` lines into a record list."""
    return RecordList(taxon=taxon, records=_parse_lines(source, vouchers=False))


def new_voucher_record_list(source: CoordinateSource, taxon: str) -> RecordList:
    """Parse ``lat,long,flag`` lines; flag 1 marks a vouchered specimen."""
    return RecordList(
        taxon=taxon,
        records=_parse_lines(source, vouchers=True),
        has_vouchers=True,
    )
