"""Domain types for the tasmap core.

Single responsibility: value objects shared by the classifier, the dispatcher
and the render cache.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import List, Union


class CoordinateFormat(str, Enum):
    """Record grammar detected from the first coordinate line."""

    NO_VOUCHER = "no_voucher"
    VOUCHER = "voucher"
    INVALID = "invalid"


class MapType(str, Enum):
    """Map styles offered on the data-entry form."""

    GRID = "grid"
    PLAIN = "plain"
    WEB = "web"

    @classmethod
    def parse(cls, value: str) -> Union["MapType", str]:
        """Return the matching member, or the raw string when unrecognised."""
        try:
            return cls(value)
        except ValueError:
            return value


def normalize_coordinates(raw_text: str) -> str:
    """Strip spaces inside lines and drop blank lines."""
    lines: List[str] = []
    for line in raw_text.replace(" ", "").splitlines():
        line = line.strip()
        if line:
            lines.append(line)
    return "\n".join(lines)


@dataclass(frozen=True)
class CoordinateInput:
    """A single map request as submitted on the data-entry form."""

    taxon: str
    map_type: Union[MapType, str]
    raw_coordinates: str

    @classmethod
    def from_form(cls, taxon: str, map_type: str, coordinates: str) -> "CoordinateInput":
        """Create an input from raw form values, cleaning up the coordinate text."""

        return cls(
            taxon=taxon.strip(),
            map_type=MapType.parse(map_type.strip()),
            raw_coordinates=normalize_coordinates(coordinates),
        )

    @property
    def map_type_name(self) -> str:
        if isinstance(self.map_type, MapType):
            return self.map_type.value
        return self.map_type


def map_file_name(taxon_name: str, map_type: str) -> str:
    """Suggested download name: lower-cased taxon, spaces to hyphens, style suffix."""
    return taxon_name.lower().replace(" ", "-") + "." + map_type + ".svg"


@dataclass(frozen=True)
class RenderedMap:
    """The most recently generated map, as held in the render cache."""

    taxon_name: str
    map_type: str
    svg_body: str

    @property
    def file_name(self) -> str:
        return map_file_name(self.taxon_name, self.map_type)
