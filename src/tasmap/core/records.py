"""Record list construction for a classified coordinate list."""

from __future__ import annotations

from ..engine import RecordList, new_record_list, new_voucher_record_list
from ..errors import InvalidCoordinateFormatError
from .classifier import first_line
from .domain import CoordinateFormat


def build_record_list(
    coordinate_format: CoordinateFormat, raw_text: str, taxon_name: str
) -> RecordList:
    """Parse ``raw_text`` with the engine constructor matching its format.

    Invalid input never reaches the engine: the classifier's rejection is final.
    """
    if coordinate_format is CoordinateFormat.VOUCHER:
        return new_voucher_record_list(raw_text, taxon_name)
    if coordinate_format is CoordinateFormat.NO_VOUCHER:
        return new_record_list(raw_text, taxon_name)
    raise InvalidCoordinateFormatError(first_line(raw_text))
