"""
Coordinate format classification.

The format of a whole coordinate list is decided from its first line only.
Two grammars are accepted, with latitude written as two integer digits and
longitude as three, each followed by up to ten decimal places. Digits are
ASCII only:

    voucher:     -42.12344,147.43321,1
    no voucher:  -42.12344,147.43321
"""

from __future__ import annotations

import re

from ..utils.logging import get_logger
from .domain import CoordinateFormat
from .ports import CoordinateClassifierPort

logger = get_logger(__name__)

# lat(decimal),long(decimal),voucherinfo(0 or 1)
VOUCHER_PATTERN = re.compile(r"^-?\d{2}(\.\d{0,10})?,\d{3}(\.\d{0,10})?,[01]$", re.ASCII)

# lat(decimal),long(decimal)
NO_VOUCHER_PATTERN = re.compile(r"^-?\d{2}(\.\d{0,10})?,\d{3}(\.\d{0,10})?$", re.ASCII)


def first_line(coordinates: str) -> str:
    """Return the first non-blank line, trimmed, or an empty string."""
    for line in coordinates.splitlines():
        line = line.strip()
        if line:
            return line
    return ""


def classify(line: str) -> CoordinateFormat:
    """Classify a single coordinate line."""
    line = line.strip()
    voucher_match = VOUCHER_PATTERN.match(line) is not None
    no_voucher_match = NO_VOUCHER_PATTERN.match(line) is not None

    if voucher_match:
        return CoordinateFormat.VOUCHER
    if no_voucher_match:
        return CoordinateFormat.NO_VOUCHER
    return CoordinateFormat.INVALID


class FirstLineClassifier(CoordinateClassifierPort):
    """Decide the format of the whole list from its first line."""

    def classify_text(self, coordinates: str) -> CoordinateFormat:
        return classify(first_line(coordinates))


class StrictClassifier(CoordinateClassifierPort):
    """Require every line to follow the grammar chosen by the first line."""

    def classify_text(self, coordinates: str) -> CoordinateFormat:
        expected = classify(first_line(coordinates))
        if expected is CoordinateFormat.INVALID:
            return expected

        for line_number, line in enumerate(coordinates.splitlines(), start=1):
            if not line.strip():
                continue
            if classify(line) is not expected:
                logger.info(
                    "Coordinate line departs from first-line format",
                    line_number=line_number,
                    expected=expected.value,
                )
                return CoordinateFormat.INVALID
        return expected


def build_classifier(name: str) -> CoordinateClassifierPort:
    """Return the classifier registered under ``name``."""
    if name == "strict":
        return StrictClassifier()
    return FirstLineClassifier()
