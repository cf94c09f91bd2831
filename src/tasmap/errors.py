"""Exception taxonomy for the tasmap service.

Every failure in this package degrades to a user-visible message for the one
request that caused it; nothing here is fatal to the process.
"""

from __future__ import annotations

from typing import Any, Dict, Optional

# Canonical mapping from error code to HTTP status
ERROR_HTTP_MAP = {
    "INVALID_COORDINATES": 422,
    "RECORD_PARSE_ERROR": 422,
    "UNSUPPORTED_MAP_TYPE": 422,
    "MAP_NOT_AVAILABLE": 404,
    "CONFIGURATION_ERROR": 500,
    "INTERNAL_ERROR": 500,
}


def http_status_for(code: str) -> int:
    return int(ERROR_HTTP_MAP.get(code, 500))


class TasmapError(Exception):
    """Base exception for all tasmap errors."""

    default_code = "INTERNAL_ERROR"

    def __init__(
        self,
        message: str,
        error_code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message)
        self.message = message
        self.error_code = error_code or self.default_code
        self.details = details or {}

    @property
    def http_status(self) -> int:
        return http_status_for(self.error_code)

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dictionary format."""
        return {
            "error_code": self.error_code,
            "message": self.message,
            "details": self.details,
        }

    def __str__(self) -> str:
        return f"{self.error_code}: {self.message}"

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}("
            f"message='{self.message}', "
            f"error_code='{self.error_code}'"
            f")"
        )


class InvalidCoordinateFormatError(TasmapError):
    """Raised when the first coordinate line matches neither accepted grammar."""

    default_code = "INVALID_COORDINATES"
    user_message = "I can't interpret these coordinates"

    def __init__(self, first_line: str, message: Optional[str] = None):
        super().__init__(
            message or self.user_message,
            details={"first_line": first_line},
        )
        self.first_line = first_line


class RecordParseError(TasmapError, ValueError):
    """Raised by the rendering engine when an individual record cannot be parsed."""

    default_code = "RECORD_PARSE_ERROR"

    def __init__(self, line_number: int, line: str, reason: str):
        super().__init__(
            f"Line {line_number} cannot be read as a coordinate record: {reason}",
            details={"line_number": line_number, "line": line},
        )
        self.line_number = line_number
        self.line = line


class UnsupportedMapTypeError(TasmapError):
    """Raised when no rendering strategy exists for the requested map type."""

    default_code = "UNSUPPORTED_MAP_TYPE"

    def __init__(self, map_type: str):
        super().__init__(
            f"No map can be drawn for map type '{map_type}'",
            details={"map_type": map_type},
        )
        self.map_type = map_type


class MapNotAvailableError(TasmapError):
    """The absence of a generated map.

    The download route answers with its message and status as plain text
    rather than raising it.
    """

    default_code = "MAP_NOT_AVAILABLE"
    user_message = "There is no map in memory"

    def __init__(self, message: Optional[str] = None):
        super().__init__(message or self.user_message)


class ConfigurationError(TasmapError):
    """Raised for unusable configuration."""

    default_code = "CONFIGURATION_ERROR"
