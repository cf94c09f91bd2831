"""Core ports (interfaces) for tasmap domain dependencies.

The map generator depends on these abstractions so the single-line
classification heuristic can be replaced without touching the dispatcher.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from .domain import CoordinateFormat


class CoordinateClassifierPort(ABC):
    """Port for deciding which record grammar a coordinate list follows."""

    @abstractmethod
    def classify_text(self, coordinates: str) -> CoordinateFormat:
        """Return the format of the normalised coordinate text."""
        raise NotImplementedError
