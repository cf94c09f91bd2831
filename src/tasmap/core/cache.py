"""Single-slot cache for the most recently rendered map.

Display requests store into the slot and download requests read from it, each
on its own worker thread. The slot holds a reference to an immutable
``RenderedMap`` and every access goes through one lock, so a reader sees either
no map or one complete map, never fields from two different stores.
"""

from __future__ import annotations

import threading
from typing import Optional

from .domain import RenderedMap


class RenderCache:
    """Holds at most one ``RenderedMap``; replaced on store, never cleared."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._current: Optional[RenderedMap] = None

    def store(self, rendered_map: RenderedMap) -> None:
        """Overwrite the slot unconditionally."""
        with self._lock:
            self._current = rendered_map

    def load(self) -> Optional[RenderedMap]:
        """Return the current map, or None if nothing has been stored yet."""
        with self._lock:
            return self._current

    @property
    def is_present(self) -> bool:
        return self.load() is not None
