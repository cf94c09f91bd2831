"""
Configuration management for the tasmap service.

Single responsibility: Configuration loading and validation.
"""

from .settings import TasmapSettings, load_settings

__all__ = [
    "TasmapSettings",
    "load_settings",
]
