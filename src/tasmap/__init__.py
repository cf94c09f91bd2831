"""Public package interface for the tasmap web service."""

from importlib import import_module

__all__ = ["__version__", "create_app", "TasmapSettings"]
__version__ = "1.0.0"

from .config import TasmapSettings


def create_app(*args, **kwargs):
    """Lazy import wrapper to avoid package-level import cycles."""

    module = import_module(".api", __name__)
    return module.create_app(*args, **kwargs)
