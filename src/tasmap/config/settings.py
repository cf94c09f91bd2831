"""
Configuration settings for the tasmap service.

Single responsibility: Configuration management and validation.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, Optional

import yaml
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from ..errors import ConfigurationError


class TasmapSettings(BaseSettings):
    """
    Configuration settings for the tasmap service.

    Values come from ``TASMAP_``-prefixed environment variables, optionally
    overlaid on a YAML file passed through :func:`load_settings`.
    """

    model_config = SettingsConfigDict(env_prefix="TASMAP_", case_sensitive=False)

    environment: str = Field(default="dev", description="Deployment environment")

    # Service configuration
    host: str = Field(default="0.0.0.0", description="Service host")
    port: int = Field(default=9090, ge=1, le=65535, description="Service port")

    # Logging configuration
    log_level: str = Field(default="INFO", description="Logging level")
    log_format: str = Field(default="json", description="Log renderer: json or console")

    # Classification configuration
    classifier: str = Field(
        default="first_line",
        description="Coordinate classifier: first_line (heuristic) or strict (every line)",
    )

    # Rendering configuration
    map_width: int = Field(
        default=600, ge=200, le=4000, description="Width of generated maps in pixels"
    )
    grid_cell_degrees: float = Field(
        default=0.1, gt=0.0, le=1.0, description="Grid cell size in decimal degrees"
    )

    # Templating configuration
    templates_dir: Optional[str] = Field(
        default=None, description="Override directory for page templates"
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate logging level selection."""
        valid_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        if v.upper() not in valid_levels:
            raise ValueError(f"Log level must be one of: {valid_levels}")
        return v.upper()

    @field_validator("log_format")
    @classmethod
    def validate_log_format(cls, v: str) -> str:
        """Validate log renderer selection."""
        valid_formats = ["json", "console"]
        if v.lower() not in valid_formats:
            raise ValueError(f"Log format must be one of: {valid_formats}")
        return v.lower()

    @field_validator("classifier")
    @classmethod
    def validate_classifier(cls, v: str) -> str:
        """Validate classifier selection."""
        valid_classifiers = ["first_line", "strict"]
        if v.lower() not in valid_classifiers:
            raise ValueError(f"Classifier must be one of: {valid_classifiers}")
        return v.lower()

    def resolve_templates_dir(self) -> Path:
        """Return the template directory, defaulting to the packaged templates."""
        if self.templates_dir:
            return Path(self.templates_dir)
        return Path(__file__).resolve().parent.parent / "templates"


def load_settings(config_file: Optional[str] = None, **overrides: Any) -> TasmapSettings:
    """Build settings from an optional YAML file, with explicit overrides on top."""

    file_values: Dict[str, Any] = {}
    if config_file:
        cfg_path = Path(config_file)
        if not cfg_path.exists():
            raise ConfigurationError(
                f"Configuration file not found: {config_file}",
                details={"config_file": config_file},
            )
        loaded = yaml.safe_load(cfg_path.read_text(encoding="utf-8")) or {}
        if not isinstance(loaded, dict):
            raise ConfigurationError(
                "Configuration file must contain a mapping",
                details={"config_file": config_file},
            )
        file_values = loaded
    merged = {**file_values, **overrides}
    return TasmapSettings(**merged)
