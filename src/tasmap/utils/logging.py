"""Structured logging setup with locality scrubbing.

Species occurrence coordinates can expose the whereabouts of threatened taxa,
so raw coordinate text never reaches the log stream.
"""

import logging.config
from typing import Any, Dict

import structlog

from .request_context import request_context

SCRUBBED_KEYS = {
    "coordinates",
    "raw_coordinates",
    "raw_coords",
    "svg_body",
}


def configure_logging(
    service_name: str = "tasmap", log_level: str = "INFO", log_format: str = "json"
) -> None:
    """Configure structured logging for the service."""

    renderer: Any
    if log_format == "console":
        renderer = structlog.dev.ConsoleRenderer(colors=False)
    else:
        renderer = structlog.processors.JSONRenderer()

    logging.config.dictConfig(
        {
            "version": 1,
            "disable_existing_loggers": False,
            "formatters": {
                "structured": {
                    "()": structlog.stdlib.ProcessorFormatter,
                    "processors": [
                        structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                        renderer,
                    ],
                    "foreign_pre_chain": [
                        structlog.stdlib.add_logger_name,
                        structlog.stdlib.add_log_level,
                        structlog.processors.TimeStamper(fmt="iso"),
                    ],
                },
            },
            "handlers": {
                "default": {
                    "level": log_level,
                    "class": "logging.StreamHandler",
                    "formatter": "structured",
                },
            },
            "loggers": {
                "": {
                    "handlers": ["default"],
                    "level": log_level,
                    "propagate": True,
                },
            },
        }
    )

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            _service_context(service_name),
            add_request_context,
            scrub_locality_data,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )


def _service_context(service_name: str):
    def add_service_context(logger, method_name, event_dict):
        event_dict["service"] = service_name
        return event_dict

    return add_service_context


def add_request_context(logger, method_name, event_dict):
    """Add the correlation id and bound map request, keeping explicit keys."""
    for key, value in request_context().items():
        event_dict.setdefault(key, value)
    return event_dict


def scrub_locality_data(logger, method_name, event_dict):
    """Replace raw coordinate payloads with a marker."""

    def scrub_dict(data: Dict[str, Any]) -> Dict[str, Any]:
        scrubbed = {}
        for key, value in data.items():
            if key.lower() in SCRUBBED_KEYS:
                scrubbed[key] = "[SCRUBBED]"
            elif isinstance(value, dict):
                scrubbed[key] = scrub_dict(value)
            else:
                scrubbed[key] = value
        return scrubbed

    return scrub_dict(event_dict)


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """Get a configured logger instance."""
    return structlog.get_logger(name)
