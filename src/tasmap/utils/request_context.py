"""Per-request context carried into every log entry.

Each HTTP request gets a correlation id, taken from the ``X-Correlation-ID``
header or freshly minted. Once the map form has been read, the taxon and map
type are bound as well, so every log line of that request names the map it
belongs to. Outside a request, as in the CLI, the context is empty.
"""

import uuid
from contextvars import ContextVar
from typing import Dict, Optional

_correlation_id: ContextVar[Optional[str]] = ContextVar("tasmap_correlation_id", default=None)
_map_request: ContextVar[Optional[Dict[str, str]]] = ContextVar(
    "tasmap_map_request", default=None
)


def start_request(correlation_id: Optional[str] = None) -> str:
    """Reset the context for a new request and return its correlation id."""
    correlation_id = correlation_id or uuid.uuid4().hex
    _correlation_id.set(correlation_id)
    _map_request.set(None)
    return correlation_id


def current_correlation_id() -> Optional[str]:
    return _correlation_id.get()


def bind_map_request(taxon: str, map_type: str) -> None:
    """Attach the submitted taxon and map type to the current request."""
    _map_request.set({"taxon": taxon, "map_type": map_type})


def request_context() -> Dict[str, str]:
    context: Dict[str, str] = {}
    correlation_id = _correlation_id.get()
    if correlation_id is not None:
        context["correlation_id"] = correlation_id
    context.update(_map_request.get() or {})
    return context
