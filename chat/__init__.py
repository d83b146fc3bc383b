"""Chat relay feature."""

from .models import ChatRequest
from .errors import RelayError, InvalidRequest, ConfigurationError, UpstreamError, TransportError
from .relay import ChatRelay, RelayOptions, RelayResult
from .routes import create_router, method_not_allowed

__all__ = [
    "ChatRequest", "RelayError", "InvalidRequest", "ConfigurationError",
    "UpstreamError", "TransportError", "ChatRelay", "RelayOptions",
    "RelayResult", "create_router", "method_not_allowed"
]
