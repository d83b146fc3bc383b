"""Relay error taxonomy.

Each error knows the HTTP status it maps to and the JSON envelope sent back
to the caller.
"""

from typing import Any, Optional


class RelayError(Exception):
    """Base class for failures surfaced by the chat relay."""

    status_code: int = 500

    def to_body(self) -> dict[str, Any]:
        return {"error": str(self)}


class InvalidRequest(RelayError):
    """Body has no usable ``messages`` list."""

    status_code = 400

    def __init__(self, received_body: Any):
        super().__init__("Bad Request: messages array is missing or empty")
        self.received_body = received_body

    def to_body(self) -> dict[str, Any]:
        return {"error": str(self), "receivedBody": self.received_body}


class ConfigurationError(RelayError):
    """No upstream credential configured."""

    def __init__(self, message: str = "Missing GROQ_API_KEY"):
        super().__init__(message)


class UpstreamError(RelayError):
    """Groq answered with a non-2xx status."""

    def __init__(self, status_code: int, details: Any):
        super().__init__("Groq API Error")
        self.status_code = status_code
        self.details = details

    def to_body(self) -> dict[str, Any]:
        return {"error": str(self), "details": self.details}


class TransportError(RelayError):
    """Network failure, undecodable upstream body, or any unexpected exception."""

    def __init__(self, message: str, fallback: Optional[str] = None):
        super().__init__(message)
        self.fallback = fallback

    def to_body(self) -> dict[str, Any]:
        body: dict[str, Any] = {"error": str(self)}
        if self.fallback:
            body["fallback"] = self.fallback
        return body
