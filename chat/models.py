"""Chat relay data models."""

from typing import Any, Optional
from pydantic import BaseModel, Field


class ChatRequest(BaseModel):
    """Chat request from the browser client.

    Message items and ``model`` are forwarded upstream untouched; only the
    messages list itself is checked. A missing or null model means the
    default one.
    """
    messages: list[Any] = Field(..., min_length=1)
    model: Any = None


class UpstreamErrorResponse(BaseModel):
    """Envelope for a non-2xx answer from Groq."""
    error: str = "Groq API Error"
    details: Any = None


class InvalidRequestResponse(BaseModel):
    """Envelope for a rejected request body."""
    error: str
    receivedBody: Any = None


class ErrorResponse(BaseModel):
    """Envelope for configuration and transport failures."""
    error: str
    fallback: Optional[str] = None
