"""Chat relay: validate, forward to Groq, map the outcome."""

from dataclasses import dataclass
from typing import Any, Optional
from pydantic import ValidationError
import structlog

from config import Settings, DEFAULT_MODEL
from chat.errors import (
    RelayError, InvalidRequest, ConfigurationError, UpstreamError, TransportError
)
from chat.models import ChatRequest
from groq_api import GroqClient

logger = structlog.get_logger()


@dataclass(frozen=True)
class RelayOptions:
    """Fixed parameters added to every upstream request."""
    default_model: str = DEFAULT_MODEL
    max_tokens: Optional[int] = None
    temperature: Optional[float] = None
    fallback: Optional[str] = None

    @classmethod
    def from_settings(cls, settings: Settings) -> "RelayOptions":
        return cls(
            default_model=settings.default_model,
            max_tokens=settings.max_tokens,
            temperature=settings.temperature,
            fallback=settings.transport_fallback,
        )

    def build_payload(self, request: ChatRequest) -> dict[str, Any]:
        payload: dict[str, Any] = {
            "model": self.default_model if request.model is None else request.model,
            "messages": request.messages,
        }
        if self.max_tokens is not None:
            payload["max_tokens"] = self.max_tokens
        if self.temperature is not None:
            payload["temperature"] = self.temperature
        return payload


@dataclass
class RelayResult:
    """Status code and JSON body to send back to the caller."""
    status_code: int
    body: Any

    @classmethod
    def from_error(cls, error: RelayError) -> "RelayResult":
        return cls(status_code=error.status_code, body=error.to_body())


class ChatRelay:
    """Stateless forwarder of chat-completion requests to Groq."""

    def __init__(self, client: GroqClient, options: RelayOptions):
        self.client = client
        self.options = options

    def parse_request(self, body: Any) -> ChatRequest:
        """Validate a decoded request body or raise InvalidRequest."""
        if not isinstance(body, dict):
            logger.warning("chat_request_rejected", body_type=type(body).__name__)
            raise InvalidRequest(body)
        try:
            return ChatRequest.model_validate(body)
        except ValidationError as e:
            logger.warning("chat_request_rejected", errors=e.error_count())
            raise InvalidRequest(body) from e

    async def forward(self, request: ChatRequest) -> RelayResult:
        """Send one upstream request and map its answer."""
        if not self.client.is_configured:
            logger.error("groq_api_key_missing")
            raise ConfigurationError()

        payload = self.options.build_payload(request)
        logger.info(
            "calling_groq_api",
            model=payload["model"],
            message_count=len(request.messages),
        )

        response = await self.client.create_chat_completion(payload)
        data = response.json()
        logger.info("groq_response_received", status=response.status_code)

        if not response.is_success:
            logger.error("groq_api_error", status=response.status_code, details=data)
            raise UpstreamError(response.status_code, data)

        return RelayResult(status_code=response.status_code, body=data)

    async def relay_chat(self, body: Any) -> RelayResult:
        """Relay a chat request body and always return a response to send.

        Every failure, expected or not, is converted into its JSON envelope
        here.
        """
        try:
            request = self.parse_request(body)
            return await self.forward(request)
        except RelayError as e:
            return RelayResult.from_error(e)
        except Exception as e:
            logger.error("chat_relay_failed", error=str(e), error_type=type(e).__name__)
            message = str(e) or type(e).__name__
            return RelayResult.from_error(TransportError(message, fallback=self.options.fallback))
