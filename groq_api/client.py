"""Groq API client for HTTP operations."""

from typing import Optional, Any
import httpx
import structlog

from config import Settings

logger = structlog.get_logger()


class GroqClient:
    """Async client for the Groq OpenAI-compatible chat-completions API."""

    def __init__(
        self,
        api_key: Optional[str],
        base_url: str = "https://api.groq.com/openai/v1",
        timeout: float = 30.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self._api_key = api_key
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self._transport = transport
        self._client: Optional[httpx.AsyncClient] = None

    @classmethod
    def from_settings(cls, settings: Settings) -> "GroqClient":
        api_key = settings.groq_api_key.get_secret_value() if settings.groq_api_key else None
        return cls(
            api_key=api_key,
            base_url=settings.groq_base_url,
            timeout=settings.upstream_timeout_seconds,
        )

    @property
    def is_configured(self) -> bool:
        """Whether a non-empty API key is held."""
        return bool(self._api_key)

    async def _get_client(self) -> httpx.AsyncClient:
        """Get or create async HTTP client with authentication."""
        if self._client is None or self._client.is_closed:
            self._client = httpx.AsyncClient(
                base_url=self.base_url,
                headers={
                    "Authorization": f"Bearer {self._api_key}",
                    "Content-Type": "application/json",
                    "Accept": "application/json"
                },
                timeout=self.timeout,
                transport=self._transport,
            )
        return self._client

    async def close(self):
        """Close the HTTP client."""
        if self._client and not self._client.is_closed:
            await self._client.aclose()

    async def create_chat_completion(self, payload: dict[str, Any]) -> httpx.Response:
        """POST a chat-completion request.

        The response is returned whatever its status; callers decide what a
        non-2xx answer means.
        """
        client = await self._get_client()
        response = await client.post("/chat/completions", json=payload)
        logger.debug("chat_completion_posted", status=response.status_code)
        return response
