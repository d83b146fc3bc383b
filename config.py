"""Application configuration."""

from functools import lru_cache
from typing import Literal, Optional
from pydantic import SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict

Variant = Literal["serverless", "standalone"]

DEFAULT_MODEL = "llama-3.1-8b-instant"
FALLBACK_MESSAGE = "The AI service is experiencing high demand. Please try again in a moment."


class Settings(BaseSettings):
    """Relay settings loaded from environment."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore"
    )

    # Server
    environment: str = "development"
    host: str = "0.0.0.0"
    port: int = 3001

    # Groq
    groq_api_key: Optional[SecretStr] = None
    groq_base_url: str = "https://api.groq.com/openai/v1"
    default_model: str = DEFAULT_MODEL
    upstream_timeout_seconds: float = 30.0

    # Generation parameters sent upstream (None = omitted)
    max_tokens: Optional[int] = None
    temperature: Optional[float] = None

    # Error envelope
    transport_fallback: Optional[str] = None

    # HTTP surface
    cors_origins: list[str] = ["http://127.0.0.1:5500", "http://localhost:5500"]
    reject_other_methods: bool = False
    serve_banner: bool = False

    @property
    def cors_allow_all(self) -> bool:
        return "*" in self.cors_origins


class ServerlessSettings(Settings):
    """Function-host variant: permissive CORS, fixed sampling parameters."""

    max_tokens: Optional[int] = 1024
    temperature: Optional[float] = 0.7
    transport_fallback: Optional[str] = FALLBACK_MESSAGE
    cors_origins: list[str] = ["*"]
    reject_other_methods: bool = True


class StandaloneSettings(Settings):
    """Long-running server variant: local dev origins, banner on /."""

    serve_banner: bool = True


_SETTINGS_CLASSES: dict[str, type[Settings]] = {
    "serverless": ServerlessSettings,
    "standalone": StandaloneSettings,
}


@lru_cache
def get_settings(variant: Variant = "standalone") -> Settings:
    """Get cached settings instance for a deployment variant."""
    return _SETTINGS_CLASSES[variant]()
