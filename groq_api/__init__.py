"""Groq chat-completions API client."""

from .client import GroqClient

__all__ = ["GroqClient"]
