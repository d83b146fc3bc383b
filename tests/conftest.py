"""Pytest configuration and fixtures."""

from typing import Any, Optional
import httpx
import pytest
from httpx import AsyncClient, ASGITransport

from app import create_app
from config import ServerlessSettings, StandaloneSettings
from chat import ChatRelay, RelayOptions
from groq_api import GroqClient

TEST_API_KEY = "gsk_test_key"


class FakeGroq:
    """Stand-in for the Groq API that records every request it receives."""

    def __init__(self):
        self.requests: list[httpx.Request] = []
        self.status_code = 200
        self.body: Any = {"choices": [{"message": {"content": "hello"}}]}
        self.text: Optional[str] = None
        self.exc: Optional[Exception] = None

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.exc is not None:
            raise self.exc
        if self.text is not None:
            return httpx.Response(self.status_code, text=self.text)
        return httpx.Response(self.status_code, json=self.body)

    def client(self, api_key: Optional[str] = TEST_API_KEY) -> GroqClient:
        return GroqClient(api_key=api_key, transport=httpx.MockTransport(self.handler))


@pytest.fixture
def fake_groq():
    """Fake upstream answering 200 with a canned completion."""
    return FakeGroq()


@pytest.fixture
def relay(fake_groq):
    """ChatRelay with serverless-style options and a configured key."""
    options = RelayOptions(max_tokens=1024, temperature=0.7, fallback="Try again later.")
    return ChatRelay(fake_groq.client(), options)


def _settings(settings_cls, api_key):
    return settings_cls(_env_file=None, groq_api_key=api_key)


def _client_for(app):
    transport = ASGITransport(app=app)
    return AsyncClient(transport=transport, base_url="http://test")


@pytest.fixture
async def serverless_client(fake_groq):
    """HTTP client for the serverless variant with a configured key."""
    app = create_app(_settings(ServerlessSettings, TEST_API_KEY), fake_groq.client())
    async with _client_for(app) as client:
        yield client


@pytest.fixture
async def serverless_client_no_key(fake_groq):
    """HTTP client for the serverless variant without a Groq key."""
    app = create_app(_settings(ServerlessSettings, None), fake_groq.client(api_key=None))
    async with _client_for(app) as client:
        yield client


@pytest.fixture
async def standalone_client(fake_groq):
    """HTTP client for the standalone variant with a configured key."""
    app = create_app(_settings(StandaloneSettings, TEST_API_KEY), fake_groq.client())
    async with _client_for(app) as client:
        yield client
