"""Application factory shared by both deployment variants."""

from contextlib import asynccontextmanager
from typing import Optional
from fastapi import FastAPI, Request, Response
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import PlainTextResponse
from starlette.datastructures import Headers
import structlog

from config import Settings
from chat import ChatRelay, RelayOptions, create_router, method_not_allowed
from groq_api import GroqClient

logger = structlog.get_logger()

BANNER = "Backend is running. Use POST /api/chat"

PERMISSIVE_CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Methods": "POST, OPTIONS, GET",
    "Access-Control-Allow-Headers": "Content-Type, Authorization",
}


class AllowListCORSMiddleware(CORSMiddleware):
    """CORS middleware whose preflights never fail.

    Every preflight gets an empty 200. Origins outside the allow-list simply
    receive no ``Access-Control-Allow-Origin`` header.
    """

    def preflight_response(self, request_headers: Headers) -> Response:
        origin = request_headers["origin"]
        if not self.is_allowed_origin(origin=origin):
            return Response(status_code=200, headers={"Vary": "Origin"})

        headers = dict(self.preflight_headers)
        headers["Access-Control-Allow-Origin"] = origin
        requested_headers = request_headers.get("access-control-request-headers")
        if self.allow_all_headers and requested_headers is not None:
            headers["Access-Control-Allow-Headers"] = requested_headers
        return Response(status_code=200, headers=headers)


def create_app(settings: Settings, groq_client: Optional[GroqClient] = None) -> FastAPI:
    """Build the relay application for the given settings.

    ``groq_client`` replaces the client built from settings, which is how
    tests point the relay at a fake upstream.
    """
    client = groq_client or GroqClient.from_settings(settings)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Lifespan context manager for startup and shutdown events."""
        logger.info(
            "relay_started",
            environment=settings.environment,
            port=settings.port,
            groq_api_key_loaded=client.is_configured,
        )
        yield
        await client.close()
        logger.info("relay_shutting_down")

    app = FastAPI(
        title="NeuralSync Chat Relay",
        version="1.0.0",
        description="Forwards chat-completion requests to Groq",
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.relay = ChatRelay(client, RelayOptions.from_settings(settings))

    if settings.cors_allow_all:
        @app.middleware("http")
        async def permissive_cors(request: Request, call_next):
            response = await call_next(request)
            response.headers.update(PERMISSIVE_CORS_HEADERS)
            return response
    else:
        app.add_middleware(
            AllowListCORSMiddleware,
            allow_origins=settings.cors_origins,
            allow_methods=["*"],
            allow_headers=["*"],
        )

    if settings.reject_other_methods:
        app.add_exception_handler(405, method_not_allowed)

    app.include_router(create_router(), prefix="/api/chat", tags=["Chat"])

    if settings.serve_banner:
        @app.get("/", response_class=PlainTextResponse)
        async def root():
            """Plain-text banner."""
            return BANNER

        @app.get("/health")
        async def health():
            """Health check endpoint."""
            return {"status": "healthy", "service": "neuralsync-chat-relay"}

    return app
