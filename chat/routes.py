"""Chat API routes."""

from fastapi import APIRouter, Depends, Request, Response
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
import structlog

from chat.models import ErrorResponse, InvalidRequestResponse, UpstreamErrorResponse
from chat.relay import ChatRelay

logger = structlog.get_logger()


def get_chat_relay(request: Request) -> ChatRelay:
    """Relay instance built by the application factory."""
    return request.app.state.relay


async def chat_preflight():
    """CORS preflight; answered with an empty 200 whatever the configuration."""
    return Response(status_code=200)


async def chat(
    request: Request,
    relay: ChatRelay = Depends(get_chat_relay)
):
    """Forward a chat-completion request to Groq and relay its answer.

    The upstream JSON body is returned unchanged on success. Failures come
    back as ``{"error": ...}`` envelopes.
    """
    try:
        body = await request.json()
    except Exception as e:
        # Undecodable bodies fall through to the relay as a missing body.
        logger.warning("chat_body_not_json", error=str(e) or type(e).__name__)
        body = None

    result = await relay.relay_chat(body)
    return JSONResponse(status_code=result.status_code, content=result.body)


async def method_not_allowed(request: Request, exc: StarletteHTTPException):
    """Answer any method other than POST and OPTIONS with a JSON 405."""
    logger.info("chat_method_not_allowed", method=request.method)
    return JSONResponse(
        status_code=405,
        content={"error": "Method not allowed"},
        headers=exc.headers,
    )


def create_router() -> APIRouter:
    """Build the ``/api/chat`` router."""
    router = APIRouter()
    router.add_api_route("", chat_preflight, methods=["OPTIONS"], include_in_schema=False)
    router.add_api_route(
        "",
        chat,
        methods=["POST"],
        responses={
            400: {"model": InvalidRequestResponse},
            500: {"model": ErrorResponse},
            "default": {
                "model": UpstreamErrorResponse,
                "description": "Groq error, returned with Groq's own status code",
            },
        },
    )
    return router
