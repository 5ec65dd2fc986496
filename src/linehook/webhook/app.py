"""FastAPI application factory for the webhook receiver."""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import FastAPI
from fastapi.exceptions import HTTPException, RequestValidationError
from starlette.requests import Request
from starlette.responses import JSONResponse

from linehook import __version__
from linehook.config import Settings
from linehook.messaging.client import MessagingClient
from linehook.protocol.signature import ensure_usable_secret
from linehook.webhook.handler import EventHandler, echo_text_message

logger = logging.getLogger(__name__)

# Consistent JSON error shape: {"error": "<code>", "detail": "<message>"}
_STATUS_TO_ERROR = {
    400: "bad_request",
    401: "unauthorized",
    404: "not_found",
    422: "validation_error",
    500: "internal_error",
}


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Open the messaging client for the app lifetime."""
    client: MessagingClient = app.state.messaging_client
    await client.connect()
    logger.info("Webhook receiver started")

    yield

    await client.disconnect()
    logger.info("Webhook receiver stopped")


def create_app(
    settings: Settings | None = None,
    handler: EventHandler | None = None,
    messaging_client: MessagingClient | None = None,
) -> FastAPI:
    """Create and configure the webhook receiver FastAPI application.

    Raises ``ConfigurationError`` when the channel secret or access token
    is missing, and ``InvalidKeyError`` when the secret cannot key the
    MAC, so a misconfigured process fails at startup rather than on every
    request.

    *handler* defaults to echoing text messages.  *messaging_client*
    defaults to a client built from *settings*.
    """
    if settings is None:
        settings = Settings()
    settings.require("channel_secret", "channel_access_token")
    ensure_usable_secret(settings.channel_secret)

    # Configure logging from settings
    logging.basicConfig(
        level=getattr(logging, settings.log_level, logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    if settings.debug:
        logging.getLogger("linehook").setLevel(logging.DEBUG)

    app = FastAPI(
        title="linehook webhook receiver",
        version=__version__,
        lifespan=lifespan,
    )

    # Store on app.state so lifespan and routes can access them
    app.state.settings = settings
    app.state.event_handler = handler or echo_text_message
    app.state.messaging_client = messaging_client or MessagingClient(
        settings.channel_access_token,
        base_url=settings.api_base_url,
        timeout=settings.api_timeout,
    )

    @app.exception_handler(HTTPException)
    async def http_exception_handler(request: Request, exc: HTTPException) -> JSONResponse:
        return JSONResponse(
            status_code=exc.status_code,
            content={
                "error": _STATUS_TO_ERROR.get(exc.status_code, "error"),
                "detail": exc.detail,
            },
        )

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
        return JSONResponse(
            status_code=422,
            content={
                "error": "validation_error",
                "detail": str(exc),
            },
        )

    from linehook.webhook.routes.callback import router as callback_router
    from linehook.webhook.routes.health import router as health_router

    app.include_router(callback_router)
    app.include_router(health_router)

    return app
