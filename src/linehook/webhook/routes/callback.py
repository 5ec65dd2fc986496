"""POST /callback -- webhook receiver endpoint."""

from __future__ import annotations

import logging

from fastapi import APIRouter, HTTPException, Request
from pydantic import ValidationError

from linehook.protocol import SIGNATURE_HEADER, SignatureCheck, check_signature
from linehook.webhook.models import CallbackResponse, parse_callback

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/callback", response_model=CallbackResponse)
async def callback(request: Request) -> CallbackResponse:
    """Verify, parse and dispatch a webhook callback.

    Order of operations:
    1.  Signature header present (400 otherwise -- verifier not called)
    2.  Signature check over the raw body, before any JSON decoding
        (400 malformed, 401 mismatch, 500 unusable secret)
    3.  Parse body into events (400 on failure)
    4.  Hand each event to the configured handler.  A failing event is
        logged and does not affect the others or the response.
    """
    signature = request.headers.get(SIGNATURE_HEADER)
    if signature is None:
        raise HTTPException(status_code=400, detail="Missing x-line-signature header")

    body = await request.body()
    settings = request.app.state.settings

    outcome = check_signature(body, settings.channel_secret, signature)
    if outcome is SignatureCheck.MALFORMED:
        logger.warning("Rejected callback: signature header is not valid base64")
        raise HTTPException(status_code=400, detail="Signature validation failed")
    if outcome is SignatureCheck.INVALID_KEY:
        logger.error("Channel secret cannot be used as an HMAC key")
        raise HTTPException(status_code=500, detail="Server misconfigured")
    if outcome is SignatureCheck.INVALID:
        logger.warning("Rejected callback: signature mismatch")
        raise HTTPException(status_code=401, detail="Invalid signature")

    try:
        callback_request = parse_callback(body)
    except ValidationError as exc:
        logger.warning("Failed to parse webhook request: %s", exc)
        raise HTTPException(status_code=400, detail="Invalid request body") from exc

    handler = request.app.state.event_handler
    client = request.app.state.messaging_client
    for event in callback_request.events:
        try:
            await handler(event, client)
        except Exception:
            logger.exception("Error handling %s event %s", event.type, event.webhook_event_id)

    return CallbackResponse(status="ok", events=len(callback_request.events))
