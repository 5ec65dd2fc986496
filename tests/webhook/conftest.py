"""Shared fixtures for webhook receiver tests."""

from __future__ import annotations

import json

import httpx
import pytest
from fastapi.testclient import TestClient

from linehook.config import Settings
from linehook.messaging.client import MessagingClient
from linehook.webhook.app import create_app


@pytest.fixture()
def api_requests() -> list[httpx.Request]:
    """Requests the receiver made to the (mocked) messaging API."""
    return []


@pytest.fixture()
def api_status() -> int:
    """Status code the mocked messaging API answers with."""
    return 200


@pytest.fixture()
def messaging_client(api_requests, api_status):
    """MessagingClient backed by httpx.MockTransport (no network)."""

    def handler(request: httpx.Request) -> httpx.Response:
        api_requests.append(request)
        if api_status >= 400:
            return httpx.Response(api_status, json={"message": "Invalid reply token"})
        return httpx.Response(
            api_status,
            json={"sentMessages": [{"id": "sent-1"}]},
            headers={"X-Line-Request-Id": "req-1"},
        )

    return MessagingClient(
        "test-token",
        base_url="https://api.line.test",
        transport=httpx.MockTransport(handler),
    )


@pytest.fixture()
def settings(monkeypatch, channel_secret):
    monkeypatch.setenv("CHANNEL_SECRET", channel_secret)
    monkeypatch.setenv("CHANNEL_ACCESS_TOKEN", "test-token")
    return Settings()


@pytest.fixture()
def app(settings, messaging_client):
    return create_app(settings, messaging_client=messaging_client)


@pytest.fixture()
def client(app):
    """Return a TestClient for the receiver with lifespan triggered."""
    with TestClient(app) as c:
        yield c


@pytest.fixture()
def text_event():
    """Build a text message event dict in wire format."""

    def _event(text: str = "hello", reply_token: str | None = "reply-token-1", **extra) -> dict:
        event = {
            "type": "message",
            "mode": "active",
            "timestamp": 1700000000000,
            "webhookEventId": "01HEVENT",
            "deliveryContext": {"isRedelivery": False},
            "source": {"type": "user", "userId": "U0123"},
            "message": {"id": "msg-1", "type": "text", "text": text, "quoteToken": "q-1"},
        }
        if reply_token is not None:
            event["replyToken"] = reply_token
        event.update(extra)
        return event

    return _event


@pytest.fixture()
def post_callback(client, sign, channel_secret):
    """POST events to /callback, signed with the channel secret by default.

    Returns the response.  Pass ``signature=None`` to omit the header.
    """
    _unset = object()

    def _post(*events: dict, body: bytes | None = None, signature=_unset) -> httpx.Response:
        if body is None:
            body = json.dumps(
                {"destination": "Ubot", "events": list(events)},
                separators=(",", ":"),
            ).encode("utf-8")
        headers = {"Content-Type": "application/json"}
        if signature is _unset:
            signature = sign(body, channel_secret)
        if signature is not None:
            headers["X-Line-Signature"] = signature
        return client.post("/callback", content=body, headers=headers)

    return _post
