"""Tests for MessagingClient against httpx.MockTransport."""

from __future__ import annotations

import json

import httpx
import pytest

from linehook.messaging.client import MessagingClient
from linehook.messaging.models import (
    FlexMessage,
    PushMessageRequest,
    ReplyMessageRequest,
    TextMessage,
)
from linehook.protocol.errors import MessagingAPIError


def _client(handler) -> MessagingClient:
    return MessagingClient(
        "test-token",
        base_url="https://api.line.test",
        transport=httpx.MockTransport(handler),
    )


@pytest.fixture()
def recorded():
    """Capture requests and answer 200 with one sent message."""
    requests: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        requests.append(request)
        return httpx.Response(200, json={"sentMessages": [{"id": "sent-1"}]})

    return requests, handler


class TestReply:
    async def test_reply_message(self, recorded):
        requests, handler = recorded
        async with _client(handler) as client:
            resp = await client.reply_message(
                ReplyMessageRequest(reply_token="rt", messages=[TextMessage(text="hi")])
            )

        assert resp.sent_messages[0].id == "sent-1"
        req = requests[0]
        assert str(req.url) == "https://api.line.test/v2/bot/message/reply"
        assert req.headers["Authorization"] == "Bearer test-token"
        assert json.loads(req.content) == {
            "replyToken": "rt",
            "messages": [{"type": "text", "text": "hi"}],
        }

    async def test_reply_text(self, recorded):
        requests, handler = recorded
        async with _client(handler) as client:
            await client.reply_text("rt", "echo")
        assert json.loads(requests[0].content)["messages"] == [{"type": "text", "text": "echo"}]

    async def test_empty_response_body(self):
        async with _client(lambda request: httpx.Response(200)) as client:
            resp = await client.reply_text("rt", "echo")
        assert resp.sent_messages == []


class TestPush:
    async def test_push_flex_message(self, recorded):
        requests, handler = recorded
        request = PushMessageRequest(
            to="U123",
            messages=[FlexMessage(alt_text="Flex Message", contents={"type": "bubble"})],
        )
        async with _client(handler) as client:
            await client.push_message(request)

        req = requests[0]
        assert req.url.path == "/v2/bot/message/push"
        assert "X-Line-Retry-Key" not in req.headers
        assert json.loads(req.content) == {
            "to": "U123",
            "messages": [{"type": "flex", "altText": "Flex Message", "contents": {"type": "bubble"}}],
        }

    async def test_push_retry_key_header(self, recorded):
        requests, handler = recorded
        request = PushMessageRequest(to="U123", messages=[TextMessage(text="hi")])
        async with _client(handler) as client:
            await client.push_message(request, retry_key="123e4567-e89b-12d3-a456-426614174000")
        assert requests[0].headers["X-Line-Retry-Key"] == "123e4567-e89b-12d3-a456-426614174000"


class TestErrors:
    async def test_http_error_raises_messaging_api_error(self):
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(
                400,
                json={"message": "Invalid reply token"},
                headers={"X-Line-Request-Id": "req-42"},
            )

        async with _client(handler) as client:
            with pytest.raises(MessagingAPIError) as exc_info:
                await client.reply_text("expired", "hi")

        err = exc_info.value
        assert err.status_code == 400
        assert err.request_id == "req-42"
        assert "Invalid reply token" in err.body

    async def test_non_json_success_body_raises_messaging_api_error(self):
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(200, text="<html>gateway</html>")

        async with _client(handler) as client:
            with pytest.raises(MessagingAPIError) as exc_info:
                await client.reply_text("rt", "hi")

        assert exc_info.value.status_code == 200
        assert exc_info.value.body == "<html>gateway</html>"
        assert isinstance(exc_info.value.__cause__, ValueError)

    async def test_non_object_success_body_raises_messaging_api_error(self):
        async with _client(lambda request: httpx.Response(200, json=["sent-1"])) as client:
            with pytest.raises(MessagingAPIError):
                await client.reply_text("rt", "hi")

    async def test_transport_error_propagates(self):
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("connection refused", request=request)

        async with _client(handler) as client:
            with pytest.raises(httpx.ConnectError):
                await client.reply_text("rt", "hi")

    async def test_not_connected_raises(self):
        client = MessagingClient("test-token")
        with pytest.raises(RuntimeError, match="not connected"):
            await client.reply_text("rt", "hi")


class TestLifecycle:
    async def test_context_manager_closes_client(self, recorded):
        _, handler = recorded
        client = _client(handler)
        async with client:
            assert client._client is not None
        assert client._client is None

    async def test_disconnect_is_idempotent(self):
        client = MessagingClient("test-token")
        await client.disconnect()
        await client.connect()
        await client.disconnect()
        await client.disconnect()
