"""Async messaging API client via httpx with connection pooling."""

from __future__ import annotations

import logging
from typing import Any

import httpx

from linehook.messaging.models import (
    PushMessageRequest,
    ReplyMessageRequest,
    ReplyMessageResponse,
    PushMessageResponse,
    TextMessage,
)
from linehook.protocol.errors import MessagingAPIError
from linehook.protocol.types import (
    DEFAULT_API_BASE_URL,
    PUSH_ENDPOINT,
    REPLY_ENDPOINT,
    REQUEST_ID_HEADER,
    RETRY_KEY_HEADER,
)

logger = logging.getLogger(__name__)


class MessagingClient:
    """Client for the reply and push endpoints of the messaging API.

    Authenticates with the channel access token as a Bearer token (never
    the channel secret, which is only for verifying inbound webhooks).

    A single ``httpx.AsyncClient`` is created in ``connect()`` and reused
    for all requests.  Call ``disconnect()`` to close it, or use the client
    as an async context manager::

        async with MessagingClient(token) as client:
            await client.reply_text(reply_token, "hello")

    Pass ``transport`` to route requests somewhere other than the network
    (``httpx.MockTransport`` in tests).
    """

    def __init__(
        self,
        channel_access_token: str,
        base_url: str = DEFAULT_API_BASE_URL,
        timeout: float = 30.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._token = channel_access_token
        self._base_url = base_url
        self._timeout = timeout
        self._transport = transport
        self._client: httpx.AsyncClient | None = None

    async def connect(self) -> None:
        """Create the shared httpx AsyncClient."""
        self._client = httpx.AsyncClient(
            base_url=self._base_url,
            headers={"Authorization": f"Bearer {self._token}"},
            timeout=self._timeout,
            transport=self._transport,
        )

    async def disconnect(self) -> None:
        """Close the httpx client."""
        if self._client is not None:
            await self._client.aclose()
            self._client = None

    async def __aenter__(self) -> MessagingClient:
        await self.connect()
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.disconnect()

    async def _post(
        self,
        path: str,
        payload: dict[str, Any],
        headers: dict[str, str] | None = None,
    ) -> dict[str, Any]:
        """POST *payload* as JSON and return the decoded response body.

        Raises ``MessagingAPIError`` on 4xx/5xx, or when a success response
        body is not a JSON object.  Transport failures
        surface as ``httpx.HTTPError``.
        """
        if self._client is None:
            raise RuntimeError("MessagingClient not connected. Call connect() first.")
        resp = await self._client.post(path, json=payload, headers=headers)
        request_id = resp.headers.get(REQUEST_ID_HEADER)
        if resp.is_error:
            logger.warning(
                "Messaging API %s failed with HTTP %d (request id %s)",
                path,
                resp.status_code,
                request_id,
            )
            raise MessagingAPIError(resp.status_code, resp.text, request_id)
        logger.debug("Messaging API %s ok (request id %s)", path, request_id)
        if not resp.content:
            return {}
        try:
            data = resp.json()
        except ValueError as exc:
            raise MessagingAPIError(resp.status_code, resp.text, request_id) from exc
        if not isinstance(data, dict):
            raise MessagingAPIError(resp.status_code, resp.text, request_id)
        return data

    async def reply_message(self, request: ReplyMessageRequest) -> ReplyMessageResponse:
        """Reply to a webhook event using its reply token."""
        data = await self._post(REPLY_ENDPOINT, request.to_wire_dict())
        return ReplyMessageResponse.model_validate(data)

    async def push_message(
        self,
        request: PushMessageRequest,
        retry_key: str | None = None,
    ) -> PushMessageResponse:
        """Push messages to a user, group or room at any time.

        *retry_key* (a UUID) makes a retried push idempotent on the
        platform side.
        """
        headers = {RETRY_KEY_HEADER: retry_key} if retry_key else None
        data = await self._post(PUSH_ENDPOINT, request.to_wire_dict(), headers=headers)
        return PushMessageResponse.model_validate(data)

    async def reply_text(self, reply_token: str, text: str) -> ReplyMessageResponse:
        """Reply with a single text message."""
        return await self.reply_message(
            ReplyMessageRequest(reply_token=reply_token, messages=[TextMessage(text=text)])
        )
