"""Pydantic models for inbound webhook callback requests.

Parsing is lenient: unknown fields are kept (``extra="allow"``) and event
types outside :class:`~linehook.protocol.types.EventType` are accepted as
plain strings, so a new platform event type never fails the whole request.
"""

from __future__ import annotations

from pydantic import ConfigDict, Field

from linehook.messaging.models import LineModel
from linehook.protocol.types import EventType, MessageType


class _WebhookModel(LineModel):
    model_config = ConfigDict(extra="allow")


class Source(_WebhookModel):
    type: str
    user_id: str | None = None
    group_id: str | None = None
    room_id: str | None = None


class DeliveryContext(_WebhookModel):
    is_redelivery: bool = False


class MessageContent(_WebhookModel):
    """The ``message`` object of a message event."""

    id: str | None = None
    type: str
    text: str | None = None
    quote_token: str | None = None

    @property
    def is_text(self) -> bool:
        return self.type == MessageType.TEXT


class Event(_WebhookModel):
    type: str
    timestamp: int | None = None
    mode: str | None = None
    webhook_event_id: str | None = None
    delivery_context: DeliveryContext | None = None
    source: Source | None = None
    reply_token: str | None = None
    message: MessageContent | None = None

    @property
    def is_message(self) -> bool:
        return self.type == EventType.MESSAGE


class CallbackRequest(_WebhookModel):
    destination: str | None = None
    events: list[Event] = Field(default_factory=list)


def parse_callback(body: bytes | str) -> CallbackRequest:
    """Parse a raw callback body.

    Raises ``pydantic.ValidationError`` for malformed JSON or a body that
    does not match the callback shape.
    """
    return CallbackRequest.model_validate_json(body)


# ---------------------------------------------------------------------------
# Server responses
# ---------------------------------------------------------------------------


class CallbackResponse(LineModel):
    status: str
    events: int


class HealthResponse(LineModel):
    status: str
    version: str
