"""Outbound messaging API: request models and the async client."""

from linehook.messaging.client import MessagingClient
from linehook.messaging.models import (
    FlexMessage,
    PushMessageRequest,
    PushMessageResponse,
    ReplyMessageRequest,
    ReplyMessageResponse,
    SentMessage,
    TextMessage,
    message_from_dict,
)

__all__ = [
    "MessagingClient",
    "FlexMessage",
    "PushMessageRequest",
    "PushMessageResponse",
    "ReplyMessageRequest",
    "ReplyMessageResponse",
    "SentMessage",
    "TextMessage",
    "message_from_dict",
]
