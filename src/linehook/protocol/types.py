"""Core types and constants for the LINE webhook / messaging protocol."""

from __future__ import annotations

from enum import Enum


# Header carrying the base64 HMAC-SHA256 of the raw request body.
# HTTP header lookup is case-insensitive; the platform sends it lower-cased.
SIGNATURE_HEADER = "X-Line-Signature"

# Optional idempotency key for push requests (a UUID chosen by the caller)
RETRY_KEY_HEADER = "X-Line-Retry-Key"

# Response header echoing the platform's request id
REQUEST_ID_HEADER = "X-Line-Request-Id"

DEFAULT_API_BASE_URL = "https://api.line.me"

REPLY_ENDPOINT = "/v2/bot/message/reply"
PUSH_ENDPOINT = "/v2/bot/message/push"


class SignatureCheck(str, Enum):
    """Outcome of checking a webhook signature.

    ``VALID`` and ``INVALID`` are the two ordinary results.  ``MALFORMED``
    means the claimed signature could not be decoded, so no comparison took
    place.  ``INVALID_KEY`` means the secret itself is unusable, which is a
    configuration problem rather than a property of the request.
    """

    VALID = "valid"
    INVALID = "invalid"
    MALFORMED = "malformed"
    INVALID_KEY = "invalid_key"


class EventType(str, Enum):
    """Webhook event types the receiver distinguishes.

    Using ``str, Enum`` so that ``EventType.MESSAGE == "message"`` is True.
    Unknown types are kept as plain strings by the event model.
    """

    MESSAGE = "message"


class MessageType(str, Enum):
    """Incoming message content types the handler distinguishes."""

    TEXT = "text"
