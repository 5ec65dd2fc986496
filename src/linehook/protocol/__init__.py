"""linehook protocol -- signature validation, types and errors.

Public API re-exports for ``linehook.protocol``.
"""

from linehook.protocol.types import (
    DEFAULT_API_BASE_URL,
    PUSH_ENDPOINT,
    REPLY_ENDPOINT,
    REQUEST_ID_HEADER,
    RETRY_KEY_HEADER,
    SIGNATURE_HEADER,
    EventType,
    MessageType,
    SignatureCheck,
)

from linehook.protocol.errors import (
    LineHookError,
    ConfigurationError,
    SignatureValidationError,
    InvalidSignatureFormatError,
    InvalidKeyError,
    EventHandlingError,
    MessagingAPIError,
)

from linehook.protocol.signature import (
    check_signature,
    compute_signature,
    decode_signature,
    ensure_usable_secret,
    validate_signature,
)

__all__ = [
    # Types
    "DEFAULT_API_BASE_URL",
    "PUSH_ENDPOINT",
    "REPLY_ENDPOINT",
    "REQUEST_ID_HEADER",
    "RETRY_KEY_HEADER",
    "SIGNATURE_HEADER",
    "EventType",
    "MessageType",
    "SignatureCheck",
    # Errors
    "LineHookError",
    "ConfigurationError",
    "SignatureValidationError",
    "InvalidSignatureFormatError",
    "InvalidKeyError",
    "EventHandlingError",
    "MessagingAPIError",
    # Signature
    "check_signature",
    "compute_signature",
    "decode_signature",
    "ensure_usable_secret",
    "validate_signature",
]
