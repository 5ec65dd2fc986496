"""linehook exception hierarchy.

All library-specific exceptions inherit from :class:`LineHookError`.

A signature that simply does not match is *not* an exception -- the
verifier returns ``False`` for that.  The exceptions here cover input that
cannot be compared at all and secrets that cannot key the MAC.
"""

from __future__ import annotations


class LineHookError(Exception):
    """Base exception for all linehook errors."""


class ConfigurationError(LineHookError):
    """Raised when required settings are missing or unusable."""


class SignatureValidationError(LineHookError):
    """Base class for signature validation failures other than a mismatch."""


class InvalidSignatureFormatError(SignatureValidationError):
    """Raised when the claimed signature is not valid standard base64."""

    def __init__(self, message: str = "Invalid signature format: signature must be base64 encoded") -> None:
        super().__init__(message)


class InvalidKeyError(SignatureValidationError, ConfigurationError):
    """Raised when the channel secret cannot be used as an HMAC key."""

    def __init__(self, message: str = "Invalid channel secret key") -> None:
        super().__init__(message)


class EventHandlingError(LineHookError):
    """Raised when a webhook event is missing fields its type requires."""


class MessagingAPIError(LineHookError):
    """Raised when the messaging API answers with a non-2xx status or an unreadable body."""

    def __init__(self, status_code: int, body: str, request_id: str | None = None) -> None:
        self.status_code = status_code
        self.body = body
        self.request_id = request_id
        super().__init__(f"Messaging API returned HTTP {status_code}: {body}")
