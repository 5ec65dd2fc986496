"""Webhook signature validation.

The platform signs every webhook request with HMAC-SHA256 keyed by the
channel secret and sends the base64 (standard alphabet, padded) digest in
the ``X-Line-Signature`` header.  The digest covers the raw request body,
so callers must pass the body bytes exactly as received -- re-serializing
parsed JSON produces a different signature.

Usage::

    from linehook.protocol.signature import validate_signature

    body = await request.body()  # raw bytes
    signature = request.headers["x-line-signature"]

    if validate_signature(body, channel_secret, signature):
        # request is authentic
        ...

All functions here are pure: no I/O, no logging, no shared state.  They are
safe to call inline from async handlers.
"""

from __future__ import annotations

import base64
import hashlib
import hmac

from linehook.protocol.errors import InvalidKeyError, InvalidSignatureFormatError
from linehook.protocol.types import SignatureCheck


def _key_bytes(channel_secret: str | bytes) -> bytes:
    """Turn *channel_secret* into HMAC key bytes, or raise ``InvalidKeyError``."""
    if isinstance(channel_secret, (bytes, bytearray)):
        return bytes(channel_secret)
    if isinstance(channel_secret, str):
        try:
            return channel_secret.encode("utf-8")
        except UnicodeEncodeError as exc:
            raise InvalidKeyError("Invalid channel secret key: not encodable as UTF-8") from exc
    raise InvalidKeyError(
        f"Invalid channel secret key: expected str or bytes, got {type(channel_secret).__name__}"
    )


def _digest(body: bytes, key: bytes) -> bytes:
    return hmac.new(key, body, hashlib.sha256).digest()


def decode_signature(signature: str) -> bytes:
    """Decode a claimed signature from standard base64.

    Strict: characters outside the standard alphabet (including the
    URL-safe ``-`` and ``_``), bad padding and non-ASCII text all raise
    :class:`InvalidSignatureFormatError`.
    """
    try:
        return base64.b64decode(signature, validate=True)
    except (ValueError, TypeError) as exc:
        raise InvalidSignatureFormatError() from exc


def compute_signature(body: bytes, channel_secret: str | bytes) -> str:
    """Return the base64 HMAC-SHA256 signature of *body*.

    This is the value the platform puts in ``X-Line-Signature``.  Useful for
    simulating webhook calls in tests and local tooling.
    """
    return base64.b64encode(_digest(body, _key_bytes(channel_secret))).decode("ascii")


def validate_signature(
    body: bytes,
    channel_secret: str | bytes,
    signature: str,
) -> bool:
    """Validate a webhook signature.

    Args:
        body: The raw request body bytes (may be empty).
        channel_secret: The channel secret.  ``str`` secrets are UTF-8 encoded.
        signature: The ``X-Line-Signature`` header value (base64).

    Returns:
        ``True`` if the signature matches, ``False`` otherwise.  A decoded
        signature of the wrong length is an ordinary ``False``.

    Raises:
        InvalidSignatureFormatError: *signature* is not standard base64.
            Checked before any MAC is computed.
        InvalidKeyError: *channel_secret* cannot be used as an HMAC key.
    """
    claimed = decode_signature(signature)
    expected = _digest(body, _key_bytes(channel_secret))
    # compare_digest returns False for unequal lengths and otherwise runs
    # in time independent of where the inputs differ.
    return hmac.compare_digest(claimed, expected)


def check_signature(
    body: bytes,
    channel_secret: str | bytes,
    signature: str,
) -> SignatureCheck:
    """Like :func:`validate_signature` but reports every outcome as a value.

    Lets callers map results to responses with a single ``match`` or dict
    lookup instead of a ``try``/``except`` around a boolean.
    """
    try:
        valid = validate_signature(body, channel_secret, signature)
    except InvalidSignatureFormatError:
        return SignatureCheck.MALFORMED
    except InvalidKeyError:
        return SignatureCheck.INVALID_KEY
    return SignatureCheck.VALID if valid else SignatureCheck.INVALID


def ensure_usable_secret(channel_secret: str | bytes) -> None:
    """Raise ``InvalidKeyError`` if *channel_secret* cannot key the MAC.

    Meant for startup checks so that a broken secret fails the process
    instead of every request.  Empty secrets pass; rejecting them is the
    job of configuration loading.
    """
    _digest(b"", _key_bytes(channel_secret))
