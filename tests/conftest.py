"""Shared test fixtures for linehook tests."""

from __future__ import annotations

import base64
import hashlib
import hmac

import pytest


@pytest.fixture()
def channel_secret() -> str:
    return "testsecret"


@pytest.fixture()
def sign():
    """Return a reference signer built directly on hmac/base64, not on linehook."""

    def _sign(body: bytes, secret: str) -> str:
        digest = hmac.new(secret.encode("utf-8"), body, hashlib.sha256).digest()
        return base64.b64encode(digest).decode("ascii")

    return _sign
