"""linehook CLI -- run the webhook receiver, sign/verify bodies, push messages.

Thin wrapper around the library using click.  The async messaging client
is driven with asyncio.run().
"""

from __future__ import annotations

import asyncio
import json
from typing import IO

import click
import httpx
from pydantic import ValidationError

from linehook.config import Settings
from linehook.messaging.client import MessagingClient
from linehook.messaging.models import (
    PushMessageRequest,
    PushMessageResponse,
    TextMessage,
    message_from_dict,
)
from linehook.protocol import (
    InvalidKeyError,
    InvalidSignatureFormatError,
    LineHookError,
    compute_signature,
    ensure_usable_secret,
    validate_signature,
)

# Exit status for `verify` when the signature cannot be decoded at all
_EXIT_MALFORMED = 2


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _error(msg: str, code: int = 1) -> None:
    """Print an error message to stderr and exit with *code*."""
    click.echo(msg, err=True)
    raise SystemExit(code)


async def _push(
    request: PushMessageRequest,
    token: str,
    settings: Settings,
    retry_key: str | None,
) -> PushMessageResponse:
    async with MessagingClient(
        token,
        base_url=settings.api_base_url,
        timeout=settings.api_timeout,
    ) as client:
        return await client.push_message(request, retry_key=retry_key)


# ---------------------------------------------------------------------------
# CLI group
# ---------------------------------------------------------------------------


@click.group()
@click.version_option(package_name="linehook")
def cli() -> None:
    """linehook -- LINE webhook receiver and messaging tools."""


# ---------------------------------------------------------------------------
# linehook serve
# ---------------------------------------------------------------------------


@cli.command()
@click.option("--host", default=None, help="Bind address (default: $HOST or 0.0.0.0).")
@click.option("--port", "-p", type=int, default=None, help="Listen port (default: $PORT or 3000).")
@click.option("--reload", is_flag=True, help="Reload on code changes (development).")
def serve(host: str | None, port: int | None, reload: bool) -> None:
    """Run the echo-bot webhook receiver."""
    settings = Settings()
    try:
        settings.require("channel_secret", "channel_access_token")
        ensure_usable_secret(settings.channel_secret)
    except LineHookError as exc:
        _error(f"Configuration error: {exc}")

    resolved_host = host if host is not None else settings.host
    resolved_port = port if port is not None else settings.port

    import uvicorn

    click.echo(f"Echo bot listening on port {resolved_port}")
    click.echo("Webhook URL: https://your.base.url/callback")
    uvicorn.run(
        "linehook.webhook.app:create_app",
        factory=True,
        host=resolved_host,
        port=resolved_port,
        reload=reload,
    )


# ---------------------------------------------------------------------------
# linehook sign / verify
# ---------------------------------------------------------------------------


@cli.command()
@click.argument("body", type=click.File("rb"), default="-")
@click.option(
    "--secret",
    envvar="CHANNEL_SECRET",
    required=True,
    help="Channel secret (default: $CHANNEL_SECRET).",
)
def sign(body: IO[bytes], secret: str) -> None:
    """Print the X-Line-Signature value for BODY (a file, or stdin)."""
    try:
        click.echo(compute_signature(body.read(), secret))
    except InvalidKeyError as exc:
        _error(f"Error: {exc}")


@cli.command()
@click.argument("signature")
@click.argument("body", type=click.File("rb"), default="-")
@click.option(
    "--secret",
    envvar="CHANNEL_SECRET",
    required=True,
    help="Channel secret (default: $CHANNEL_SECRET).",
)
def verify(signature: str, body: IO[bytes], secret: str) -> None:
    """Check SIGNATURE against BODY (a file, or stdin).

    Exit status: 0 valid, 1 invalid, 2 malformed signature.
    """
    try:
        valid = validate_signature(body.read(), secret, signature)
    except InvalidSignatureFormatError as exc:
        _error(f"Error: {exc}", code=_EXIT_MALFORMED)
    except InvalidKeyError as exc:
        _error(f"Error: {exc}")

    if not valid:
        _error("Signature is invalid")
    click.echo("Signature is valid")


# ---------------------------------------------------------------------------
# linehook push
# ---------------------------------------------------------------------------


@cli.command()
@click.argument("to")
@click.argument("text", required=False)
@click.option(
    "--json",
    "json_file",
    type=click.File("r"),
    default=None,
    help="Read a message object (or a list of them) from a JSON file.",
)
@click.option("--retry-key", default=None, help="UUID sent as X-Line-Retry-Key.")
@click.option(
    "--token",
    envvar="CHANNEL_ACCESS_TOKEN",
    required=True,
    help="Channel access token (default: $CHANNEL_ACCESS_TOKEN).",
)
def push(
    to: str,
    text: str | None,
    json_file: IO[str] | None,
    retry_key: str | None,
    token: str,
) -> None:
    """Push TEXT (or the --json message) to the user, group or room TO."""
    if (text is None) == (json_file is None):
        _error("Error: provide either TEXT or --json FILE")

    try:
        if json_file is not None:
            data = json.load(json_file)
            items = data if isinstance(data, list) else [data]
            messages = [message_from_dict(item) for item in items]
        else:
            messages = [TextMessage(text=text)]
        request = PushMessageRequest(to=to, messages=messages)
    except (json.JSONDecodeError, ValidationError) as exc:
        _error(f"Error: invalid message: {exc}")

    try:
        response = asyncio.run(_push(request, token, Settings(), retry_key))
    except LineHookError as exc:
        _error(f"Error: {exc}")
    except httpx.HTTPError as exc:
        _error(f"Error: {type(exc).__name__}: {exc}")

    click.echo(f"Pushed {len(messages)} message(s) to {to}")
    for sent in response.sent_messages:
        click.echo(f"  id: {sent.id}")


if __name__ == "__main__":
    cli()
