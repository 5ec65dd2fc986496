"""Webhook event handlers.

A handler is an async callable taking ``(event, client)``.  The default,
:func:`echo_text_message`, replies to every text message with the same text.
"""

from __future__ import annotations

import logging
from typing import Awaitable, Callable

from linehook.messaging.client import MessagingClient
from linehook.protocol.errors import EventHandlingError
from linehook.webhook.models import Event

logger = logging.getLogger(__name__)

EventHandler = Callable[[Event, MessagingClient], Awaitable[None]]


async def echo_text_message(event: Event, client: MessagingClient) -> None:
    """Reply to a text message event with its own text.

    Ignored: non-message events, events without a reply token (e.g. in
    standby mode) and non-text messages.

    Raises ``EventHandlingError`` when a message event lacks its
    ``message`` object or a text message lacks ``text``.
    """
    if not event.is_message:
        return

    if not event.reply_token:
        logger.debug("Message event without reply token, ignoring")
        return

    if event.message is None:
        raise EventHandlingError("Missing message field")

    if not event.message.is_text:
        return

    if event.message.text is None:
        raise EventHandlingError("Missing text field")

    await client.reply_text(event.reply_token, event.message.text)
    logger.info("Echoed text message %s", event.message.id)
