#!/usr/bin/env python3
"""linehook example -- push a flex message

Builds the "Brown Cafe" bubble (hero image, rating row, place/time rows,
CALL / WEBSITE buttons) as a plain JSON object and pushes it to one user.

Usage:
    CHANNEL_ACCESS_TOKEN=... USER_ID=U... python3 push_flex_message.py
"""

from __future__ import annotations

import asyncio
import os
import sys
from typing import Any

from linehook.messaging import FlexMessage, MessagingClient, PushMessageRequest

_IMG = "https://developers-resource.landpress.line.me/fx/img"


def _text(text: str, **props: Any) -> dict[str, Any]:
    return {"type": "text", "text": text, **props}


def _star(color: str) -> dict[str, Any]:
    return {"type": "icon", "url": f"{_IMG}/review_{color}_star_28.png", "size": "sm"}


def _info_row(label: str, value: str) -> dict[str, Any]:
    return {
        "type": "box",
        "layout": "baseline",
        "spacing": "sm",
        "contents": [
            _text(label, flex=1, size="sm", color="#aaaaaa"),
            _text(value, flex=5, size="sm", color="#666666", wrap=True),
        ],
    }


def _link_button(label: str, uri: str) -> dict[str, Any]:
    return {
        "type": "button",
        "style": "link",
        "height": "sm",
        "action": {"type": "uri", "label": label, "uri": uri},
    }


def build_flex_message() -> FlexMessage:
    """Return the Brown Cafe bubble wrapped in a flex message."""
    rating = {
        "type": "box",
        "layout": "baseline",
        "margin": "md",
        "contents": [_star("gold")] * 4
        + [_star("gray"), _text("4.0", flex=0, size="sm", color="#999999", margin="md")],
    }
    bubble = {
        "type": "bubble",
        "hero": {
            "type": "image",
            "url": f"{_IMG}/01_1_cafe.png",
            "size": "full",
            "aspectRatio": "20:13",
            "aspectMode": "cover",
            "action": {"type": "uri", "uri": "https://line.me/"},
        },
        "body": {
            "type": "box",
            "layout": "vertical",
            "contents": [
                _text("Brown Cafe", size="xl", weight="bold"),
                rating,
                {
                    "type": "box",
                    "layout": "vertical",
                    "margin": "lg",
                    "spacing": "sm",
                    "contents": [
                        _info_row("Place", "Flex Tower, 7-7-4 Midori-ku, Tokyo"),
                        _info_row("Time", "10:00 - 23:00"),
                    ],
                },
            ],
        },
        "footer": {
            "type": "box",
            "layout": "vertical",
            "spacing": "sm",
            "flex": 0,
            "contents": [
                _link_button("CALL", "https://line.me/"),
                _link_button("WEBSITE", "https://line.me/"),
                {"type": "box", "layout": "vertical", "contents": [], "margin": "sm"},
            ],
        },
    }
    return FlexMessage(alt_text="Flex Message", contents=bubble)


async def main() -> None:
    token = os.getenv("CHANNEL_ACCESS_TOKEN")
    user_id = os.getenv("USER_ID")
    if not token or not user_id:
        print("CHANNEL_ACCESS_TOKEN and USER_ID must be set", file=sys.stderr)
        sys.exit(1)

    request = PushMessageRequest(to=user_id, messages=[build_flex_message()])
    async with MessagingClient(token) as client:
        response = await client.push_message(request)

    print("Successfully sent flex message!")
    print(f"Response: {response.to_wire_dict()}")


if __name__ == "__main__":
    asyncio.run(main())
