"""Pydantic models for messaging API requests and responses.

Only the message types this package sends are modelled: text messages and
flex messages.  Flex ``contents`` is carried as a plain JSON object --
containers, boxes and components are not typed here.
"""

from __future__ import annotations

from typing import Annotated, Any, Literal, Union

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter
from pydantic.alias_generators import to_camel


class LineModel(BaseModel):
    """Base model: snake_case attributes, camelCase on the wire."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    def to_wire_dict(self) -> dict[str, Any]:
        """Serialize with wire field names, omitting unset optionals."""
        return self.model_dump(by_alias=True, exclude_none=True, mode="json")


# ---------------------------------------------------------------------------
# Messages
# ---------------------------------------------------------------------------


class TextMessage(LineModel):
    type: Literal["text"] = "text"
    text: str = Field(min_length=1, max_length=5000)
    quote_token: str | None = None


class FlexMessage(LineModel):
    type: Literal["flex"] = "flex"
    alt_text: str = Field(min_length=1, max_length=1500)
    contents: dict[str, Any]


Message = Annotated[Union[TextMessage, FlexMessage], Field(discriminator="type")]

_message_adapter: TypeAdapter[TextMessage | FlexMessage] = TypeAdapter(Message)


def message_from_dict(data: dict[str, Any]) -> TextMessage | FlexMessage:
    """Build a message model from a wire-format dict.

    Raises ``pydantic.ValidationError`` for unsupported or invalid messages.
    """
    return _message_adapter.validate_python(data)


# ---------------------------------------------------------------------------
# Requests
# ---------------------------------------------------------------------------


class ReplyMessageRequest(LineModel):
    reply_token: str
    messages: list[Message] = Field(min_length=1, max_length=5)
    notification_disabled: bool | None = None


class PushMessageRequest(LineModel):
    to: str
    messages: list[Message] = Field(min_length=1, max_length=5)
    notification_disabled: bool | None = None
    custom_aggregation_units: list[str] | None = None


# ---------------------------------------------------------------------------
# Responses
# ---------------------------------------------------------------------------


class SentMessage(LineModel):
    id: str
    quote_token: str | None = None


class ReplyMessageResponse(LineModel):
    sent_messages: list[SentMessage] = Field(default_factory=list)


class PushMessageResponse(LineModel):
    sent_messages: list[SentMessage] = Field(default_factory=list)
