"""Subset of the Telegram Bot API payloads used by the webhook."""
from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class User(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    id: int
    is_bot: bool = False
    first_name: str = ""
    username: str | None = None
    language_code: str | None = None


class Chat(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    id: int
    first_name: str | None = None
    username: str | None = None
    chat_type: str | None = Field(default=None, alias="type")


class Message(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    message_id: int
    chat: Chat
    date: int | None = None
    from_user: User | None = Field(default=None, alias="from")
    text: str | None = None


class Update(BaseModel):
    """Incoming webhook update; only (edited) text messages are handled."""

    model_config = ConfigDict(extra="ignore")

    update_id: int
    message: Message | None = None
    edited_message: Message | None = None

    @property
    def effective_message(self) -> Message | None:
        return self.message or self.edited_message


class SendMessage(BaseModel):
    """Webhook reply: Telegram executes it as a sendMessage call."""

    method: str = "sendMessage"
    chat_id: int
    text: str
    reply_to_message_id: int | None = None
