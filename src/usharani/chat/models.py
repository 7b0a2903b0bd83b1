"""Data models for the chat session.

These models are independent of how the conversation is rendered.
"""

from datetime import datetime
from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class Sender(str, Enum):
    """Who authored a message."""

    USER = "user"
    BOT = "bot"


class Message(BaseModel):
    """One turn of the conversation."""

    model_config = ConfigDict(frozen=True)

    text: str = Field(description="Message text as displayed")
    sender: Sender = Field(description="Author of the message")
    timestamp: datetime = Field(default_factory=datetime.now)


class ReplyStatus(str, Enum):
    """How a completion request settled."""

    SUCCESS = "success"
    MALFORMED = "malformed"
    TRANSPORT_ERROR = "transport_error"


class ReplyOutcome(BaseModel):
    """Result of one completion request.

    Exactly one of three variants, selected by ``status``:
    - SUCCESS: ``text`` holds the reply
    - MALFORMED: ``raw`` holds the unexpected response body
    - TRANSPORT_ERROR: ``error`` describes the exception
    """

    model_config = ConfigDict(frozen=True)

    status: ReplyStatus
    text: str | None = None
    raw: Any = None
    error: str | None = None

    @classmethod
    def success(cls, text: str) -> "ReplyOutcome":
        return cls(status=ReplyStatus.SUCCESS, text=text)

    @classmethod
    def malformed(cls, raw: Any) -> "ReplyOutcome":
        return cls(status=ReplyStatus.MALFORMED, raw=raw)

    @classmethod
    def transport_error(cls, error: BaseException) -> "ReplyOutcome":
        detail = str(error) or type(error).__name__
        return cls(status=ReplyStatus.TRANSPORT_ERROR, error=detail)
