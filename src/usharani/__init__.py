"""
Usharani: a minimal terminal chat widget backed by a Gemini completion endpoint.

Each module hides one design decision: the wire format (llm), the
conversation and send lifecycle (chat), and presentation (ui).
"""

__version__ = "0.1.0"

from .chat import (
    ChatState,
    Conversation,
    Message,
    ReplyOutcome,
    ReplyStatus,
    SendController,
    Sender,
)
from .llm import CompletionClient, GeminiClient, create_completion_client

__all__ = [
    "ChatState",
    "CompletionClient",
    "Conversation",
    "GeminiClient",
    "Message",
    "ReplyOutcome",
    "ReplyStatus",
    "SendController",
    "Sender",
    "create_completion_client",
]
