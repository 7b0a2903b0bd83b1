"""Chat session module for usharani.

Provides the conversation store, observable UI state and the send controller.
"""

from .controller import MALFORMED_REPLY_TEXT, TRANSPORT_ERROR_TEXT, SendController
from .conversation import Conversation
from .models import Message, ReplyOutcome, ReplyStatus, Sender
from .state import ChatState

__all__ = [
    "ChatState",
    "Conversation",
    "MALFORMED_REPLY_TEXT",
    "Message",
    "ReplyOutcome",
    "ReplyStatus",
    "SendController",
    "Sender",
    "TRANSPORT_ERROR_TEXT",
]
