"""Observable chat state.

Holds the conversation, the input buffer and the typing flag, and notifies
subscribers after every mutation so a view can redraw itself.
"""

from collections.abc import Callable

from .conversation import Conversation
from .models import Message

StateListener = Callable[["ChatState"], None]


class ChatState:
    """UI-facing state of one chat session."""

    def __init__(self, conversation: Conversation | None = None) -> None:
        self._conversation = conversation if conversation is not None else Conversation()
        self._input_buffer = ""
        self._is_typing = False
        self._listeners: list[StateListener] = []

    @property
    def conversation(self) -> Conversation:
        return self._conversation

    @property
    def input_buffer(self) -> str:
        return self._input_buffer

    @property
    def is_typing(self) -> bool:
        """True while a completion request is outstanding."""
        return self._is_typing

    def subscribe(self, listener: StateListener) -> None:
        """Register a callback invoked after each mutation."""
        if listener not in self._listeners:
            self._listeners.append(listener)

    def unsubscribe(self, listener: StateListener) -> None:
        if listener in self._listeners:
            self._listeners.remove(listener)

    def append_message(self, message: Message) -> None:
        self._conversation.append(message)
        self._notify()

    def set_input(self, text: str) -> None:
        if text != self._input_buffer:
            self._input_buffer = text
            self._notify()

    def set_typing(self, is_typing: bool) -> None:
        if is_typing != self._is_typing:
            self._is_typing = is_typing
            self._notify()

    def _notify(self) -> None:
        for listener in list(self._listeners):
            listener(self)
