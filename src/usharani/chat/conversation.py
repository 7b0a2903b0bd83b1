"""Append-only conversation store."""

from collections.abc import Iterator

from .models import Message, Sender


class Conversation:
    """Ordered sequence of messages for the current session.

    Insertion order is render order. Messages are never removed,
    reordered or replaced.
    """

    def __init__(self) -> None:
        self._messages: list[Message] = []

    def append(self, message: Message) -> None:
        """Add a message to the end of the conversation."""
        self._messages.append(message)

    def last(self, sender: Sender | None = None) -> Message | None:
        """Most recent message, optionally from a given sender."""
        for message in reversed(self._messages):
            if sender is None or message.sender == sender:
                return message
        return None

    def __len__(self) -> int:
        return len(self._messages)

    def __iter__(self) -> Iterator[Message]:
        return iter(tuple(self._messages))

    def __getitem__(self, index: int) -> Message:
        return self._messages[index]
