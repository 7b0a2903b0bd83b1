"""Send controller: one request/response cycle per user turn.

Hides the request lifecycle from the UI:
- Input validation and the single-flight guard
- Payload construction (only the current turn is sent)
- Classification of the reply into a ReplyOutcome
- Fallback messages and guaranteed typing-flag cleanup
"""

from typing import Any

from ..llm import CompletionClient, GenerateContentRequest, extract_reply_text
from .models import Message, ReplyOutcome, ReplyStatus, Sender
from .state import ChatState

MALFORMED_REPLY_TEXT = "Sorry, I couldn't get a response. Please try again."
TRANSPORT_ERROR_TEXT = (
    "There was an error connecting to the bot. Please check your internet connection."
)


class SendController:
    """Drives sends against a completion client and updates ChatState.

    At most one send is in flight at a time. The guard lives here, not only
    in the UI, so direct callers get the same behavior.
    """

    def __init__(self, client: CompletionClient, state: ChatState | None = None) -> None:
        self._client = client
        self._state = state if state is not None else ChatState()
        self._debug_callback: Any = None
        self._last_outcome: ReplyOutcome | None = None

    @property
    def state(self) -> ChatState:
        return self._state

    @property
    def last_outcome(self) -> ReplyOutcome | None:
        """Outcome of the most recently settled send."""
        return self._last_outcome

    def set_debug_callback(self, callback: Any) -> None:
        """Set the debug callback for diagnostics.

        Args:
            callback: Callable(level: str, component: str, message: str)
                      level: 'debug', 'info', 'warning', 'error'
        """
        self._debug_callback = callback

    def _debug(self, level: str, component: str, message: str) -> None:
        if self._debug_callback:
            self._debug_callback(level, component, message)

    def set_input(self, text: str) -> None:
        """Update the input buffer with not-yet-sent text."""
        self._state.set_input(text)

    def can_send(self, current_input: str | None = None) -> bool:
        """Whether a send with this input would be accepted right now."""
        text = self._state.input_buffer if current_input is None else current_input
        return bool(text.strip()) and not self._state.is_typing

    def start_send(self, current_input: str | None = None) -> str | None:
        """Synchronous half of a send.

        Appends the user message, clears the input buffer and raises the
        typing flag. Does nothing for blank input or while a send is in
        flight.

        Args:
            current_input: Text to send; defaults to the input buffer

        Returns:
            The accepted text, or None if the send was rejected
        """
        text = self._state.input_buffer if current_input is None else current_input
        if not text.strip():
            return None
        if self._state.is_typing:
            self._debug("warning", "Chat", "Send ignored: a reply is still pending")
            return None

        self._state.append_message(Message(text=text, sender=Sender.USER))
        self._state.set_input("")
        self._state.set_typing(True)
        self._debug("info", "Chat", f"Sending: '{text[:50]}'")
        return text

    async def complete_send(self, text: str) -> Message:
        """Asynchronous half of a send.

        Requests a reply for ``text`` and appends exactly one bot message.
        The typing flag is cleared last, whatever happened.

        Returns:
            The bot message that was appended
        """
        try:
            outcome = await self.request_reply(text)
            self._last_outcome = outcome
            reply = Message(text=self._reply_text(outcome), sender=Sender.BOT)
            self._state.append_message(reply)
            return reply
        finally:
            self._state.set_typing(False)

    async def send_message(self, current_input: str | None = None) -> Message | None:
        """Send one user turn and wait for the bot reply.

        Returns:
            The bot message, or None if the input was rejected
        """
        text = self.start_send(current_input)
        if text is None:
            return None
        return await self.complete_send(text)

    async def request_reply(self, text: str) -> ReplyOutcome:
        """Issue one completion request and classify the result."""
        payload = GenerateContentRequest.single_turn(text).to_payload()
        try:
            body = await self._client.generate_content(payload)
        except Exception as e:
            self._debug("error", "LLM", f"Error communicating with Gemini API: {e!r}")
            return ReplyOutcome.transport_error(e)

        status = getattr(self._client, "last_status", None)
        if status is not None:
            self._debug("debug", "LLM", f"Response status: {status}")

        reply = extract_reply_text(body)
        if reply is None:
            self._debug("warning", "LLM", f"Unexpected API response structure: {body!r}")
            return ReplyOutcome.malformed(body)
        return ReplyOutcome.success(reply)

    @staticmethod
    def _reply_text(outcome: ReplyOutcome) -> str:
        if outcome.status == ReplyStatus.SUCCESS:
            return outcome.text or ""
        if outcome.status == ReplyStatus.MALFORMED:
            return MALFORMED_REPLY_TEXT
        return TRANSPORT_ERROR_TEXT
