"""Custom Textual widgets for the TUI.

Hides widget implementation details:
- Input history management
- Chat message rendering and alignment
- Typing indicator placement
- Log rendering and level filtering
"""

from collections import deque
from datetime import datetime

from rich.text import Text
from textual.binding import Binding
from textual.containers import Horizontal, Vertical, VerticalScroll
from textual.events import Click
from textual.message import Message
from textual.widgets import Button, Input, Markdown, RichLog, Static

from ..chat import Conversation, Sender
from ..chat import Message as ChatMessage
from .config import (
    BOT_LABEL,
    INPUT_HISTORY_MAX_SIZE,
    INPUT_PLACEHOLDER,
    LOG_MAX_LINES,
    LOG_MAX_MESSAGE_LENGTH,
    LOG_TIMESTAMP_FORMAT,
    MESSAGE_TIMESTAMP_FORMAT,
    TYPING_INDICATOR_TEXT,
    USER_LABEL,
    LogLevel,
)


class ClickableMessage(Vertical):
    """A chat bubble that copies its text when clicked."""

    def __init__(self, content: str, *args, **kwargs) -> None:
        super().__init__(*args, **kwargs)
        self._content = content

    @property
    def content(self) -> str:
        return self._content

    def on_click(self, event: Click) -> None:
        """Copy message text to the clipboard."""
        event.stop()
        import pyperclip

        try:
            pyperclip.copy(self._content)
            self.app.notify("Copied to clipboard", timeout=2)
        except pyperclip.PyperclipException:
            # No system clipboard, fall back to OSC 52
            self.app.copy_to_clipboard(self._content)
            self.app.notify("Copied (terminal)", timeout=2)


class TypingIndicator(Static):
    """Transient placeholder shown while a reply is pending."""

    def __init__(self, *args, **kwargs) -> None:
        super().__init__(TYPING_INDICATOR_TEXT, *args, **kwargs)


class ChatHistoryWidget(VerticalScroll):
    """Scrollable conversation view.

    Renders messages in conversation order, user messages on the right
    and bot messages on the left, and keeps the newest one in view.
    """

    BORDER_TITLE = "Chat"
    BORDER_SUBTITLE = "No messages yet"
    ALLOW_SELECT = True

    def __init__(self, *args, **kwargs) -> None:
        super().__init__(*args, **kwargs)
        self._rendered = 0
        self._indicator: TypingIndicator | None = None

    @property
    def rendered_count(self) -> int:
        return self._rendered

    @property
    def is_typing_shown(self) -> bool:
        return self._indicator is not None

    def sync(self, conversation: Conversation) -> None:
        """Render messages appended since the last sync."""
        while self._rendered < len(conversation):
            self._render_message(conversation[self._rendered])
            self._rendered += 1
        if self._rendered:
            self.border_subtitle = f"{self._rendered} messages"

    def set_typing(self, is_typing: bool) -> None:
        """Show or remove the typing indicator."""
        if is_typing and self._indicator is None:
            self._indicator = TypingIndicator()
            self.mount(self._indicator)
            self._scroll_to_latest()
        elif not is_typing and self._indicator is not None:
            self._indicator.remove()
            self._indicator = None

    def _render_message(self, msg: ChatMessage) -> None:
        if msg.sender == Sender.USER:
            label = USER_LABEL
            side = "user"
        else:
            label = BOT_LABEL
            side = "bot"

        timestamp = msg.timestamp.strftime(MESSAGE_TIMESTAMP_FORMAT)
        bubble = ClickableMessage(content=msg.text, classes=f"chat-message {side}-message")
        bubble.compose_add_child(Static(f"{label} [{timestamp}]", markup=False, classes="message-header"))

        if msg.sender == Sender.BOT:
            bubble.compose_add_child(Markdown(msg.text, classes="message-content"))
        else:
            bubble.compose_add_child(Static(Text(msg.text), classes="message-content"))

        row = Horizontal(bubble, classes=f"message-row {side}-row")
        # Keep the indicator below the newest message
        if self._indicator is not None:
            self.mount(row, before=self._indicator)
        else:
            self.mount(row)
        self._scroll_to_latest()

    def _scroll_to_latest(self) -> None:
        self.call_after_refresh(self.scroll_end, animate=False)


class HistoryInput(Input):
    """Single-line input with Up/Down recall of previously sent text.

    Multi-line pastes are converted to a single line.
    """

    BINDINGS = [
        Binding("up", "history_previous", "Previous", show=False),
        Binding("down", "history_next", "Next", show=False),
    ]

    def __init__(self, *args, **kwargs) -> None:
        super().__init__(*args, **kwargs)
        self._history: list[str] = []
        self._history_index: int = -1
        self._current_input: str = ""

    def _on_paste(self, event) -> None:
        """Convert newlines to spaces for single-line input."""
        if event.text:
            self.insert_text_at_cursor(" ".join(event.text.split()))
        event.prevent_default()
        event.stop()

    def action_history_previous(self) -> None:
        if not self._history:
            return
        if self._history_index == -1:
            self._current_input = self.value
            self._history_index = len(self._history) - 1
        elif self._history_index > 0:
            self._history_index -= 1
        self.value = self._history[self._history_index]
        self.cursor_position = len(self.value)

    def action_history_next(self) -> None:
        if self._history_index == -1:
            return
        if self._history_index < len(self._history) - 1:
            self._history_index += 1
            self.value = self._history[self._history_index]
        else:
            self._history_index = -1
            self.value = self._current_input
        self.cursor_position = len(self.value)

    def add_to_history(self, entry: str) -> None:
        """Remember sent text, skipping immediate repeats."""
        if entry and (not self._history or self._history[-1] != entry):
            self._history.append(entry)
            del self._history[:-INPUT_HISTORY_MAX_SIZE]
        self._history_index = -1
        self._current_input = ""


class ChatInputBar(Horizontal):
    """Text input with a Send button.

    Enter and the Send button both post ``Submitted``. The bar never clears
    itself: the app mirrors the input buffer back once a send is accepted.
    """

    class Submitted(Message):
        """Posted when the user submits input."""

        def __init__(self, value: str) -> None:
            super().__init__()
            self.value = value

    class Changed(Message):
        """Posted when the input text changes."""

        def __init__(self, value: str) -> None:
            super().__init__()
            self.value = value

    def __init__(self, *args, **kwargs) -> None:
        super().__init__(*args, **kwargs)
        self._busy = False

    def compose(self):
        yield HistoryInput(placeholder=INPUT_PLACEHOLDER, id="chat-input")
        yield Button("Send", id="send-btn", variant="primary", disabled=True).with_tooltip(
            "Send message (Enter)"
        )

    @property
    def value(self) -> str:
        return self.query_one("#chat-input", HistoryInput).value

    @value.setter
    def value(self, text: str) -> None:
        self.query_one("#chat-input", HistoryInput).value = text
        self._refresh_send_button()

    @property
    def busy(self) -> bool:
        return self._busy

    def set_busy(self, busy: bool) -> None:
        """Disable editing and sending while a reply is pending."""
        if busy == self._busy:
            return
        self._busy = busy
        text_input = self.query_one("#chat-input", HistoryInput)
        text_input.disabled = busy
        self._refresh_send_button()
        if not busy:
            text_input.focus()

    def on_input_changed(self, event: Input.Changed) -> None:
        event.stop()
        self._refresh_send_button()
        self.post_message(self.Changed(event.value))

    def on_input_submitted(self, event: Input.Submitted) -> None:
        event.stop()
        self._submit()

    def on_button_pressed(self, event: Button.Pressed) -> None:
        if event.button.id == "send-btn":
            event.stop()
            self._submit()

    def _refresh_send_button(self) -> None:
        button = self.query_one("#send-btn", Button)
        button.disabled = self._busy or not self.value.strip()

    def _submit(self) -> None:
        value = self.value
        if self._busy or not value.strip():
            return
        self.query_one("#chat-input", HistoryInput).add_to_history(value)
        self.post_message(self.Submitted(value))

    def focus_input(self) -> None:
        """Focus the text input."""
        self.query_one("#chat-input", HistoryInput).focus()


class DebugPanel(RichLog):
    """Log panel for diagnostics with level filtering.

    Hidden by default, shown with --log-level or toggled with Ctrl+D.
    """

    BORDER_TITLE = "Log"
    BORDER_SUBTITLE = "Hidden"

    COMPONENT_COLORS = {
        "TUI": "cyan",
        "Chat": "green",
        "LLM": "magenta",
    }

    LEVEL_COLORS = {
        LogLevel.DEBUG: "dim white",
        LogLevel.INFO: "cyan",
        LogLevel.WARNING: "yellow",
        LogLevel.ERROR: "red",
    }

    def __init__(
        self,
        *args,
        log_level: int = LogLevel.DEBUG,
        max_lines: int = LOG_MAX_LINES,
        **kwargs
    ) -> None:
        super().__init__(
            *args,
            max_lines=max_lines,
            markup=True,
            highlight=False,
            auto_scroll=True,
            wrap=False,
            **kwargs
        )
        self._log_level = log_level
        self._entries: deque[str] = deque(maxlen=max_lines)

    @property
    def log_level(self) -> int:
        """Current log level threshold."""
        return self._log_level

    @log_level.setter
    def log_level(self, level: int) -> None:
        self._log_level = level
        self._update_subtitle()

    @property
    def entries(self) -> list[str]:
        """Plain-text copies of the retained log lines, oldest first."""
        return list(self._entries)

    def _update_subtitle(self) -> None:
        if self.display:
            self.border_subtitle = f"Level: {LogLevel.name(self._log_level)}"
        else:
            self.border_subtitle = "Hidden"

    def write_entry(self, component: str, message: str, level: int = LogLevel.DEBUG) -> None:
        """Add a log entry if it meets the current level threshold."""
        if level < self._log_level:
            return

        if len(message) > LOG_MAX_MESSAGE_LENGTH:
            message = message[:LOG_MAX_MESSAGE_LENGTH] + "..."

        timestamp = datetime.now().strftime(LOG_TIMESTAMP_FORMAT)
        level_name = LogLevel.name(level)
        self._entries.append(f"{timestamp} {level_name} [{component}] {message}")

        line = Text.assemble(
            (f"{timestamp} ", "dim"),
            (f"{level_name:<5} ", self.LEVEL_COLORS.get(level, "white")),
            (f"[{component}] ", self.COMPONENT_COLORS.get(component, "white")),
            message,
        )
        self.write(line)

    def debug(self, component: str, message: str) -> None:
        self.write_entry(component, message, LogLevel.DEBUG)

    def info(self, component: str, message: str) -> None:
        self.write_entry(component, message, LogLevel.INFO)

    def warning(self, component: str, message: str) -> None:
        self.write_entry(component, message, LogLevel.WARNING)

    def error(self, component: str, message: str) -> None:
        self.write_entry(component, message, LogLevel.ERROR)

    def show(self) -> None:
        self.display = True
        self._update_subtitle()

    def hide(self) -> None:
        self.display = False
        self._update_subtitle()

    def toggle(self) -> bool:
        """Toggle visibility. Returns new state."""
        if self.display:
            self.hide()
            return False
        self.show()
        return True

    def clear(self) -> "DebugPanel":
        """Clear the log."""
        self._entries.clear()
        super().clear()
        return self
