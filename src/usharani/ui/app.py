"""Main Textual TUI application.

Orchestrates the UI components and wires user actions to the SendController.
"""

from textual import work
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.css.query import NoMatches
from textual.widgets import Footer, Header

from ..chat import ChatState, SendController, Sender
from ..llm import CompletionClient
from .config import APP_TITLE, LogLevel
from .styles import APP_CSS
from .themes import USHARANI_DUSK
from .widgets import ChatHistoryWidget, ChatInputBar, DebugPanel


class ChatApp(App):
    """Single-page chat with a completion endpoint."""

    CSS = APP_CSS
    TITLE = APP_TITLE

    BINDINGS = [
        Binding("ctrl+c", "quit", "Quit", priority=True),
        Binding("ctrl+r", "copy_last_response", "Copy Reply"),
        Binding("ctrl+l", "clear_log", "Clear Log"),
        Binding("ctrl+d", "toggle_debug", "Log", priority=True),
    ]

    def __init__(
        self,
        controller: SendController,
        log_level: str | None = None,
        model_name: str | None = None,
    ) -> None:
        super().__init__()
        self._controller = controller
        self._log_level = log_level
        self._model_name = model_name

    @property
    def controller(self) -> SendController:
        return self._controller

    def compose(self) -> ComposeResult:
        yield Header(show_clock=True)
        yield ChatHistoryWidget(id="chat-history")
        yield DebugPanel(id="debug-panel")
        yield ChatInputBar(id="chat-input-bar")
        yield Footer()

    def on_mount(self) -> None:
        """Called when app is mounted."""
        self.register_theme(USHARANI_DUSK)
        self.theme = "usharani-dusk"

        log_panel = self.query_one("#debug-panel", DebugPanel)
        if self._log_level is not None:
            log_panel.log_level = LogLevel.from_string(self._log_level)
            log_panel.show()
            log_panel.info("TUI", f"Log panel enabled with level: {self._log_level.upper()}")

        if self._model_name:
            self.sub_title = self._model_name

        self._controller.set_debug_callback(self._route_debug)
        self._controller.state.subscribe(self._on_state_changed)
        self._on_state_changed(self._controller.state)
        self.query_one("#chat-input-bar", ChatInputBar).focus_input()

    def on_unmount(self) -> None:
        self._controller.state.unsubscribe(self._on_state_changed)
        self._controller.set_debug_callback(None)

    def _route_debug(self, level: str, component: str, message: str) -> None:
        """Route controller diagnostics to the log panel."""
        try:
            log_panel = self.query_one("#debug-panel", DebugPanel)
        except NoMatches:
            return  # shutting down
        log_panel.write_entry(component, message, LogLevel.from_string(level))

    def _on_state_changed(self, state: ChatState) -> None:
        """Redraw from state after every mutation."""
        try:
            chat = self.query_one("#chat-history", ChatHistoryWidget)
        except NoMatches:
            return  # a worker settled after the screen was torn down
        chat.sync(state.conversation)
        chat.set_typing(state.is_typing)

        input_bar = self.query_one("#chat-input-bar", ChatInputBar)
        input_bar.set_busy(state.is_typing)
        # Only mirror a cleared buffer; keystrokes flow the other way
        if not state.input_buffer and input_bar.value:
            input_bar.value = ""

    def on_chat_input_bar_changed(self, event: ChatInputBar.Changed) -> None:
        self._controller.set_input(event.value)

    def on_chat_input_bar_submitted(self, event: ChatInputBar.Submitted) -> None:
        """Handle user input submission from Enter or the Send button."""
        text = self._controller.start_send(event.value)
        if text is not None:
            self._complete_send(text)

    @work(exclusive=True)
    async def _complete_send(self, text: str) -> None:
        """Await the reply as a background async worker."""
        await self._controller.complete_send(text)

    def action_copy_last_response(self) -> None:
        """Copy last bot reply to clipboard."""
        reply = self._controller.state.conversation.last(Sender.BOT)
        if reply is None:
            self.notify("No response to copy", severity="warning")
            return
        self.copy_to_clipboard(reply.text)
        self.notify("Response copied")

    def action_clear_log(self) -> None:
        """Clear the log panel."""
        self.query_one("#debug-panel", DebugPanel).clear()
        self.notify("Log cleared", timeout=2)

    def action_toggle_debug(self) -> None:
        """Toggle the log panel visibility."""
        log_panel = self.query_one("#debug-panel", DebugPanel)
        is_visible = log_panel.toggle()
        self.notify(f"Log panel {'shown' if is_visible else 'hidden'}", timeout=2)


async def run_chat_tui(
    client: CompletionClient,
    log_level: str | None = None,
    model_name: str | None = None,
) -> None:
    """Run the chat TUI until the user quits.

    Args:
        client: Completion client used for every send
        log_level: Log level for panel (debug/info/warning/error), None to hide
        model_name: Shown as the header subtitle
    """
    controller = SendController(client)
    app = ChatApp(controller, log_level=log_level, model_name=model_name)
    await app.run_async()
