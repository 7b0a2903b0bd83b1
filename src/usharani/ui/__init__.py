"""Terminal UI module for usharani.

Provides a Textual-based chat widget.

Module structure (each module hides a design decision):
- widgets.py: Custom widgets (chat bubbles, typing indicator, input bar, log panel)
- styles.py: CSS styling (layout decisions)
- themes.py: Color palette
- config.py: Labels and log levels
- app.py: Application orchestration (user interaction flow)
"""

from .app import ChatApp, run_chat_tui
from .config import LogLevel
from .widgets import ChatHistoryWidget, ChatInputBar, DebugPanel, TypingIndicator

__all__ = [
    "ChatApp",
    "ChatHistoryWidget",
    "ChatInputBar",
    "DebugPanel",
    "LogLevel",
    "TypingIndicator",
    "run_chat_tui",
]
