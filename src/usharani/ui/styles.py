"""CSS styles for the TUI.

Hides layout and styling decisions from the application logic.
Uses Textual CSS features: nesting, pseudo-classes, variables.
"""

APP_CSS = """
/* ============================================
   Main Screen Layout
   ============================================ */
Screen {
    layout: vertical;
    background: $background;
}

/* ============================================
   Chat History Panel
   ============================================ */
#chat-history {
    height: 1fr;
    background: $panel;
    border: round $primary 60%;
    border-title-color: $primary;
    border-title-style: bold;
    border-title-align: left;
    border-subtitle-color: $text-muted;
    border-subtitle-align: right;
    padding: 0 1;
    scrollbar-gutter: stable;

    &:focus-within {
        border: round $primary;
    }
}

/* ============================================
   Chat Messages
   ============================================ */
.message-row {
    width: 100%;
    height: auto;
    margin: 0 0 1 0;
}

.user-row {
    align-horizontal: right;
}

.bot-row {
    align-horizontal: left;
}

.chat-message {
    width: auto;
    max-width: 75%;
    height: auto;
    padding: 0 2;
}

/* User messages - right side, blue */
.user-message {
    border-right: tall $primary;
    background: $primary 20%;

    & .message-header {
        color: $primary;
        text-align: right;
    }

    &:hover {
        background: $primary 30%;
    }
}

/* Bot messages - left side, purple */
.bot-message {
    border-left: tall $secondary;
    background: $secondary 12%;

    & .message-header {
        color: $secondary;
    }

    &:hover {
        background: $secondary 20%;
    }
}

.message-header {
    width: auto;
    height: auto;
    text-style: bold;
}

.message-content {
    width: auto;
    height: auto;
    color: $foreground;
}

/* Typing indicator */
TypingIndicator {
    width: auto;
    height: auto;
    padding: 0 2;
    margin: 0 0 1 0;
    border-left: tall $secondary 50%;
    background: $secondary 8%;
    color: $text-muted;
    text-style: italic;
}

/* ============================================
   Debug/Log Panel
   ============================================ */
#debug-panel {
    display: none;
    height: auto;
    min-height: 6;
    max-height: 12;
    background: $panel;
    border: round $warning 60%;
    border-title-color: $warning;
    border-title-style: bold;
    border-title-align: left;
    border-subtitle-color: $text-muted;
    border-subtitle-align: right;
    padding: 0 1;
    overflow-y: scroll;
    overflow-x: auto;
    scrollbar-gutter: stable;
}

/* ============================================
   Chat Input Bar - Text Entry + Send
   ============================================ */
ChatInputBar {
    height: 3;
    margin-top: 1;
    background: $panel;
}

#chat-input {
    width: 1fr;
    border: round $primary 60%;
    background: $surface;

    &:focus {
        border: round $primary;
    }

    &:disabled {
        border: round $border;
        color: $text-disabled;
    }
}

#send-btn {
    width: 10;
    min-width: 8;
    margin: 0 0 0 1;
    text-style: bold;
}

/* ============================================
   Header and Footer
   ============================================ */
Header {
    background: $primary;
    color: $foreground;
}

Footer {
    background: $panel;
}
"""
