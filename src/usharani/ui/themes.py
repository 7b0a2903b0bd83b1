"""Theme definitions for the TUI.

This module hides the design decisions about:
- Color palettes and visual appearance
- Theme variables (borders, scrollbars, etc.)

To add a new theme, define it here and register in the app.
"""

from textual.theme import Theme

# Blue-to-violet palette matching the chat header gradient
USHARANI_DUSK = Theme(
    name="usharani-dusk",
    primary="#3b82f6",      # Blue - user bubbles, focus
    secondary="#9333ea",    # Purple - bot bubbles
    accent="#60a5fa",       # Light blue - highlights
    foreground="#e5e7eb",   # Light gray text
    background="#111827",   # Near-black
    success="#22c55e",
    warning="#f59e0b",
    error="#ef4444",
    surface="#1f2937",
    panel="#18212f",
    dark=True,
    variables={
        "input-cursor-background": "#e5e7eb",
        "input-cursor-foreground": "#111827",
        "input-selection-background": "#3b82f6 30%",

        "border": "#374151",
        "border-blurred": "#1f2937",

        "scrollbar": "#1f2937",
        "scrollbar-hover": "#374151",
        "scrollbar-active": "#3b82f6",
        "scrollbar-background": "#18212f",

        "footer-foreground": "#d1d5db",
        "footer-background": "#111827",
        "footer-key-foreground": "#60a5fa",
        "footer-key-background": "#1f2937",

        "text-muted": "#9ca3af",
        "text-disabled": "#4b5563",

        "button-foreground": "#e5e7eb",
        "button-color-foreground": "#111827",
    },
)
