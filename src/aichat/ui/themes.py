"""Theme definitions for the TUI.

This module hides the design decisions about:
- Color palettes and visual appearance
- Theme variables (borders, scrollbars, input cursor)

To add a new theme, define it here and register in the app.
"""

from textual.theme import Theme

# Bootstrap-like palette: blue primary for user bubbles, red for errors
AICHAT_DARK = Theme(
    name="aichat-dark",
    primary="#0d6efd",      # Blue - send button, user bubbles
    secondary="#6c757d",    # Grey - settings button
    accent="#0dcaf0",       # Cyan - focus highlights
    foreground="#dee2e6",   # Light text
    background="#121416",   # Deepest background
    success="#198754",
    warning="#ffc107",
    error="#dc3545",        # Error banner
    surface="#1c1f23",      # Cards and dialogs
    panel="#212529",        # Message list background
    dark=True,
    variables={
        "input-cursor-background": "#dee2e6",
        "input-cursor-foreground": "#121416",
        "input-selection-background": "#0d6efd 30%",

        "border": "#495057",
        "border-blurred": "#343a40",

        "scrollbar": "#343a40",
        "scrollbar-hover": "#495057",
        "scrollbar-active": "#0d6efd",
        "scrollbar-background": "#212529",

        "footer-key-foreground": "#0dcaf0",
        "text-muted": "#adb5bd",
    },
)
