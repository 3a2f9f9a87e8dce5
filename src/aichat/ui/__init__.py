"""Terminal UI module for aichat.

Provides the Textual chat panel.

Module structure (each module hides a design decision):
- config.py: User-facing strings
- widgets.py: Message list, input bar, error banner
- styles.py: CSS styling (layout decisions)
- themes.py: Color palette
- screens.py: Settings dialog
- app.py: Application orchestration (user interaction flow)
"""

from .app import ChatPanelApp, run_chat_panel
from .screens import SettingsScreen
from .widgets import ChatInputBar, ErrorBanner, MessageBubble, MessageList

__all__ = [
    "ChatInputBar",
    "ChatPanelApp",
    "ErrorBanner",
    "MessageBubble",
    "MessageList",
    "SettingsScreen",
    "run_chat_panel",
]
