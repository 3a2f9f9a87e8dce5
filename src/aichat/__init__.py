"""
aichat: a terminal chat panel for OpenAI-compatible completion APIs.

Each module hides a specific design decision: which provider answers
(llm), where settings live (settings), how the conversation is driven
(chat) and how it is shown (ui).
"""

__version__ = "0.1.0"

from .chat import ChatController, ChatViewModel
from .llm import ChatMessage, create_llm_provider
from .settings import Settings, SettingsStore, create_settings_store

__all__ = [
    "ChatController",
    "ChatMessage",
    "ChatViewModel",
    "Settings",
    "SettingsStore",
    "create_llm_provider",
    "create_settings_store",
]
