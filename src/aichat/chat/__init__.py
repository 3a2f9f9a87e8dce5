"""Chat module for aichat.

Typed view state plus the controller that sends messages to a provider.
"""

from .controller import ERROR_CLEAR_DELAY_SECONDS, ChatController
from .view_model import ChatViewModel

__all__ = [
    "ERROR_CLEAR_DELAY_SECONDS",
    "ChatController",
    "ChatViewModel",
]
