"""Custom Textual widgets for the chat panel.

Hides widget implementation details:
- Message bubble rendering and alignment
- Input bar submission and enabling rules
- Error banner display and dismissal
"""

from textual.containers import Horizontal, VerticalScroll
from textual.events import Click
from textual.message import Message
from textual.widgets import Button, Input, Static

from ..llm.models import ChatMessage
from .config import EMPTY_CONVERSATION_TEXT, ERROR_PREFIX, INPUT_PLACEHOLDER


class MessageBubble(Static):
    """One message, rendered as plain text (no markup)."""

    def __init__(self, message: ChatMessage, **kwargs) -> None:
        super().__init__(
            message.content,
            markup=False,
            classes=f"message {message.role}-message",
            **kwargs,
        )
        self.message = message


class MessageList(VerticalScroll):
    """Scrollable conversation.

    Messages are append-only, so syncing only mounts the ones not shown yet.
    """

    BORDER_TITLE = "Chat"

    def __init__(self, *args, **kwargs) -> None:
        super().__init__(*args, **kwargs)
        self._shown = 0

    def compose(self):
        yield Static(EMPTY_CONVERSATION_TEXT, id="empty-placeholder")

    @property
    def shown_count(self) -> int:
        return self._shown

    def sync(self, conversation: tuple[ChatMessage, ...]) -> None:
        """Mount bubbles for messages appended since the last sync."""
        new_messages = conversation[self._shown:]
        if not new_messages:
            return

        self.query_one("#empty-placeholder", Static).display = False
        for message in new_messages:
            self.mount(
                Horizontal(MessageBubble(message), classes=f"message-row {message.role}")
            )
        self._shown = len(conversation)
        self.border_subtitle = f"{self._shown} messages"
        self.call_after_refresh(self.scroll_end, animate=False)


class ChatInputBar(Horizontal):
    """Text input with a Send button. Enter also sends."""

    class Submitted(Message):
        """Message sent when user submits input."""

        def __init__(self, value: str) -> None:
            super().__init__()
            self.value = value

    def compose(self):
        yield Input(placeholder=INPUT_PLACEHOLDER, id="chat-input")
        yield Button("Send", id="send-btn", variant="primary")

    def on_input_submitted(self, event: Input.Submitted) -> None:
        event.stop()
        self._submit()

    def on_button_pressed(self, event: Button.Pressed) -> None:
        if event.button.id == "send-btn":
            event.stop()
            self._submit()

    def _submit(self) -> None:
        chat_input = self.query_one("#chat-input", Input)
        value = chat_input.value
        if value.strip() and not chat_input.disabled:
            chat_input.value = ""
            self.post_message(self.Submitted(value))

    def set_state(self, input_enabled: bool, can_send: bool) -> None:
        """Apply the enabling rules from the view model."""
        self.query_one("#chat-input", Input).disabled = not input_enabled
        self.query_one("#send-btn", Button).disabled = not can_send

    def focus_input(self) -> None:
        """Focus the text input."""
        self.query_one("#chat-input", Input).focus()


class ErrorBanner(Static):
    """Transient error banner. Clicking it dismisses the error."""

    class Dismissed(Message):
        """Posted when the user clicks the banner."""

    def __init__(self, *args, **kwargs) -> None:
        super().__init__(*args, markup=False, **kwargs)

    def on_mount(self) -> None:
        self.display = False

    def show_error(self, message: str | None) -> None:
        if message is None:
            self.display = False
            self.update("")
            return
        self.update(f"{ERROR_PREFIX}{message}")
        self.display = True

    def on_click(self, event: Click) -> None:
        event.stop()
        self.post_message(self.Dismissed())
