"""Main Textual TUI application.

Orchestrates the UI components: user actions go to the ChatController,
and every view-model transition re-renders the panel.
"""

import asyncio
import contextlib

from textual import work
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Horizontal
from textual.widgets import Button, Footer, Header, Input, LoadingIndicator, Static

from ..chat import ERROR_CLEAR_DELAY_SECONDS, ChatController, ChatViewModel
from ..chat.controller import ProviderFactory
from ..llm import create_llm_provider
from ..settings import Settings, SettingsStore
from .config import API_KEY_HINT, TITLE_TEMPLATE
from .screens import SettingsScreen
from .styles import APP_CSS
from .themes import AICHAT_DARK
from .widgets import ChatInputBar, ErrorBanner, MessageList


class ChatPanelApp(App):
    """Textual chat panel for an OpenAI-compatible provider."""

    CSS = APP_CSS
    TITLE = "aichat"

    BINDINGS = [
        Binding("ctrl+c", "quit", "Quit"),
        Binding("ctrl+s", "open_settings", "Settings"),
        Binding("escape", "dismiss_error", "Dismiss error", show=False),
    ]

    def __init__(
        self,
        store: SettingsStore,
        provider_factory: ProviderFactory = create_llm_provider,
        error_clear_delay: float = ERROR_CLEAR_DELAY_SECONDS,
    ) -> None:
        super().__init__()
        self._controller = ChatController(
            store,
            ChatViewModel(),
            provider_factory=provider_factory,
            error_clear_delay=error_clear_delay,
        )
        self._unsubscribe = None

    @property
    def controller(self) -> ChatController:
        return self._controller

    @property
    def view_model(self) -> ChatViewModel:
        return self._controller.view_model

    def compose(self) -> ComposeResult:
        yield Header()

        with Horizontal(id="toolbar"):
            yield Static(id="panel-title")
            yield Button("Settings", id="settings-btn", variant="default")

        yield MessageList(id="message-list")
        yield LoadingIndicator(id="spinner")
        yield ChatInputBar(id="chat-input-bar")
        yield Static(API_KEY_HINT, id="api-key-hint")
        yield ErrorBanner(id="error-banner")

        yield Footer()

    def on_mount(self) -> None:
        """Called when app is mounted."""
        self.register_theme(AICHAT_DARK)
        self.theme = "aichat-dark"

        self._unsubscribe = self.view_model.subscribe(self._render_state)
        # Settings are read once, when the panel starts
        self._controller.load_settings()
        self.query_one("#chat-input-bar", ChatInputBar).focus_input()

    def on_unmount(self) -> None:
        """Clean up resources when app exits."""
        if self._unsubscribe is not None:
            self._unsubscribe()
            self._unsubscribe = None
        self._controller.close()

    def _render_state(self, vm: ChatViewModel) -> None:
        """Project the view model onto the widgets."""
        title = TITLE_TEMPLATE.format(provider=vm.provider_name)
        self.sub_title = title
        self.query_one("#panel-title", Static).update(title)

        self.query_one("#message-list", MessageList).sync(vm.conversation)
        self.query_one("#spinner", LoadingIndicator).display = vm.loading
        self.query_one("#chat-input-bar", ChatInputBar).set_state(
            input_enabled=vm.input_enabled,
            can_send=vm.can_send,
        )
        self.query_one("#api-key-hint", Static).display = not vm.has_api_key
        self.query_one("#error-banner", ErrorBanner).show_error(vm.error)

    def on_input_changed(self, event: Input.Changed) -> None:
        if event.input.id == "chat-input":
            self.view_model.draft_changed(event.value)

    def on_chat_input_bar_submitted(self, event: ChatInputBar.Submitted) -> None:
        """Handle user input submission."""
        self._send(event.value)

    @work(group="send")
    async def _send(self, text: str) -> None:
        """Send the message as a background async worker."""
        await self._controller.send_message(text)

    def on_button_pressed(self, event: Button.Pressed) -> None:
        if event.button.id == "settings-btn":
            self.action_open_settings()

    def on_error_banner_dismissed(self, event: ErrorBanner.Dismissed) -> None:
        self._controller.dismiss_error()

    def action_open_settings(self) -> None:
        """Open the settings dialog."""
        self.push_screen(SettingsScreen(self.view_model.settings), self._on_settings_closed)

    def _on_settings_closed(self, result: Settings | None) -> None:
        if result is None:
            return
        try:
            self._controller.save_settings(result)
        except OSError as e:
            self.notify(f"Could not save settings: {e}", severity="error", timeout=5)
            return
        self.notify("Settings saved", timeout=2)

    def action_dismiss_error(self) -> None:
        self._controller.dismiss_error()


async def run_chat_panel(
    store: SettingsStore,
    provider_factory: ProviderFactory = create_llm_provider,
) -> None:
    """Run the Textual chat panel.

    Args:
        store: Settings store the panel loads from and saves to
        provider_factory: Builds the provider for each request
    """
    app = ChatPanelApp(store=store, provider_factory=provider_factory)
    with contextlib.suppress(KeyboardInterrupt, asyncio.CancelledError):
        await app.run_async()
