"""Typed view state of the chat panel.

Hides how the panel's state is held. Widgets read it; only the named
transitions below change it, and every transition notifies subscribers so
the view can re-render.
"""

from collections.abc import Callable

from ..llm.catalog import provider_display_name
from ..llm.models import ChatMessage
from ..settings.models import Settings

Listener = Callable[["ChatViewModel"], None]


class ChatViewModel:
    """Settings, conversation, draft, in-flight flag and error banner."""

    def __init__(self, settings: Settings | None = None) -> None:
        self._settings = settings or Settings()
        self._conversation: list[ChatMessage] = []
        self._draft = ""
        self._loading = False
        self._error: str | None = None
        self._listeners: list[Listener] = []

    # -- read-only state -------------------------------------------------

    @property
    def settings(self) -> Settings:
        return self._settings

    @property
    def conversation(self) -> tuple[ChatMessage, ...]:
        return tuple(self._conversation)

    @property
    def draft(self) -> str:
        return self._draft

    @property
    def loading(self) -> bool:
        return self._loading

    @property
    def error(self) -> str | None:
        return self._error

    @property
    def provider_name(self) -> str:
        return provider_display_name(self._settings.provider_id)

    @property
    def has_api_key(self) -> bool:
        return self._settings.has_api_key

    @property
    def input_enabled(self) -> bool:
        """The input accepts text only with an API key and nothing in flight."""
        return self.has_api_key and not self._loading

    @property
    def can_send(self) -> bool:
        return self.input_enabled and bool(self._draft.strip())

    # -- observers -------------------------------------------------------

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Register a listener called after every transition.

        Returns a function that removes the listener again.
        """
        self._listeners.append(listener)

        def _unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return _unsubscribe

    def _notify(self) -> None:
        for listener in list(self._listeners):
            listener(self)

    # -- transitions -----------------------------------------------------

    def settings_changed(self, settings: Settings) -> None:
        self._settings = settings
        self._notify()

    def draft_changed(self, text: str) -> None:
        if text == self._draft:
            return
        self._draft = text
        self._notify()

    def message_sent(self, message: ChatMessage) -> None:
        """Append the user's message and mark a request in flight."""
        self._conversation.append(message)
        self._draft = ""
        self._loading = True
        self._notify()

    def response_received(self, message: ChatMessage) -> None:
        self._conversation.append(message)
        self._notify()

    def request_finished(self) -> None:
        self._loading = False
        self._notify()

    def error_raised(self, message: str) -> None:
        self._error = message
        self._notify()

    def error_cleared(self) -> None:
        self._error = None
        self._notify()
