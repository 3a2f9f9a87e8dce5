"""Conversation controller.

Hides the send flow: validating input, calling the configured provider with
the conversation so far, and turning failures into a self-clearing error.
"""

import asyncio
import logging
from collections.abc import Callable
from typing import Any

from ..llm import ChatError, ChatMessage, LLMProvider, create_llm_provider
from ..settings import Settings, SettingsStore
from .view_model import ChatViewModel

logger = logging.getLogger(__name__)

ERROR_CLEAR_DELAY_SECONDS = 5.0
DEFAULT_TEMPERATURE = 0.7

ProviderFactory = Callable[..., LLMProvider]


class ChatController:
    """Drives a ChatViewModel from user actions.

    Settings come from an injected SettingsStore; providers are built per
    request by ``provider_factory`` (``create_llm_provider`` by default),
    which keeps the network out of tests and unsupported providers off it.

    Example:
        controller = ChatController(create_settings_store("memory"))
        controller.load_settings()
        reply = await controller.send_message("hi")
    """

    def __init__(
        self,
        store: SettingsStore,
        view_model: ChatViewModel | None = None,
        provider_factory: ProviderFactory = create_llm_provider,
        error_clear_delay: float = ERROR_CLEAR_DELAY_SECONDS,
        temperature: float = DEFAULT_TEMPERATURE,
    ) -> None:
        self._store = store
        self._view_model = view_model or ChatViewModel()
        self._provider_factory = provider_factory
        self._error_clear_delay = error_clear_delay
        self._temperature = temperature
        self._error_timer: asyncio.TimerHandle | None = None

    @property
    def view_model(self) -> ChatViewModel:
        return self._view_model

    # -- settings ---------------------------------------------------------

    def load_settings(self) -> Settings:
        """Load persisted settings into the view model."""
        settings = self._store.load()
        self._view_model.settings_changed(settings)
        return settings

    def save_settings(self, settings: Settings) -> None:
        """Persist settings, then apply them to the view model."""
        self._store.save(settings)
        self._view_model.settings_changed(settings)
        logger.info(
            "Settings saved: provider=%s model=%s backend=%s",
            settings.provider_id, settings.model_id, self._store.backend_type,
        )

    # -- conversation -----------------------------------------------------

    async def send_message(self, text: str) -> ChatMessage | None:
        """Send ``text`` with the conversation so far to the provider.

        Blank text, a missing API key or a request already in flight make
        this a no-op. On failure the error is shown and the user message
        stays in the conversation; nothing is retried.

        Returns:
            The assistant reply, or None if nothing was received
        """
        vm = self._view_model
        settings = vm.settings
        if not text.strip() or not settings.has_api_key or vm.loading:
            return None

        vm.message_sent(ChatMessage(role="user", content=text))
        history = list(vm.conversation)

        try:
            reply = await self._complete(history, settings)
            vm.response_received(reply)
            return reply
        except ChatError as e:
            logger.error("Error calling the API: %s", e.message)
            self._show_error(e.message)
            return None
        finally:
            vm.request_finished()

    async def _complete(self, history: list[ChatMessage], settings: Settings) -> ChatMessage:
        provider_config: dict[str, Any] = {
            "api_key": settings.api_key,
            "model": settings.model_id,
        }
        provider = self._provider_factory(settings.provider_id, **provider_config)
        async with provider:
            response = await provider.chat_completion(
                history,
                model=settings.model_id,
                temperature=self._temperature,
            )
        logger.debug("Received %d characters from %s", len(response.content), response.model)
        return response.to_message()

    # -- error banner -----------------------------------------------------

    def _show_error(self, message: str) -> None:
        self._cancel_error_timer()
        self._view_model.error_raised(message)
        loop = asyncio.get_running_loop()
        self._error_timer = loop.call_later(self._error_clear_delay, self._clear_error)

    def _clear_error(self) -> None:
        self._error_timer = None
        self._view_model.error_cleared()

    def _cancel_error_timer(self) -> None:
        if self._error_timer is not None:
            self._error_timer.cancel()
            self._error_timer = None

    def dismiss_error(self) -> None:
        """Clear the error banner now instead of waiting for the timer."""
        self._cancel_error_timer()
        if self._view_model.error is not None:
            self._view_model.error_cleared()

    def close(self) -> None:
        """Cancel pending timers."""
        self._cancel_error_timer()
