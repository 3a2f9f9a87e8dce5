"""Unit tests for the chat module."""
import asyncio
import json

import httpx
import pytest

from aichat.chat import ERROR_CLEAR_DELAY_SECONDS, ChatController, ChatViewModel
from aichat.llm import ChatMessage
from aichat.settings import InMemorySettingsStore, Settings

USER_HI = ChatMessage(role="user", content="hi")
ASSISTANT_HELLO = ChatMessage(role="assistant", content="hello")


class TestChatViewModel:
    """Tests for view-model transitions and derived state."""

    def test_initial_state(self):
        vm = ChatViewModel()
        assert vm.settings == Settings()
        assert vm.conversation == ()
        assert vm.draft == ""
        assert not vm.loading
        assert vm.error is None
        assert vm.provider_name == "OpenAI"

    def test_input_requires_api_key(self):
        vm = ChatViewModel()
        vm.draft_changed("hi")
        assert not vm.input_enabled
        assert not vm.can_send

        vm.settings_changed(Settings(api_key="sk-test"))
        assert vm.input_enabled
        assert vm.can_send

    def test_blank_draft_cannot_be_sent(self):
        vm = ChatViewModel(Settings(api_key="sk-test"))
        vm.draft_changed("   ")
        assert vm.input_enabled
        assert not vm.can_send

    def test_message_sent_disables_input(self):
        vm = ChatViewModel(Settings(api_key="sk-test"))
        vm.draft_changed("hi")
        vm.message_sent(USER_HI)

        assert vm.conversation == (USER_HI,)
        assert vm.loading
        assert vm.draft == ""
        assert not vm.input_enabled

        vm.response_received(ASSISTANT_HELLO)
        vm.request_finished()
        assert vm.conversation == (USER_HI, ASSISTANT_HELLO)
        assert vm.input_enabled

    def test_error_transitions(self):
        vm = ChatViewModel()
        vm.error_raised("bad key")
        assert vm.error == "bad key"
        vm.error_cleared()
        assert vm.error is None

    def test_unknown_provider_name(self):
        vm = ChatViewModel(Settings(provider_id="unsupported"))
        assert vm.provider_name == "AI"

    def test_conversation_cannot_be_mutated_from_outside(self):
        vm = ChatViewModel()
        vm.message_sent(USER_HI)
        with pytest.raises(AttributeError):
            vm.conversation.append(ASSISTANT_HELLO)  # type: ignore[attr-defined]

    def test_subscribers_notified_per_transition(self):
        vm = ChatViewModel()
        seen: list[int] = []
        unsubscribe = vm.subscribe(lambda model: seen.append(len(model.conversation)))

        vm.message_sent(USER_HI)
        vm.response_received(ASSISTANT_HELLO)
        unsubscribe()
        vm.request_finished()

        assert seen == [1, 2]

    def test_unchanged_draft_does_not_notify(self):
        vm = ChatViewModel()
        calls: list[str] = []
        vm.subscribe(lambda model: calls.append(model.draft))
        vm.draft_changed("")
        vm.draft_changed("a")
        vm.draft_changed("a")
        assert calls == ["a"]


class TestControllerSettings:
    """Tests for loading and saving settings through the controller."""

    def test_load_applies_to_view_model(self):
        store = InMemorySettingsStore({"ai_model": "gpt-4", "api_key": "sk-test"})
        controller = ChatController(store)

        settings = controller.load_settings()

        assert settings == Settings(model_id="gpt-4", api_key="sk-test")
        assert controller.view_model.settings == settings

    def test_save_persists_and_applies(self):
        store = InMemorySettingsStore()
        controller = ChatController(store)
        new_settings = Settings(model_id="gpt-4-turbo", api_key="sk-new")

        controller.save_settings(new_settings)

        assert store.load() == new_settings
        assert controller.view_model.settings == new_settings


class TestSendMessage:
    """Tests for ChatController.send_message."""

    def _controller(self, store, transport, **kwargs) -> ChatController:
        controller = ChatController(store, provider_factory=transport.provider_factory(), **kwargs)
        controller.load_settings()
        return controller

    @pytest.mark.asyncio
    async def test_successful_exchange(self, keyed_store, reply_transport):
        """The user message and the reply end up in history, in order."""
        transport = reply_transport("hello")
        controller = self._controller(keyed_store, transport)

        reply = await controller.send_message("hi")

        assert reply == ASSISTANT_HELLO
        assert controller.view_model.conversation == (USER_HI, ASSISTANT_HELLO)
        assert not controller.view_model.loading
        assert controller.view_model.error is None
        assert len(transport.requests) == 1

    @pytest.mark.asyncio
    async def test_history_sent_with_each_request(self, keyed_store, reply_transport):
        transport = reply_transport("hello")
        controller = self._controller(keyed_store, transport)

        await controller.send_message("hi")
        await controller.send_message("again")

        body = json.loads(transport.requests[-1].content)
        assert body["messages"] == [
            {"role": "user", "content": "hi"},
            {"role": "assistant", "content": "hello"},
            {"role": "user", "content": "again"},
        ]
        assert body["model"] == "gpt-3.5-turbo"

    @pytest.mark.asyncio
    @pytest.mark.parametrize("text", ["", "   ", "\n\t"])
    async def test_blank_text_is_noop(self, keyed_store, reply_transport, text):
        transport = reply_transport("hello")
        controller = self._controller(keyed_store, transport)

        assert await controller.send_message(text) is None
        assert controller.view_model.conversation == ()
        assert controller.view_model.error is None
        assert transport.requests == []

    @pytest.mark.asyncio
    async def test_missing_api_key_is_noop(self, reply_transport):
        transport = reply_transport("hello")
        controller = self._controller(InMemorySettingsStore(), transport)

        assert await controller.send_message("hi") is None
        assert controller.view_model.conversation == ()
        assert controller.view_model.error is None
        assert transport.requests == []

    @pytest.mark.asyncio
    async def test_provider_error_keeps_user_message(self, keyed_store, error_transport):
        """The error carries error.message; the user message is not rolled back."""
        transport = error_transport(401, json={"error": {"message": "bad key"}})
        controller = self._controller(keyed_store, transport)

        reply = await controller.send_message("hi")

        assert reply is None
        assert controller.view_model.error == "bad key"
        assert controller.view_model.conversation == (USER_HI,)
        assert not controller.view_model.loading
        assert len(transport.requests) == 1
        controller.close()

    @pytest.mark.asyncio
    async def test_unsupported_provider_fails_without_network(self, reply_transport):
        transport = reply_transport("hello")
        store = InMemorySettingsStore({"ai_provider": "unsupported", "api_key": "sk-test"})
        controller = self._controller(store, transport)

        reply = await controller.send_message("hi")

        assert reply is None
        assert controller.view_model.error == "Unsupported AI provider: unsupported"
        assert controller.view_model.conversation == (USER_HI,)
        assert transport.requests == []
        controller.close()

    @pytest.mark.asyncio
    async def test_transport_error_surfaces(self, keyed_store, make_transport):
        def refuse(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("connection refused", request=request)

        controller = self._controller(keyed_store, make_transport(refuse))

        assert await controller.send_message("hi") is None
        assert controller.view_model.error
        assert controller.view_model.conversation == (USER_HI,)
        controller.close()

    @pytest.mark.asyncio
    async def test_conversation_usable_after_error(
        self, keyed_store, make_transport, completion_body
    ):
        """A failure is not fatal: the next send works normally."""
        from aichat.llm.providers.openai import GENERIC_FAILURE_MESSAGE

        responses = iter([
            httpx.Response(503, text="unavailable"),
            httpx.Response(200, json=completion_body("hello")),
        ])
        controller = self._controller(keyed_store, make_transport(lambda request: next(responses)))

        await controller.send_message("hi")
        assert controller.view_model.error == GENERIC_FAILURE_MESSAGE

        reply = await controller.send_message("hi")
        assert reply == ASSISTANT_HELLO
        assert controller.view_model.conversation == (USER_HI, USER_HI, ASSISTANT_HELLO)
        controller.close()

    @pytest.mark.asyncio
    async def test_second_send_while_in_flight_is_noop(
        self, keyed_store, make_transport, completion_body
    ):
        """Only one request may be outstanding; nothing is queued."""
        release = asyncio.Event()

        async def held_reply(request: httpx.Request) -> httpx.Response:
            await release.wait()
            return httpx.Response(200, json=completion_body("hello"))

        transport = make_transport(held_reply)
        controller = self._controller(keyed_store, transport)

        first = asyncio.create_task(controller.send_message("hi"))
        while not transport.requests:
            await asyncio.sleep(0.01)
        assert controller.view_model.loading

        assert await controller.send_message("second") is None
        release.set()
        await first

        assert controller.view_model.conversation == (USER_HI, ASSISTANT_HELLO)
        assert len(transport.requests) == 1


class TestErrorBanner:
    """Tests for automatic and manual error clearing."""

    async def _fail(self, controller: ChatController) -> None:
        await controller.send_message("hi")
        assert controller.view_model.error is not None

    def _unsupported_controller(self, delay: float) -> ChatController:
        store = InMemorySettingsStore({"ai_provider": "unsupported", "api_key": "sk-test"})
        controller = ChatController(store, error_clear_delay=delay)
        controller.load_settings()
        return controller

    @pytest.mark.asyncio
    async def test_error_clears_after_delay(self):
        controller = self._unsupported_controller(0.05)
        await self._fail(controller)

        await asyncio.sleep(0.15)

        assert controller.view_model.error is None

    @pytest.mark.asyncio
    async def test_newer_error_not_cleared_by_older_timer(self):
        controller = self._unsupported_controller(0.3)
        await self._fail(controller)
        await asyncio.sleep(0.2)

        controller.view_model.settings_changed(Settings(provider_id="other", api_key="sk-test"))
        await self._fail(controller)
        assert controller.view_model.error == "Unsupported AI provider: other"

        # Past the first error's deadline, before the second's
        await asyncio.sleep(0.2)
        assert controller.view_model.error == "Unsupported AI provider: other"

        await asyncio.sleep(0.3)
        assert controller.view_model.error is None

    @pytest.mark.asyncio
    async def test_default_delay_is_five_seconds(self):
        store = InMemorySettingsStore({"ai_provider": "unsupported", "api_key": "sk-test"})
        controller = ChatController(store)
        controller.load_settings()
        await self._fail(controller)

        remaining = controller._error_timer.when() - asyncio.get_running_loop().time()

        assert ERROR_CLEAR_DELAY_SECONDS == 5.0
        assert remaining == pytest.approx(5.0, abs=0.5)
        assert controller.view_model.error is not None
        controller.close()

    @pytest.mark.asyncio
    async def test_dismiss_error(self):
        controller = self._unsupported_controller(10)
        await self._fail(controller)

        controller.dismiss_error()

        assert controller.view_model.error is None
        controller.close()
