"""Pytest configuration and shared fixtures."""
import os
from collections.abc import Awaitable, Callable

import httpx
import pytest

from aichat.llm import create_llm_provider
from aichat.settings import InMemorySettingsStore

Responder = Callable[[httpx.Request], httpx.Response | Awaitable[httpx.Response]]


def completion_payload(content: str, model: str = "gpt-3.5-turbo") -> dict:
    """Body of a successful chat completion."""
    return {
        "id": "chatcmpl-test",
        "object": "chat.completion",
        "created": 1700000000,
        "model": model,
        "choices": [
            {
                "index": 0,
                "message": {"role": "assistant", "content": content},
                "finish_reason": "stop",
            }
        ],
        "usage": {"prompt_tokens": 5, "completion_tokens": 1, "total_tokens": 6},
    }


class RecordingTransport:
    """Mock OpenAI endpoint that records every request it receives."""

    def __init__(self, responder: Responder) -> None:
        self.requests: list[httpx.Request] = []
        self._responder = responder

    def _handle(self, request: httpx.Request):
        self.requests.append(request)
        return self._responder(request)

    def client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(transport=httpx.MockTransport(self._handle))

    def provider_factory(self):
        """Provider factory routing every provider through this transport."""
        def factory(provider_id: str, **config):
            return create_llm_provider(provider_id, http_client=self.client(), **config)
        return factory


@pytest.fixture
def make_transport() -> Callable[[Responder], RecordingTransport]:
    """Build a RecordingTransport from a responder function."""
    return RecordingTransport


@pytest.fixture
def reply_transport(make_transport) -> Callable[[str], RecordingTransport]:
    """Transport answering every request with the given assistant content."""
    def _build(content: str) -> RecordingTransport:
        return make_transport(lambda request: httpx.Response(200, json=completion_payload(content)))
    return _build


@pytest.fixture
def error_transport(make_transport) -> Callable[..., RecordingTransport]:
    """Transport answering every request with the given status and body."""
    def _build(status_code: int, **response_kwargs) -> RecordingTransport:
        return make_transport(lambda request: httpx.Response(status_code, **response_kwargs))
    return _build


@pytest.fixture
def keyed_store() -> InMemorySettingsStore:
    """Store holding a usable API key and the default provider/model."""
    return InMemorySettingsStore({"api_key": "sk-test"})


@pytest.fixture(scope="session")
def api_keys():
    """Return API keys from environment."""
    return {
        "openai": os.getenv("OPENAI_API_KEY"),
    }


@pytest.fixture
def completion_body() -> Callable[..., dict]:
    """Builder for successful chat completion bodies."""
    return completion_payload
