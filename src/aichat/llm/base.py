"""Provider interface used by the chat controller."""

from abc import ABC, abstractmethod
from types import TracebackType

from .models import ChatMessage, LLMResponse


class LLMProvider(ABC):
    """A chat completion backend bound to one API key.

    The controller builds a provider per request and uses it as an async
    context manager, so the underlying HTTP client is released after the
    single call:

        async with create_llm_provider("openai", api_key=key) as provider:
            reply = await provider.chat_completion(history)

    Implementations turn every transport or HTTP failure into
    ProviderCallError; they never retry.
    """

    @abstractmethod
    async def chat_completion(
        self,
        messages: list[ChatMessage],
        model: str | None = None,
        temperature: float = 0.7,
    ) -> LLMResponse:
        """Send the whole conversation and return the assistant's reply.

        Args:
            messages: Conversation so far, oldest first
            model: Model id; the provider's default when None

        Raises:
            ProviderCallError: The request failed or was rejected
        """

    @abstractmethod
    async def close(self) -> None:
        """Release the HTTP client."""

    async def __aenter__(self) -> "LLMProvider":
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        try:
            await self.close()
        except RuntimeError as e:
            # httpx may close its pool after the loop is gone at shutdown
            if "Event loop is closed" not in str(e):
                raise
