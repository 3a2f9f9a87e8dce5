import logging
from typing import Any

import openai
from openai import AsyncOpenAI

from ..base import LLMProvider
from ..catalog import DEFAULT_MODEL_ID, get_provider_info
from ..errors import ProviderCallError
from ..models import ChatMessage, LLMResponse

logger = logging.getLogger(__name__)

GENERIC_FAILURE_MESSAGE = "OpenAI request failed"
DEFAULT_BASE_URL = get_provider_info("openai").base_url


def _error_message_from_response(error: openai.APIStatusError) -> str:
    """Pull ``error.message`` out of a failed response body.

    Falls back to the generic failure string when the body is not JSON or
    carries no message.
    """
    try:
        payload = error.response.json()
    except ValueError:
        return GENERIC_FAILURE_MESSAGE

    if isinstance(payload, dict):
        detail = payload.get("error")
        if isinstance(detail, dict):
            message = detail.get("message")
            if isinstance(message, str) and message:
                return message
    return GENERIC_FAILURE_MESSAGE


def _usage_dict(completion: Any) -> dict[str, int] | None:
    if not completion.usage:
        return None
    return completion.usage.model_dump(
        include={"prompt_tokens", "completion_tokens", "total_tokens"}
    )


class OpenAIProvider(LLMProvider):
    """Chat completions through the official OpenAI SDK.

    Each completion is exactly one POST to ``<base_url>/chat/completions``
    with a bearer token. The SDK's own retries are switched off and no
    timeout is imposed beyond the transport default.
    """

    def __init__(
        self,
        api_key: str,
        model: str = DEFAULT_MODEL_ID,
        base_url: str = DEFAULT_BASE_URL,
        **client_kwargs: Any
    ):
        """
        Args:
            api_key: Sent as ``Authorization: Bearer <api_key>``
            model: Model used when chat_completion is not given one
            base_url: Endpoint root
            **client_kwargs: Passed to AsyncOpenAI (tests inject ``http_client``)
        """
        self._model = model
        client_kwargs.setdefault("max_retries", 0)
        self._client = AsyncOpenAI(api_key=api_key, base_url=base_url, **client_kwargs)

    @property
    def model(self) -> str:
        return self._model

    async def chat_completion(
        self,
        messages: list[ChatMessage],
        model: str | None = None,
        temperature: float = 0.7,
    ) -> LLMResponse:
        """Post the conversation and return ``choices[0].message.content``.

        Raises:
            ProviderCallError: Non-2xx status (with ``error.message`` when the
                body has one), transport failure, or a reply without choices
        """
        model_id = model or self._model
        payload = [message.model_dump() for message in messages]
        logger.debug("Requesting completion: model=%s messages=%d", model_id, len(payload))

        try:
            completion = await self._client.chat.completions.create(
                model=model_id,
                messages=payload,
                temperature=temperature,
            )
        except openai.APIStatusError as e:
            message = _error_message_from_response(e)
            logger.warning("OpenAI returned HTTP %s: %s", e.status_code, message)
            raise ProviderCallError(message, status_code=e.status_code) from e
        except openai.APIConnectionError as e:
            logger.warning("OpenAI transport error: %s", e)
            raise ProviderCallError(str(e) or GENERIC_FAILURE_MESSAGE) from e
        except openai.APIError as e:
            logger.warning("OpenAI request failed: %s", e)
            raise ProviderCallError(GENERIC_FAILURE_MESSAGE) from e

        if not completion.choices:
            raise ProviderCallError(GENERIC_FAILURE_MESSAGE)

        return LLMResponse(
            content=completion.choices[0].message.content or "",
            model=completion.model or model_id,
            usage=_usage_dict(completion),
        )

    async def close(self) -> None:
        await self._client.close()
