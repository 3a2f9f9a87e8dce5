from .base import LLMProvider
from .catalog import (
    DEFAULT_MODEL_ID,
    DEFAULT_PROVIDER_ID,
    PROVIDERS,
    ProviderInfo,
    first_model,
    get_provider_info,
    provider_display_name,
    supports_model,
)
from .errors import ChatError, ProviderCallError, UnsupportedProviderError
from .factory import create_llm_provider
from .models import ChatMessage, LLMResponse
from .providers import OpenAIProvider

__all__ = [
    "DEFAULT_MODEL_ID",
    "DEFAULT_PROVIDER_ID",
    "PROVIDERS",
    "ChatError",
    "ChatMessage",
    "LLMProvider",
    "LLMResponse",
    "OpenAIProvider",
    "ProviderCallError",
    "ProviderInfo",
    "UnsupportedProviderError",
    "create_llm_provider",
    "first_model",
    "get_provider_info",
    "provider_display_name",
    "supports_model",
]
