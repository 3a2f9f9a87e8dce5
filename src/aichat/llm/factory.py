import logging
from typing import Any

from .base import LLMProvider
from .errors import UnsupportedProviderError
from .providers import OpenAIProvider

logger = logging.getLogger(__name__)


def create_llm_provider(provider: str, **config: Any) -> LLMProvider:
    """Create an LLM provider instance.

    This factory function hides the instantiation logic for different providers.
    It fails before any client is constructed, so an unsupported provider
    never reaches the network.

    Args:
        provider: Provider id from the catalog (only 'openai' is supported)
        **config: Provider-specific configuration
            For OpenAI:
                - api_key: str (required)
                - model: str (default: 'gpt-3.5-turbo')
                - base_url: str (default: 'https://api.openai.com/v1')
                - any other AsyncOpenAI keyword (e.g. http_client)

    Returns:
        Initialized LLM provider instance

    Raises:
        UnsupportedProviderError: If provider type is not supported
        TypeError: If required configuration is missing

    Examples:
        >>> provider = create_llm_provider(
        ...     "openai",
        ...     api_key="sk-...",
        ...     model="gpt-4"
        ... )
    """
    if provider == "openai":
        if "api_key" not in config:
            raise TypeError("OpenAI provider requires 'api_key' in config")
        return OpenAIProvider(**config)

    logger.info("Rejected unsupported provider %r", provider)
    raise UnsupportedProviderError(provider)
