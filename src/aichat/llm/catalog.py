"""Static catalog of supported providers and their models.

Hides which providers exist, what they are called and which models they
offer. Read-only; the settings form and the provider factory both consult it.
"""

from pydantic import BaseModel, ConfigDict, Field

DEFAULT_PROVIDER_ID = "openai"
DEFAULT_MODEL_ID = "gpt-3.5-turbo"
UNKNOWN_PROVIDER_NAME = "AI"


class ProviderInfo(BaseModel):
    """Display name, models and endpoint of one provider."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(description="Provider identifier stored in settings")
    name: str = Field(description="Human readable provider name")
    models: tuple[str, ...] = Field(min_length=1, description="Supported model ids, default first")
    base_url: str = Field(description="API base URL")


PROVIDERS: tuple[ProviderInfo, ...] = (
    ProviderInfo(
        id="openai",
        name="OpenAI",
        models=("gpt-3.5-turbo", "gpt-4", "gpt-4-turbo"),
        base_url="https://api.openai.com/v1",
    ),
)

_BY_ID = {provider.id: provider for provider in PROVIDERS}


def get_provider_info(provider_id: str) -> ProviderInfo | None:
    """Look up a provider, returning None for unknown ids."""
    return _BY_ID.get(provider_id)


def provider_display_name(provider_id: str) -> str:
    info = get_provider_info(provider_id)
    return info.name if info else UNKNOWN_PROVIDER_NAME


def first_model(provider_id: str) -> str | None:
    """Default model of a provider, or None if the provider is unknown."""
    info = get_provider_info(provider_id)
    return info.models[0] if info else None


def supports_model(provider_id: str, model_id: str) -> bool:
    info = get_provider_info(provider_id)
    return info is not None and model_id in info.models
