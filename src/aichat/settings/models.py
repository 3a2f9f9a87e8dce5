"""Data models for persisted chat settings.

Independent of the storage backend used.
"""

from pydantic import BaseModel, ConfigDict, Field

from ..llm.catalog import DEFAULT_MODEL_ID, DEFAULT_PROVIDER_ID, first_model


class Settings(BaseModel):
    """Provider, model and API key used for completions."""

    model_config = ConfigDict(frozen=True)

    provider_id: str = Field(default=DEFAULT_PROVIDER_ID, description="Provider id from the catalog")
    model_id: str = Field(default=DEFAULT_MODEL_ID, description="Model id offered by the provider")
    api_key: str = Field(default="", repr=False, description="Bearer token for the provider")

    @property
    def has_api_key(self) -> bool:
        return bool(self.api_key)

    def with_provider(self, provider_id: str) -> "Settings":
        """Switch provider, resetting the model to the provider's first model.

        Unknown providers have no model list, so the model is left as is.
        """
        model_id = first_model(provider_id) or self.model_id
        return self.model_copy(update={"provider_id": provider_id, "model_id": model_id})

    def masked_api_key(self) -> str:
        """API key with everything but the last four characters hidden."""
        if not self.api_key:
            return ""
        if len(self.api_key) <= 4:
            return "*" * len(self.api_key)
        return "*" * (len(self.api_key) - 4) + self.api_key[-4:]
