"""Abstract base class for settings stores.

The abstraction hides:
- Storage format (JSON file, in-memory dict)
- Where the values live and how they are keyed
"""

from abc import ABC, abstractmethod

from .models import Settings

# Keys of the three persisted entries
PROVIDER_KEY = "ai_provider"
MODEL_KEY = "ai_model"
API_KEY_KEY = "api_key"


def settings_from_entries(entries: dict[str, object]) -> Settings:
    """Build settings from raw key-value entries.

    Missing, empty or non-string entries fall back to their defaults.
    """
    defaults = Settings()

    def _entry(key: str, default: str) -> str:
        value = entries.get(key)
        if isinstance(value, str) and value:
            return value
        return default

    return Settings(
        provider_id=_entry(PROVIDER_KEY, defaults.provider_id),
        model_id=_entry(MODEL_KEY, defaults.model_id),
        api_key=_entry(API_KEY_KEY, defaults.api_key),
    )


def settings_to_entries(settings: Settings) -> dict[str, str]:
    return {
        PROVIDER_KEY: settings.provider_id,
        MODEL_KEY: settings.model_id,
        API_KEY_KEY: settings.api_key,
    }


class SettingsStore(ABC):
    """Persistent key-value store for the three chat settings.

    Loading never fails on absent values: a store with nothing saved
    yields the defaults.
    """

    @abstractmethod
    def load(self) -> Settings:
        """Read the persisted settings, defaulting any missing entry."""

    @abstractmethod
    def save(self, settings: Settings) -> None:
        """Write all three values."""

    @property
    @abstractmethod
    def backend_type(self) -> str:
        """Get the backend type identifier."""
