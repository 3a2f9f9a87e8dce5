"""Settings module for aichat.

Persists the provider, model and API key between sessions.
"""

from .base import API_KEY_KEY, MODEL_KEY, PROVIDER_KEY, SettingsStore
from .factory import create_settings_store
from .in_memory import InMemorySettingsStore
from .json_file import DEFAULT_SETTINGS_PATH, JSONFileSettingsStore
from .models import Settings

__all__ = [
    "API_KEY_KEY",
    "DEFAULT_SETTINGS_PATH",
    "MODEL_KEY",
    "PROVIDER_KEY",
    "InMemorySettingsStore",
    "JSONFileSettingsStore",
    "Settings",
    "SettingsStore",
    "create_settings_store",
]
