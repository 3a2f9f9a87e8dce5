"""In-memory settings store.

Simple dict-based storage for session-only settings.
Data is lost when the application exits.
"""

from .base import SettingsStore, settings_from_entries, settings_to_entries
from .models import Settings


class InMemorySettingsStore(SettingsStore):
    """In-memory settings store (session-only).

    Suitable for single-session use or testing.
    """

    def __init__(self, entries: dict[str, str] | None = None):
        self._entries: dict[str, str] = dict(entries or {})

    def load(self) -> Settings:
        return settings_from_entries(self._entries)

    def save(self, settings: Settings) -> None:
        self._entries.update(settings_to_entries(settings))

    @property
    def entries(self) -> dict[str, str]:
        """Copy of the raw stored entries."""
        return dict(self._entries)

    @property
    def backend_type(self) -> str:
        return "memory"
