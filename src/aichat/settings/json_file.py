"""JSON file settings store.

Keeps the settings as a single JSON object in the user's config directory,
so they survive restarts of the client.
"""

import json
import logging
import os
import tempfile
from pathlib import Path

from .base import SettingsStore, settings_from_entries, settings_to_entries
from .models import Settings

logger = logging.getLogger(__name__)

DEFAULT_SETTINGS_PATH = Path.home() / ".config" / "aichat" / "settings.json"


class JSONFileSettingsStore(SettingsStore):
    """Settings persisted to a JSON file.

    Writes are atomic (temporary file + replace) and the file is only
    readable by its owner since it holds the API key. Keys this store does
    not manage are left untouched on save.
    """

    def __init__(self, path: str | Path = DEFAULT_SETTINGS_PATH):
        self._path = Path(path).expanduser()

    def _read_entries(self) -> dict[str, object]:
        if not self._path.exists():
            return {}

        try:
            with open(self._path, encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, ValueError) as e:
            logger.warning("Could not read settings from %s: %s", self._path, e)
            return {}

        if not isinstance(data, dict):
            logger.warning("Ignoring settings file %s: expected a JSON object", self._path)
            return {}
        return data

    def load(self) -> Settings:
        settings = settings_from_entries(self._read_entries())
        logger.debug(
            "Loaded settings from %s: provider=%s model=%s",
            self._path, settings.provider_id, settings.model_id,
        )
        return settings

    def save(self, settings: Settings) -> None:
        entries = self._read_entries()
        entries.update(settings_to_entries(settings))

        self._path.parent.mkdir(parents=True, exist_ok=True)
        # mkstemp creates the file with mode 0600
        fd, tmp_name = tempfile.mkstemp(
            prefix=f".{self._path.name}.", suffix=".tmp", dir=self._path.parent
        )
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                json.dump(entries, f, indent=2, ensure_ascii=False)
            os.replace(tmp_name, self._path)
        except BaseException:
            Path(tmp_name).unlink(missing_ok=True)
            raise

        logger.info("Saved settings to %s", self._path)

    @property
    def backend_type(self) -> str:
        return "json"

    @property
    def path(self) -> Path:
        return self._path
