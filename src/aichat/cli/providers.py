"""Factory functions for CLI.

Centralizes creation of the settings store and controller from command
options and environment variables. Hides configuration details from command
implementations.
"""

import os
from enum import Enum
from pathlib import Path

from ..chat import ChatController
from ..settings import DEFAULT_SETTINGS_PATH, SettingsStore, create_settings_store

SETTINGS_PATH_ENV = "AICHAT_SETTINGS_PATH"
LOG_LEVEL_ENV = "AICHAT_LOG_LEVEL"


class StoreBackend(str, Enum):
    """Where settings are kept."""

    JSON = "json"
    MEMORY = "memory"


def resolve_settings_path(path: Path | None = None) -> Path:
    """Settings file from the option, then AICHAT_SETTINGS_PATH, then the default."""
    if path is not None:
        return path
    env_path = os.getenv(SETTINGS_PATH_ENV)
    return Path(env_path) if env_path else DEFAULT_SETTINGS_PATH


def get_store(
    backend: StoreBackend = StoreBackend.JSON,
    path: Path | None = None,
) -> SettingsStore:
    """Create the settings store.

    Args:
        backend: Store backend
        path: Settings file for the json backend

    Environment variables:
        AICHAT_SETTINGS_PATH: Settings file (default: ~/.config/aichat/settings.json)
    """
    if backend == StoreBackend.MEMORY:
        return create_settings_store("memory")
    return create_settings_store("json", path=resolve_settings_path(path))


def get_controller(
    backend: StoreBackend = StoreBackend.JSON,
    path: Path | None = None,
) -> ChatController:
    """Create a controller with settings already loaded."""
    controller = ChatController(get_store(backend, path))
    controller.load_settings()
    return controller
