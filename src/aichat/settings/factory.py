"""Factory for creating settings stores."""

from typing import Any

from .base import SettingsStore


def create_settings_store(
    backend: str = "json",
    **kwargs: Any
) -> SettingsStore:
    """Create a settings store.

    Args:
        backend: Backend type ("json" or "memory")
        **kwargs: Backend-specific configuration

    Returns:
        SettingsStore instance

    Raises:
        ValueError: If backend type is not supported
    """
    if backend == "json":
        from .json_file import JSONFileSettingsStore
        return JSONFileSettingsStore(**kwargs)

    elif backend == "memory":
        from .in_memory import InMemorySettingsStore
        return InMemorySettingsStore(**kwargs)

    raise ValueError(
        f"Unsupported settings backend: {backend}. "
        f"Supported backends: json, memory"
    )
