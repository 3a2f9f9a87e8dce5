"""Errors surfaced to the chat panel.

Everything the conversation controller reports to the user derives from
ChatError. Anything else is a programming error and propagates.
"""


class ChatError(Exception):
    """Base class for errors shown in the chat error banner."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class UnsupportedProviderError(ChatError, ValueError):
    """Raised before any network access when the provider id is unknown."""

    def __init__(self, provider_id: str) -> None:
        super().__init__(f"Unsupported AI provider: {provider_id}")
        self.provider_id = provider_id


class ProviderCallError(ChatError):
    """Transport failure or non-success response from a completion endpoint."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code
