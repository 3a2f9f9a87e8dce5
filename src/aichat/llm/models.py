from typing import Literal

from pydantic import BaseModel, ConfigDict, Field


class ChatMessage(BaseModel):
    """Represents a chat message in a conversation."""

    model_config = ConfigDict(frozen=True)

    role: Literal["user", "assistant"] = Field(
        description="Role of the message sender: 'user' or 'assistant'"
    )
    content: str = Field(description="Content of the message")


class LLMResponse(BaseModel):
    """Response from an LLM provider."""

    model_config = ConfigDict(frozen=True)

    content: str = Field(description="Generated text content")
    model: str = Field(description="Model that generated the response")
    usage: dict[str, int] | None = Field(
        default=None,
        description="Token usage information"
    )

    def to_message(self) -> ChatMessage:
        """Wrap the generated content as an assistant message."""
        return ChatMessage(role="assistant", content=self.content)
