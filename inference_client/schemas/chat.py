"""Pydantic schemas for the chat completion endpoint."""

from __future__ import annotations

from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class Role(str, Enum):
    """Author of a message within a conversation."""

    SYSTEM = "system"
    USER = "user"
    ASSISTANT = "assistant"


class Message(BaseModel):
    """A single turn of a conversation."""

    model_config = ConfigDict(frozen=True)

    role: Role = Field(..., description="Who authored the message")
    content: str = Field(..., description="Text of the message")


class ChatOutput(BaseModel):
    message: Message = Field(..., description="Message generated by the model")
    finish_reason: str = Field(..., description="Why the model stopped generating, e.g. 'maximum_tokens'")


class ResponseChat(BaseModel):
    choices: List[ChatOutput] = Field(..., description="Candidate answers, usually exactly one")


class ChatBody(BaseModel):
    """Request body sent to ``/chat/completions``.

    Optional parameters left as ``None`` are dropped when the body is dumped,
    the server then applies its own defaults.
    """

    model: str = Field(..., description="Name of the model, e.g. 'luminous-base'")
    messages: List[Message] = Field(..., description="Conversation so far, oldest message first")
    maximum_tokens: Optional[int] = Field(
        default=None,
        description="Limits the number of tokens generated for the answer.",
    )
    temperature: Optional[float] = Field(
        default=None,
        description=(
            "Divides the logits before sampling. 0 always picks the most likely token, "
            "higher values make the output more random. The server defaults to 1."
        ),
    )
    top_p: Optional[float] = Field(
        default=None,
        description=(
            "Nucleus sampling threshold: only the smallest set of tokens whose cumulative "
            "probability exceeds top_p is considered. The server defaults to 1."
        ),
    )

    def to_payload(self) -> dict:
        return self.model_dump(mode="json", exclude_none=True)
