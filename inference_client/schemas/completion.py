"""Pydantic schemas for the plain completion endpoint."""

from __future__ import annotations

from typing import List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field


class TextPromptItem(BaseModel):
    model_config = ConfigDict(frozen=True)

    type: Literal["text"] = "text"
    data: str = Field(..., description="Text fed to the model")


class CompletionBody(BaseModel):
    """Request body sent to ``/complete``."""

    model: str = Field(..., description="Name of the model, e.g. 'luminous-base'")
    prompt: List[TextPromptItem] = Field(..., description="Prompt items, concatenated by the server")
    maximum_tokens: int = Field(..., description="Completion terminates after this many tokens")
    temperature: Optional[float] = None
    top_k: Optional[int] = None
    top_p: Optional[float] = None

    def to_payload(self) -> dict:
        return self.model_dump(mode="json", exclude_none=True)


class CompletionOutput(BaseModel):
    completion: str = Field(..., description="Generated text")
    finish_reason: str = Field(..., description="Why the model stopped generating")


class ResponseCompletion(BaseModel):
    model_version: str = Field(..., description="Version of the model that served the request")
    completions: List[CompletionOutput] = Field(..., description="Candidate completions, usually exactly one")
