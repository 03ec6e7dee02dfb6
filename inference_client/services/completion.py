"""Completion task: continue a prompt with generated text."""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar, Optional, Tuple, Type

import httpx

from inference_client.schemas.completion import (
    CompletionBody,
    CompletionOutput,
    ResponseCompletion,
    TextPromptItem,
)
from inference_client.services.task import Task


@dataclass(frozen=True, slots=True)
class Prompt:
    """Ordered prompt items sent to the model."""

    items: Tuple[TextPromptItem, ...]

    @classmethod
    def from_text(cls, text: str) -> Prompt:
        return cls(items=(TextPromptItem(data=text),))


@dataclass(frozen=True, slots=True)
class Sampling:
    """Controls how the next token is picked from the model's distribution."""

    temperature: Optional[float] = None
    top_k: Optional[int] = None
    top_p: Optional[float] = None

    MOST_LIKELY: ClassVar[Sampling]


# No sampling parameters at all: the server always picks the most likely token.
Sampling.MOST_LIKELY = Sampling()


@dataclass(frozen=True, slots=True)
class TaskCompletion(Task[ResponseCompletion, CompletionOutput]):
    """Parameters of a completion request."""

    prompt: Prompt
    maximum_tokens: int
    sampling: Sampling = Sampling.MOST_LIKELY

    response_model: ClassVar[Type[ResponseCompletion]] = ResponseCompletion

    @classmethod
    def from_text(cls, text: str, maximum_tokens: int, sampling: Sampling = Sampling.MOST_LIKELY) -> TaskCompletion:
        return cls(prompt=Prompt.from_text(text), maximum_tokens=maximum_tokens, sampling=sampling)

    def build_request(self, client: httpx.AsyncClient, base_url: str, model: str) -> httpx.Request:
        body = CompletionBody(
            model=model,
            prompt=list(self.prompt.items),
            maximum_tokens=self.maximum_tokens,
            temperature=self.sampling.temperature,
            top_k=self.sampling.top_k,
            top_p=self.sampling.top_p,
        )
        return client.build_request("POST", f"{base_url}/complete", json=body.to_payload())

    def body_to_output(self, response: ResponseCompletion) -> CompletionOutput:
        return response.completions.pop()
