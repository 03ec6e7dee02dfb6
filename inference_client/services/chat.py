"""Chat task: a multi-turn conversation completed by the model."""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import ClassVar, Optional, Tuple, Type, Union

import httpx

from inference_client.schemas.chat import ChatBody, ChatOutput, Message, ResponseChat, Role
from inference_client.services.task import Task


@dataclass(frozen=True, slots=True)
class TaskChat(Task[ResponseChat, ChatOutput]):
    """Parameters of a chat completion request.

    Instances are immutable. The ``append_message`` and ``with_*`` helpers
    return an updated copy and leave the receiver untouched, so a partially
    configured chat can be shared and extended independently.

    Parameters
    ----------
    messages:
        The conversation so far, oldest message first. Never empty.
    maximum_tokens:
        Upper bound on the number of generated tokens. ``None`` leaves the
        model to generate until it stops by itself or hits its context window.
    temperature:
        Expected between 0 and 1. Higher values give less probable, more
        "creative" output.
    top_p:
        Sample the next token from the smallest set of tokens whose cumulative
        probability exceeds ``top_p``. 0 behaves like ``None``.
    """

    messages: Tuple[Message, ...]
    maximum_tokens: Optional[int] = None
    temperature: Optional[float] = None
    top_p: Optional[float] = None

    response_model: ClassVar[Type[ResponseChat]] = ResponseChat

    def __post_init__(self) -> None:
        messages = tuple(self.messages)
        if not messages:
            raise ValueError("A chat needs at least one message")
        object.__setattr__(self, "messages", messages)

    @classmethod
    def from_message(cls, role: Union[Role, str], content: str) -> TaskChat:
        """Create a chat holding a single message, all optional parameters unset."""

        return cls(messages=(Message(role=Role(role), content=content),))

    def append_message(self, role: Union[Role, str], content: str) -> TaskChat:
        return replace(self, messages=(*self.messages, Message(role=Role(role), content=content)))

    def with_maximum_tokens(self, maximum_tokens: int) -> TaskChat:
        return replace(self, maximum_tokens=maximum_tokens)

    def with_temperature(self, temperature: float) -> TaskChat:
        return replace(self, temperature=temperature)

    def with_top_p(self, top_p: float) -> TaskChat:
        return replace(self, top_p=top_p)

    def build_request(self, client: httpx.AsyncClient, base_url: str, model: str) -> httpx.Request:
        body = ChatBody(
            model=model,
            messages=list(self.messages),
            maximum_tokens=self.maximum_tokens,
            temperature=self.temperature,
            top_p=self.top_p,
        )
        return client.build_request("POST", f"{base_url}/chat/completions", json=body.to_payload())

    def body_to_output(self, response: ResponseChat) -> ChatOutput:
        # Takes the last choice. Raises IndexError if the server sent none.
        return response.choices.pop()
