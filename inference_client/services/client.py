"""Asynchronous client wrapper around the inference REST API."""

from __future__ import annotations

import logging
from typing import Any, Optional, TypeVar

import httpx
from pydantic import ValidationError

from inference_client.core.config import DEFAULT_BASE_URL, Settings, get_settings
from inference_client.schemas.chat import ChatOutput
from inference_client.schemas.completion import CompletionOutput
from inference_client.services.chat import TaskChat
from inference_client.services.completion import TaskCompletion
from inference_client.services.task import Task

logger = logging.getLogger(__name__)

OutputT = TypeVar("OutputT")


class InferenceError(RuntimeError):
    """Raised when the inference API could not serve a request."""


class TooManyRequests(InferenceError):
    """Raised on HTTP 429. Too many requests are in flight; send them slower."""


class Busy(InferenceError):
    """Raised on HTTP 503. The model's queue is full; retry later or use another model."""


class HttpError(InferenceError):
    """Raised for any other unsuccessful HTTP status."""

    def __init__(self, status_code: int, body: str) -> None:
        super().__init__(f"Inference API returned status {status_code}: {body}")
        self.status_code = status_code
        self.body = body


class Client:
    """Send tasks to the inference API and return their typed output.

    ``default_model`` is used by every call that does not name a model.
    """

    def __init__(
        self,
        api_token: str,
        *,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = 120.0,
        default_model: Optional[str] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.default_model = default_model
        self._api_token = api_token
        self._transport = transport

    @classmethod
    def from_settings(
        cls,
        settings: Optional[Settings] = None,
        *,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> Client:
        """Build a client from :class:`Settings`, the cached environment settings by default."""

        settings = settings or get_settings()
        if not settings.api_token:
            raise ValueError("No API token configured, set INFERENCE_CLIENT_API_TOKEN")
        return cls(
            settings.api_token,
            base_url=settings.base_url,
            timeout=settings.timeout,
            default_model=settings.default_model,
            transport=transport,
        )

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------
    async def execute(self, task: Task[Any, OutputT], model: Optional[str] = None) -> OutputT:
        """Send ``task`` to ``model`` (the client's default model if omitted) and return its output."""

        model = self._resolve_model(model)
        async with self._http_client() as client:
            request = task.build_request(client, self.base_url, model)
            logger.debug("Sending %s %s for model '%s'", request.method, request.url, model)
            try:
                response = await client.send(request)
            except httpx.HTTPError as exc:
                raise InferenceError(f"Failed to reach inference API at {request.url}: {exc}") from exc

        self._raise_for_status(response)
        try:
            body = task.parse_body(response.content)
        except ValidationError as exc:
            raise InferenceError(f"Unexpected response body from {request.url}: {exc}") from exc
        return task.body_to_output(body)

    async def complete(self, task: TaskCompletion, model: Optional[str] = None) -> CompletionOutput:
        """Continue the task's prompt with ``model``."""

        return await self.execute(task, model)

    async def chat(self, task: TaskChat, model: Optional[str] = None) -> ChatOutput:
        """Let ``model`` answer the task's conversation."""

        return await self.execute(task, model)

    # ------------------------------------------------------------------
    # Private helpers
    # ------------------------------------------------------------------
    def _resolve_model(self, model: Optional[str]) -> str:
        model = model or self.default_model
        if not model:
            raise ValueError("No model given and the client has no default model")
        return model

    def _http_client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(
            headers={"Authorization": f"Bearer {self._api_token}"},
            timeout=self.timeout,
            transport=self._transport,
        )

    @staticmethod
    def _raise_for_status(response: httpx.Response) -> None:
        if response.is_success:
            return
        status = response.status_code
        if status == 429:
            logger.warning("Inference API is rate limiting requests to %s", response.url)
            raise TooManyRequests(f"Too many requests: {response.text}")
        if status == 503:
            logger.warning("Inference API is busy: %s", response.text)
            raise Busy(f"Service busy: {response.text}")
        logger.warning("Inference API %s failed with status %s", response.url, status)
        raise HttpError(status, response.text)
