"""Shared fixtures: an in-process fake of the inference API."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

import httpx
import pytest
import pytest_asyncio
from fastapi import FastAPI, Request, Response

from inference_client import Client


@dataclass
class ReceivedRequest:
    method: str
    path: str
    headers: dict[str, str]
    body: Any


class FakeInferenceApi:
    """Records incoming requests and answers them with canned responses."""

    def __init__(self) -> None:
        self.app = FastAPI()
        self.received: list[ReceivedRequest] = []
        self._replies: dict[str, tuple[int, str]] = {}

        @self.app.post("/{path:path}")
        async def handle(path: str, request: Request) -> Response:
            route = f"/{path}"
            self.received.append(
                ReceivedRequest(
                    method=request.method,
                    path=route,
                    headers=dict(request.headers),
                    body=await request.json(),
                )
            )
            status_code, body = self._replies.get(route, (404, "Not found"))
            return Response(content=body, status_code=status_code, media_type="application/json")

    def reply(self, path: str, status_code: int, body: str) -> None:
        self._replies[path] = (status_code, body)


@pytest.fixture
def fake_api() -> FakeInferenceApi:
    return FakeInferenceApi()


@pytest.fixture
def client(fake_api: FakeInferenceApi) -> Client:
    return Client(
        "dummy-token",
        base_url="http://test",
        transport=httpx.ASGITransport(app=fake_api.app),
    )


@pytest_asyncio.fixture
async def http_client():
    """Client used only to build requests, it never sends anything."""

    async with httpx.AsyncClient() as client:
        yield client
