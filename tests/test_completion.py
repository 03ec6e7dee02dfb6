"""Unit tests for the completion task."""

from __future__ import annotations

import json

import httpx
import pytest

from inference_client import CompletionOutput, ResponseCompletion, Sampling, TaskCompletion


@pytest.mark.asyncio
async def test_most_likely_sampling_sends_no_sampling_keys(http_client: httpx.AsyncClient) -> None:
    task = TaskCompletion.from_text("Hello,", maximum_tokens=1)

    request = task.build_request(http_client, "https://api.example.com", "luminous-base")

    assert str(request.url) == "https://api.example.com/complete"
    assert json.loads(request.content) == {
        "model": "luminous-base",
        "prompt": [{"type": "text", "data": "Hello,"}],
        "maximum_tokens": 1,
    }


@pytest.mark.asyncio
async def test_sampling_parameters_are_sent(http_client: httpx.AsyncClient) -> None:
    sampling = Sampling(temperature=0.7, top_k=10)
    task = TaskCompletion.from_text("Hello,", maximum_tokens=5, sampling=sampling)

    body = json.loads(task.build_request(http_client, "https://api.example.com", "m").content)

    assert body["temperature"] == 0.7
    assert body["top_k"] == 10
    assert "top_p" not in body


def test_body_to_output_takes_last_completion() -> None:
    response = ResponseCompletion(
        model_version="2021-12",
        completions=[
            CompletionOutput(completion="first", finish_reason="maximum_tokens"),
            CompletionOutput(completion="second", finish_reason="maximum_tokens"),
        ],
    )
    task = TaskCompletion.from_text("Hello,", maximum_tokens=1)

    assert task.body_to_output(response).completion == "second"


def test_body_to_output_fails_on_empty_completions() -> None:
    task = TaskCompletion.from_text("Hello,", maximum_tokens=1)

    with pytest.raises(IndexError):
        task.body_to_output(ResponseCompletion(model_version="2021-12", completions=[]))
