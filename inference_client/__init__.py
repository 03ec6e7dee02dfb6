"""Asynchronous client for a hosted large-language-model inference API.

Example usage::

    from inference_client import Client, Role, TaskChat

    client = Client("<token>")
    task = TaskChat.from_message(Role.USER, "Hello").with_maximum_tokens(32)
    output = await client.chat(task, "luminous-base")
"""

from inference_client.core.config import Settings, get_settings
from inference_client.schemas.chat import ChatOutput, Message, ResponseChat, Role
from inference_client.schemas.completion import CompletionOutput, ResponseCompletion
from inference_client.services.chat import TaskChat
from inference_client.services.client import Busy, Client, HttpError, InferenceError, TooManyRequests
from inference_client.services.completion import Prompt, Sampling, TaskCompletion
from inference_client.services.task import Task

__all__ = [
    "Busy",
    "ChatOutput",
    "Client",
    "CompletionOutput",
    "HttpError",
    "InferenceError",
    "Message",
    "Prompt",
    "ResponseChat",
    "ResponseCompletion",
    "Role",
    "Sampling",
    "Settings",
    "Task",
    "TaskChat",
    "TaskCompletion",
    "TooManyRequests",
    "get_settings",
]
