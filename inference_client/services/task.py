"""Contract shared by every kind of request sent to the inference API."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import ClassVar, Generic, Type, TypeVar, cast

import httpx
from pydantic import BaseModel

BodyT = TypeVar("BodyT", bound=BaseModel)
OutputT = TypeVar("OutputT")


class Task(ABC, Generic[BodyT, OutputT]):
    """A self-contained description of one API operation.

    Implementations describe how to turn their parameters into an HTTP
    request and how to pick the result out of the decoded response body.
    The :class:`~inference_client.services.client.Client` takes care of
    sending the request, classifying errors and decoding the body with
    :meth:`parse_body`.
    """

    __slots__ = ()

    # Must be the class bound to BodyT; class variables cannot be generic.
    response_model: ClassVar[Type[BaseModel]]

    @abstractmethod
    def build_request(self, client: httpx.AsyncClient, base_url: str, model: str) -> httpx.Request:
        """Describe the request for ``model``. Must not perform any I/O."""

    @abstractmethod
    def body_to_output(self, response: BodyT) -> OutputT:
        """Extract the result from a decoded response body."""

    def parse_body(self, raw: bytes) -> BodyT:
        """Validate a raw JSON body into :attr:`response_model`.

        Raises :class:`pydantic.ValidationError` if the body has another shape.
        """

        return cast(BodyT, self.response_model.model_validate_json(raw))
