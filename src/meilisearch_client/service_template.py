"""Service templates: send a built request, return a typed result.

The template is the single place where transport and codec failures are
turned into `MeiliSearchRuntimeError`. Everything above it (handlers, the
client) can assume that any failure it sees is already normalized.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from types import TracebackType
from typing import Any, Optional, Type

from meilisearch_client.api.models import ApiErrorPayload
from meilisearch_client.exceptions import (
    CodecError,
    ErrorKind,
    MeiliSearchApiError,
    MeiliSearchRuntimeError,
    TransportError,
)
from meilisearch_client.http.base_client import AbstractHttpClient
from meilisearch_client.http.factory import RequestFactory
from meilisearch_client.http.request import HttpRequest, HttpResponse
from meilisearch_client.json.base_handler import JsonHandler
from meilisearch_client.json.types import Scalar, TypeRef

logger = logging.getLogger(__name__)

_ERROR_PAYLOAD = Scalar(ApiErrorPayload)


class ServiceTemplate(ABC):
    """Abstract service template interface."""

    @property
    @abstractmethod
    def processor(self) -> JsonHandler:
        """JSON handler used for request and response bodies."""

    @property
    @abstractmethod
    def request_factory(self) -> RequestFactory:
        """Factory handlers use to build requests for this template."""

    @abstractmethod
    def execute(
        self,
        request: HttpRequest,
        target: Any = None,
        *params: Any,
        allow_empty: bool = False,
    ) -> Any:
        """Execute `request` and decode the response.

        Parameters
        ----------
        request: HttpRequest
            The fully built request; it is not modified.
        target:
            ``None`` when no result is expected, otherwise a type or a
            `TypeRef` describing the expected result.
        *params:
            Type parameters of `target`, e.g. ``execute(req, list, Movie)``.
        allow_empty: bool
            Return ``None`` instead of failing when a 2xx response has an
            empty body, e.g. ``204 No Content``.

        Raises
        ------
        MeiliSearchRuntimeError
            For every failure: transport, non-2xx status, or a body that does
            not match the requested shape.
        """
        raise NotImplementedError

    def close(self) -> None:
        """Release resources held by the template."""

    def __enter__(self) -> "ServiceTemplate":
        return self

    def __exit__(
        self,
        exc_type: Optional[Type[BaseException]],
        exc: Optional[BaseException],
        tb: Optional[TracebackType],
    ) -> None:
        self.close()


class GenericServiceTemplate(ServiceTemplate):
    """Default template over a pluggable HTTP client, JSON handler and factory."""

    def __init__(
        self,
        http_client: AbstractHttpClient,
        json_handler: JsonHandler,
        request_factory: RequestFactory,
    ) -> None:
        self._http_client = http_client
        self._json_handler = json_handler
        self._request_factory = request_factory

    @property
    def http_client(self) -> AbstractHttpClient:
        return self._http_client

    @property
    def processor(self) -> JsonHandler:
        return self._json_handler

    @property
    def request_factory(self) -> RequestFactory:
        return self._request_factory

    def execute(
        self,
        request: HttpRequest,
        target: Any = None,
        *params: Any,
        allow_empty: bool = False,
    ) -> Any:
        type_ref = TypeRef.of(target, *params) if target is not None else None
        response = self._send(request)
        if not response.is_success:
            raise self._api_error(request, response)
        if type_ref is None:
            return None
        if allow_empty and not response.body.strip():
            return None
        try:
            return self._json_handler.decode(response.body, type_ref)
        except CodecError as e:
            raise MeiliSearchRuntimeError(
                f"Unexpected response body for {request.method.value} {request.target}: {e.message}",
                status_code=response.status_code,
                cause=e,
                kind=ErrorKind.RESPONSE_SHAPE,
            ) from e

    def close(self) -> None:
        self._http_client.close()

    def _send(self, request: HttpRequest) -> HttpResponse:
        try:
            return self._http_client.execute(request)
        except TransportError as e:
            raise MeiliSearchRuntimeError(e.message, cause=e.cause or e, kind=ErrorKind.TRANSPORT) from e
        except Exception as e:
            raise MeiliSearchRuntimeError(
                f"{request.method.value} {request.target} failed: {e!r}",
                cause=e,
                kind=ErrorKind.TRANSPORT,
            ) from e

    def _api_error(self, request: HttpRequest, response: HttpResponse) -> MeiliSearchApiError:
        logger.debug(
            "%s %s returned %s: %s",
            request.method.value,
            request.target,
            response.status_code,
            response.body[:200],
        )
        try:
            payload = self._json_handler.decode(response.body, _ERROR_PAYLOAD)
        except CodecError as e:
            message = response.body or response.reason or f"HTTP {response.status_code}"
            return MeiliSearchApiError(message, status_code=response.status_code, cause=e)
        return MeiliSearchApiError(
            payload.message,
            status_code=response.status_code,
            error_code=payload.error_code,
            error_type=payload.error_type,
            error_link=payload.error_link,
        )
