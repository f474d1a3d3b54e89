"""Request factories building `HttpRequest` values from call parameters."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, List, Mapping, Optional, Tuple

from meilisearch_client.exceptions import CodecError, ErrorKind, MeiliSearchRuntimeError
from meilisearch_client.http.request import HttpMethod, HttpRequest
from meilisearch_client.json.base_handler import JsonHandler


class RequestFactory(ABC):
    """Abstract request factory interface."""

    @abstractmethod
    def create(
        self,
        method: HttpMethod,
        path: str,
        params: Optional[Mapping[str, Any]] = None,
        body: Any = None,
    ) -> HttpRequest:
        """Build a complete, immutable request."""
        raise NotImplementedError


def _param_value(value: Any) -> Optional[str]:
    if value is None:
        return None
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (list, tuple, set, frozenset)):
        items = [str(v) for v in value if v is not None and str(v) != ""]
        return ",".join(items) if items else None
    text = str(value)
    return text or None


def build_params(params: Optional[Mapping[str, Any]]) -> Tuple[Tuple[str, str], ...]:
    """Stringify query parameters, dropping those with empty values."""
    out: List[Tuple[str, str]] = []
    for name, value in (params or {}).items():
        text = _param_value(value)
        if text is not None:
            out.append((name, text))
    return tuple(out)


class BasicRequestFactory(RequestFactory):
    """Serializes bodies with the given JSON handler unless already serialized."""

    def __init__(self, json_handler: JsonHandler) -> None:
        self._json_handler = json_handler

    def create(
        self,
        method: HttpMethod,
        path: str,
        params: Optional[Mapping[str, Any]] = None,
        body: Any = None,
    ) -> HttpRequest:
        return HttpRequest(
            method=HttpMethod(method),
            path=path,
            params=build_params(params),
            body=self._serialize(body),
        )

    def _serialize(self, body: Any) -> Optional[str]:
        if body is None or isinstance(body, str):
            return body
        if isinstance(body, (bytes, bytearray)):
            return bytes(body).decode("utf-8")
        try:
            return self._json_handler.encode(body)
        except CodecError as e:
            raise MeiliSearchRuntimeError(
                f"Unable to serialize request body: {e.message}",
                cause=e,
                kind=ErrorKind.CODEC,
            ) from e
