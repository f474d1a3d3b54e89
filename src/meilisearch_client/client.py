"""Meilisearch client and its builder."""

from __future__ import annotations

import logging
import threading
from types import TracebackType
from typing import Any, Dict, Optional, Type

from meilisearch_client.api.documents import DocumentHandler
from meilisearch_client.api.indexes import IndexesHandler
from meilisearch_client.api.instance import InstanceHandler
from meilisearch_client.config import Config, load_settings
from meilisearch_client.http.base_client import AbstractHttpClient
from meilisearch_client.http.factory import BasicRequestFactory, RequestFactory
from meilisearch_client.json.base_handler import JsonHandler
from meilisearch_client.providers import (
    detect_http_client,
    detect_json_handler,
    http_client_by_name,
    json_handler_by_name,
)
from meilisearch_client.service_template import GenericServiceTemplate, ServiceTemplate

logger = logging.getLogger(__name__)


class Client:
    """Entry point bundling the index, instance and document handlers.

    Use `ClientBuilder` to assemble one; the constructor takes an already
    built `ServiceTemplate`.
    """

    def __init__(self, config: Config, service_template: ServiceTemplate) -> None:
        self.config = config
        self._template = service_template
        self._indexes = IndexesHandler(service_template)
        self._instance = InstanceHandler(service_template)
        self._lock = threading.Lock()
        self._handlers: Dict[str, DocumentHandler[Any]] = {
            uid: DocumentHandler(service_template, uid, model) for uid, model in config.model_mapping.items()
        }

    @property
    def service_template(self) -> ServiceTemplate:
        return self._template

    def index(self) -> IndexesHandler:
        return self._indexes

    def instance(self) -> InstanceHandler:
        return self._instance

    def documents(self, uid: str, model: Any = None) -> DocumentHandler[Any]:
        """Return the document handler for index `uid`.

        Without `model`, the cached handler is returned, or a new schemaless
        (``dict``) handler if there is none. With `model`, the cached handler is
        reused only if it was built for that same type; otherwise a new one
        replaces it in the cache.
        """
        with self._lock:
            handler = self._handlers.get(uid)
            if handler is not None and (model is None or handler.index_model is model):
                return handler
            handler = DocumentHandler(self._template, uid, dict if model is None else model)
            self._handlers[uid] = handler
            return handler

    def close(self) -> None:
        self._template.close()

    def __enter__(self) -> "Client":
        return self

    def __exit__(
        self,
        exc_type: Optional[Type[BaseException]],
        exc: Optional[BaseException],
        tb: Optional[TracebackType],
    ) -> None:
        self.close()


class ClientBuilder:
    """Assembles a `Client` from explicit components or auto-detected ones.

    Example
    -------
    >>> client = ClientBuilder.with_config(Config(host_url="http://localhost:7700")).build()
    """

    def __init__(self, config: Config) -> None:
        self.config = config
        self._service_template: Optional[ServiceTemplate] = None
        self._http_client: Optional[AbstractHttpClient] = None
        self._json_handler: Optional[JsonHandler] = None
        self._request_factory: Optional[RequestFactory] = None

    @classmethod
    def with_config(cls, config: Config) -> "ClientBuilder":
        return cls(config)

    @classmethod
    def from_settings(cls) -> "ClientBuilder":
        """Start from `Settings` loaded from the environment and .env."""
        return cls(load_settings().client)

    def with_service_template(self, service_template: ServiceTemplate) -> "ClientBuilder":
        self._service_template = service_template
        return self

    def with_http_client(self, http_client: AbstractHttpClient) -> "ClientBuilder":
        self._http_client = http_client
        return self

    def with_autodetect_http_client(self) -> "ClientBuilder":
        self._http_client = detect_http_client(self.config)
        return self

    def with_json_handler(self, json_handler: JsonHandler) -> "ClientBuilder":
        self._json_handler = json_handler
        return self

    def with_autodetect_json_handler(self) -> "ClientBuilder":
        self._json_handler = detect_json_handler()
        return self

    def with_request_factory(self, request_factory: RequestFactory) -> "ClientBuilder":
        self._request_factory = request_factory
        return self

    def build(self) -> Client:
        if self._service_template is not None:
            if self._json_handler is not None or self._http_client is not None:
                logger.warning(
                    "A ServiceTemplate is set together with a JsonHandler and/or HttpClient; "
                    "the JsonHandler and HttpClient will be ignored"
                )
            return Client(self.config, self._service_template)

        if self._json_handler is None:
            if self.config.json_handler:
                self._json_handler = json_handler_by_name(self.config.json_handler)
            else:
                self.with_autodetect_json_handler()
        if self._http_client is None:
            if self.config.http_client:
                self._http_client = http_client_by_name(self.config.http_client, self.config)
            else:
                self.with_autodetect_http_client()
        if self._request_factory is None:
            self._request_factory = BasicRequestFactory(self._json_handler)  # type: ignore[arg-type]

        template = GenericServiceTemplate(
            self._http_client,  # type: ignore[arg-type]
            self._json_handler,  # type: ignore[arg-type]
            self._request_factory,
        )
        return Client(self.config, template)
