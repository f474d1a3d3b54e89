"""Registries of HTTP client and JSON handler implementations.

Providers are tried in priority order; a provider is available when it can
be constructed, i.e. when its library imports. Optional implementations are
imported inside their factory functions so a missing library only disables
that one provider.
"""

from __future__ import annotations

import logging
from typing import Callable, Optional, Sequence, Tuple

from meilisearch_client.config import Config
from meilisearch_client.exceptions import ConfigurationError
from meilisearch_client.http.base_client import AbstractHttpClient
from meilisearch_client.http.default_client import DefaultHttpClient
from meilisearch_client.json.base_handler import JsonHandler

logger = logging.getLogger(__name__)

HttpClientFactory = Callable[[Config], AbstractHttpClient]
JsonHandlerFactory = Callable[[], JsonHandler]


def _httpx_client(config: Config) -> AbstractHttpClient:
    from meilisearch_client.http.httpx_client import HttpxHttpClient

    return HttpxHttpClient(config)


def _requests_client(config: Config) -> AbstractHttpClient:
    from meilisearch_client.http.requests_client import RequestsHttpClient

    return RequestsHttpClient(config)


def _urllib_client(config: Config) -> AbstractHttpClient:
    return DefaultHttpClient(config)


def _orjson_handler() -> JsonHandler:
    from meilisearch_client.json.orjson_handler import OrjsonJsonHandler

    return OrjsonJsonHandler()


def _pydantic_handler() -> JsonHandler:
    from meilisearch_client.json.pydantic_handler import PydanticJsonHandler

    return PydanticJsonHandler()


def _stdlib_handler() -> JsonHandler:
    from meilisearch_client.json.stdlib_handler import StdlibJsonHandler

    return StdlibJsonHandler()


# Priority order. The urllib client is the fallback, not a candidate.
HTTP_CLIENT_PROVIDERS: Tuple[Tuple[str, HttpClientFactory], ...] = (
    ("httpx", _httpx_client),
    ("requests", _requests_client),
)

JSON_HANDLER_PROVIDERS: Tuple[Tuple[str, JsonHandlerFactory], ...] = (
    ("orjson", _orjson_handler),
    ("pydantic", _pydantic_handler),
    ("json", _stdlib_handler),
)


def detect_http_client(
    config: Config,
    providers: Optional[Sequence[Tuple[str, HttpClientFactory]]] = None,
) -> AbstractHttpClient:
    """Return the first constructible HTTP client, else `DefaultHttpClient`."""
    for name, factory in HTTP_CLIENT_PROVIDERS if providers is None else providers:
        try:
            client = factory(config)
        except ImportError as e:
            logger.debug("HTTP client %r unavailable: %s", name, e)
            continue
        logger.debug("Using HTTP client %r", name)
        return client
    logger.debug("Using fallback HTTP client 'urllib'")
    return DefaultHttpClient(config)


def detect_json_handler(
    providers: Optional[Sequence[Tuple[str, JsonHandlerFactory]]] = None,
) -> JsonHandler:
    """Return the first constructible JSON handler.

    Raises `ConfigurationError` if none can be constructed.
    """
    for name, factory in JSON_HANDLER_PROVIDERS if providers is None else providers:
        try:
            handler = factory()
        except ImportError as e:
            logger.debug("JSON handler %r unavailable: %s", name, e)
            continue
        logger.debug("Using JSON handler %r", name)
        return handler
    raise ConfigurationError("No suitable JSON library found")


def http_client_by_name(name: str, config: Config) -> AbstractHttpClient:
    """Construct the named HTTP client, failing if its library is missing."""
    factories = dict(HTTP_CLIENT_PROVIDERS)
    factories["urllib"] = _urllib_client
    if name not in factories:
        raise ConfigurationError(f"Unknown HTTP client {name!r}. Available: {', '.join(factories)}")
    try:
        return factories[name](config)
    except ImportError as e:
        raise ConfigurationError(f"HTTP client {name!r} requires a library that is not installed: {e}") from e


def json_handler_by_name(name: str) -> JsonHandler:
    """Construct the named JSON handler, failing if its library is missing."""
    factories = dict(JSON_HANDLER_PROVIDERS)
    if name not in factories:
        raise ConfigurationError(f"Unknown JSON handler {name!r}. Available: {', '.join(factories)}")
    try:
        return factories[name]()
    except ImportError as e:
        raise ConfigurationError(f"JSON handler {name!r} requires a library that is not installed: {e}") from e
