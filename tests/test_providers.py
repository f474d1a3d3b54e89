from typing import Any, NoReturn

import pytest

from meilisearch_client import providers
from meilisearch_client.config import Config
from meilisearch_client.exceptions import ConfigurationError
from meilisearch_client.http.default_client import DefaultHttpClient
from meilisearch_client.json import PydanticJsonHandler, StdlibJsonHandler

# ---------- Helpers ----------


def missing(*args: Any) -> NoReturn:
    raise ImportError("No module named 'simulated'")


# ---------- HTTP clients ----------


def test_http_detection_picks_only_present_candidate() -> None:
    config = Config()
    sentinel = DefaultHttpClient(config)
    chosen = providers.detect_http_client(
        config,
        [("httpx", missing), ("requests", lambda c: sentinel)],
    )
    assert chosen is sentinel


def test_http_detection_falls_back_to_urllib_client() -> None:
    chosen = providers.detect_http_client(Config(), [("httpx", missing), ("requests", missing)])
    assert type(chosen) is DefaultHttpClient


def test_http_detection_prefers_httpx_when_installed() -> None:
    assert providers.detect_http_client(Config()).name == "httpx"


def test_http_detection_uses_module_registry(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(providers, "HTTP_CLIENT_PROVIDERS", (("httpx", missing),))
    assert providers.detect_http_client(Config()).name == "urllib"


def test_http_client_by_name() -> None:
    assert providers.http_client_by_name("urllib", Config()).name == "urllib"
    assert providers.http_client_by_name("httpx", Config()).name == "httpx"
    with pytest.raises(ConfigurationError):
        providers.http_client_by_name("curl", Config())


def test_http_client_by_name_reports_missing_library(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(providers, "HTTP_CLIENT_PROVIDERS", (("requests", missing),))
    with pytest.raises(ConfigurationError):
        providers.http_client_by_name("requests", Config())


# ---------- JSON handlers ----------


def test_json_detection_picks_only_present_candidate() -> None:
    chosen = providers.detect_json_handler(
        [("orjson", missing), ("pydantic", missing), ("json", StdlibJsonHandler)]
    )
    assert isinstance(chosen, StdlibJsonHandler)


def test_json_detection_follows_priority_order() -> None:
    chosen = providers.detect_json_handler([("pydantic", PydanticJsonHandler), ("json", StdlibJsonHandler)])
    assert isinstance(chosen, PydanticJsonHandler)


def test_json_detection_without_candidates_raises() -> None:
    with pytest.raises(ConfigurationError):
        providers.detect_json_handler([("orjson", missing), ("pydantic", missing), ("json", missing)])


def test_json_detection_prefers_orjson_when_installed() -> None:
    pytest.importorskip("orjson")
    assert providers.detect_json_handler().name == "orjson"


def test_json_handler_by_name() -> None:
    assert isinstance(providers.json_handler_by_name("json"), StdlibJsonHandler)
    assert isinstance(providers.json_handler_by_name("pydantic"), PydanticJsonHandler)
    with pytest.raises(ConfigurationError):
        providers.json_handler_by_name("yaml")
