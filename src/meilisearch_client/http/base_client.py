"""Base interface for HTTP clients.

Every implementation sends an `HttpRequest` against the configured host and
returns the raw `HttpResponse`. Non-2xx statuses are returned, not raised;
interpreting them is the service template's job. Failures that leave no
response at all are raised as `TransportError`.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from types import TracebackType
from typing import Any, Dict, Optional, Type

from meilisearch_client.config import Config
from meilisearch_client.http.request import HttpRequest, HttpResponse


class AbstractHttpClient(ABC):
    """Abstract HTTP client interface.

    Implementations should be safe to construct without side effects and should
    not open connections until `open()` or `execute()` is invoked.
    """

    name: str = "abstract"

    def __init__(self, config: Config) -> None:
        self.config = config
        self.base_url = config.host_url.rstrip("/")
        self.timeout = config.timeout
        self.verify_ssl = config.verify_ssl

    def _headers(self) -> Dict[str, str]:
        return self.config.headers()

    def _url(self, request: HttpRequest) -> str:
        target = request.target
        if not target.startswith("/"):
            target = "/" + target
        return self.base_url + target

    @abstractmethod
    def execute(self, request: HttpRequest) -> HttpResponse:
        """Send the request and return the raw response."""
        raise NotImplementedError

    def open(self) -> Any:
        """Acquire pooled connection resources and return them.

        No-op returning ``None`` for unpooled clients.
        """

    def close(self) -> None:
        """Release connection resources. Safe to call multiple times."""

    def __enter__(self) -> "AbstractHttpClient":
        self.open()
        return self

    def __exit__(
        self,
        exc_type: Optional[Type[BaseException]],
        exc: Optional[BaseException],
        tb: Optional[TracebackType],
    ) -> None:
        self.close()
