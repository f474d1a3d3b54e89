"""HTTP client on a pooled ``httpx.Client``."""

from __future__ import annotations

import logging
import threading
from typing import Optional

import httpx

from meilisearch_client.config import Config
from meilisearch_client.exceptions import TransportError
from meilisearch_client.http.base_client import AbstractHttpClient
from meilisearch_client.http.request import HttpRequest, HttpResponse

logger = logging.getLogger(__name__)


class HttpxHttpClient(AbstractHttpClient):
    """Sends requests through one shared, thread-safe httpx connection pool.

    Parameters
    ----------
    config:
        Client configuration (host, API key, timeout, TLS verification).
    transport:
        Optional httpx transport, e.g. ``httpx.MockTransport`` in tests.
    """

    name = "httpx"

    def __init__(self, config: Config, *, transport: Optional[httpx.BaseTransport] = None) -> None:
        super().__init__(config)
        self._transport = transport
        self._client: Optional[httpx.Client] = None
        self._lock = threading.Lock()

    def _build_client(self) -> httpx.Client:
        return httpx.Client(
            base_url=self.base_url,
            timeout=self.timeout,
            verify=self.verify_ssl,
            headers=self._headers(),
            transport=self._transport,
        )

    def open(self) -> httpx.Client:
        with self._lock:
            if self._client is None:
                self._client = self._build_client()
            return self._client

    def close(self) -> None:
        with self._lock:
            client, self._client = self._client, None
        if client is not None:
            client.close()

    def execute(self, request: HttpRequest) -> HttpResponse:
        client = self.open()
        content = request.body.encode("utf-8") if request.body is not None else None
        try:
            resp = client.request(request.method.value, request.target, content=content)
        except httpx.HTTPError as e:
            raise TransportError(f"{request.method.value} {request.target} failed: {e}", cause=e) from e
        logger.debug("%s %s -> %s", request.method.value, request.target, resp.status_code)
        return HttpResponse(
            status_code=resp.status_code,
            body=resp.text,
            headers=dict(resp.headers),
            reason=resp.reason_phrase,
        )
