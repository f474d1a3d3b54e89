"""HTTP client on a pooled ``requests.Session``."""

from __future__ import annotations

import logging
import threading
from typing import Optional

import requests

from meilisearch_client.config import Config
from meilisearch_client.exceptions import TransportError
from meilisearch_client.http.base_client import AbstractHttpClient
from meilisearch_client.http.request import HttpRequest, HttpResponse

logger = logging.getLogger(__name__)


class RequestsHttpClient(AbstractHttpClient):
    name = "requests"

    def __init__(self, config: Config) -> None:
        super().__init__(config)
        self._session: Optional[requests.Session] = None
        self._lock = threading.Lock()

    def open(self) -> requests.Session:
        with self._lock:
            if self._session is None:
                session = requests.Session()
                session.headers.update(self._headers())
                session.verify = self.verify_ssl
                self._session = session
            return self._session

    def close(self) -> None:
        with self._lock:
            session, self._session = self._session, None
        if session is not None:
            session.close()

    def execute(self, request: HttpRequest) -> HttpResponse:
        session = self.open()
        data = request.body.encode("utf-8") if request.body is not None else None
        try:
            resp = session.request(
                request.method.value,
                self._url(request),
                data=data,
                timeout=self.timeout,
            )
        except requests.RequestException as e:
            raise TransportError(f"{request.method.value} {request.target} failed: {e}", cause=e) from e
        logger.debug("%s %s -> %s", request.method.value, request.target, resp.status_code)
        return HttpResponse(
            status_code=resp.status_code,
            body=resp.content.decode("utf-8", errors="replace"),
            headers=dict(resp.headers),
            reason=resp.reason or "",
        )
