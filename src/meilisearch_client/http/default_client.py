"""Dependency-free HTTP client on ``urllib.request``.

Opens one connection per call; there is nothing to pool, so `open()` and
`close()` are no-ops.
"""

from __future__ import annotations

import http.client
import logging
import ssl
import urllib.error
import urllib.request
from typing import Optional

from meilisearch_client.exceptions import TransportError
from meilisearch_client.http.base_client import AbstractHttpClient
from meilisearch_client.http.request import HttpRequest, HttpResponse

logger = logging.getLogger(__name__)


class DefaultHttpClient(AbstractHttpClient):
    name = "urllib"

    def _ssl_context(self) -> Optional[ssl.SSLContext]:
        if self.verify_ssl or not self.base_url.startswith("https"):
            return None
        ctx = ssl.create_default_context()
        ctx.check_hostname = False
        ctx.verify_mode = ssl.CERT_NONE
        return ctx

    def execute(self, request: HttpRequest) -> HttpResponse:
        data = request.body.encode("utf-8") if request.body is not None else None
        req = urllib.request.Request(
            self._url(request),
            data=data,
            headers=self._headers(),
            method=request.method.value,
        )
        try:
            with urllib.request.urlopen(req, timeout=self.timeout, context=self._ssl_context()) as resp:
                status = resp.status
                body = resp.read().decode("utf-8", errors="replace")
                headers = dict(resp.headers.items())
                reason = resp.reason or ""
        except urllib.error.HTTPError as e:
            # Non-2xx: still a response
            try:
                status = e.code
                body = e.read().decode("utf-8", errors="replace")
                headers = dict(e.headers.items()) if e.headers is not None else {}
                reason = str(e.reason or "")
            finally:
                e.close()
        except (urllib.error.URLError, http.client.HTTPException, OSError) as e:
            raise TransportError(f"{request.method.value} {request.target} failed: {e}", cause=e) from e
        logger.debug("%s %s -> %s", request.method.value, request.target, status)
        return HttpResponse(status_code=status, body=body, headers=headers, reason=reason)
