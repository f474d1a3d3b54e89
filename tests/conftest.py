import json
import socket
import threading
from http.server import BaseHTTPRequestHandler, ThreadingHTTPServer
from typing import Any, Dict, Iterator, List

import pytest

ERROR_BODY = {
    "message": "Index missing not found",
    "errorCode": "index_not_found",
    "errorType": "invalid_request_error",
    "errorLink": "https://docs.meilisearch.com/errors#index_not_found",
}


class _Handler(BaseHTTPRequestHandler):
    server: "RecordingServer"

    def log_message(self, format: str, *args: Any) -> None:  # noqa: A002
        pass

    def _send(self, status: int, body: Any, content_type: str = "application/json") -> None:
        raw = body.encode("utf-8") if isinstance(body, str) else json.dumps(body).encode("utf-8")
        self.send_response(status)
        self.send_header("Content-Type", content_type)
        self.send_header("Content-Length", str(len(raw)))
        self.end_headers()
        self.wfile.write(raw)

    def _handle(self) -> None:
        length = int(self.headers.get("Content-Length") or 0)
        body = self.rfile.read(length).decode("utf-8") if length else None
        self.server.requests.append(
            {
                "method": self.command,
                "path": self.path,
                "body": body,
                "headers": dict(self.headers.items()),
            }
        )
        if self.path == "/health":
            self._send(200, {"status": "available"})
        elif self.path == "/legacy/health":
            self.send_response(204)
            self.end_headers()
        elif self.path.startswith("/missing"):
            self._send(404, ERROR_BODY)
        elif self.path == "/broken":
            self._send(502, "Bad gateway", content_type="text/plain")
        else:
            self._send(200, {"method": self.command, "path": self.path, "body": body})

    do_GET = _handle
    do_POST = _handle
    do_PUT = _handle
    do_DELETE = _handle


class RecordingServer(ThreadingHTTPServer):
    daemon_threads = True

    def __init__(self) -> None:
        super().__init__(("127.0.0.1", 0), _Handler)
        self.requests: List[Dict[str, Any]] = []

    @property
    def url(self) -> str:
        host, port = self.server_address[:2]
        return f"http://{host}:{port}"


@pytest.fixture
def server() -> Iterator[RecordingServer]:
    srv = RecordingServer()
    thread = threading.Thread(target=srv.serve_forever, daemon=True)
    thread.start()
    try:
        yield srv
    finally:
        srv.shutdown()
        srv.server_close()


@pytest.fixture
def closed_port_url() -> str:
    # Bind then release a port so nothing is listening on it
    with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as s:
        s.bind(("127.0.0.1", 0))
        port = s.getsockname()[1]
    return f"http://127.0.0.1:{port}"
