"""Transport-agnostic request and response values."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Mapping, Optional, Tuple
from urllib.parse import quote, urlencode


class HttpMethod(str, Enum):
    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    DELETE = "DELETE"


@dataclass(frozen=True)
class HttpRequest:
    """A fully built request.

    `params` holds the query parameters in order, already stringified and
    with empty values removed. `body` is serialized JSON text or ``None``.
    """

    method: HttpMethod
    path: str
    params: Tuple[Tuple[str, str], ...] = ()
    body: Optional[str] = None

    @property
    def target(self) -> str:
        """Path plus query string, as sent on the request line."""
        if not self.params:
            return self.path
        sep = "&" if "?" in self.path else "?"
        return f"{self.path}{sep}{urlencode(self.params, safe=',*')}"


@dataclass(frozen=True)
class HttpResponse:
    status_code: int
    body: str = ""
    headers: Mapping[str, str] = field(default_factory=dict)
    reason: str = ""

    @property
    def is_success(self) -> bool:
        return 200 <= self.status_code < 300


def build_path(*segments: Any) -> str:
    """Join `segments` into an absolute path, percent-encoding each one.

    Index uids and document ids may hold spaces, slashes or non-ASCII
    characters; every transport receives the same encoded path.
    """
    return "/" + "/".join(quote(str(s), safe="") for s in segments)
