"""HTTP clients, request values and request factories.

`HttpxHttpClient` and `RequestsHttpClient` are not imported here; they need
their optional libraries and are loaded by `meilisearch_client.providers`.
"""

from .base_client import AbstractHttpClient
from .default_client import DefaultHttpClient
from .factory import BasicRequestFactory, RequestFactory
from .request import HttpMethod, HttpRequest, HttpResponse, build_path

__all__ = [
    "AbstractHttpClient",
    "DefaultHttpClient",
    "BasicRequestFactory",
    "RequestFactory",
    "HttpMethod",
    "HttpRequest",
    "HttpResponse",
    "build_path",
]
