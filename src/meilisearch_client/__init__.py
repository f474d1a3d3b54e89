"""Python client for the Meilisearch HTTP API."""

import logging

from .api.documents import DocumentHandler
from .api.models import SearchRequest, SearchResponse, Update, UpdateStatus
from .client import Client, ClientBuilder
from .config import Config, Settings, load_settings
from .exceptions import (
    ConfigurationError,
    ErrorKind,
    MeiliSearchApiError,
    MeiliSearchError,
    MeiliSearchRuntimeError,
    MeiliSearchTimeoutError,
    MeiliSearchUpdateFailedError,
)
from .json.types import TypeRef

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "Client",
    "ClientBuilder",
    "Config",
    "Settings",
    "load_settings",
    "DocumentHandler",
    "SearchRequest",
    "SearchResponse",
    "Update",
    "UpdateStatus",
    "TypeRef",
    "ErrorKind",
    "ConfigurationError",
    "MeiliSearchError",
    "MeiliSearchApiError",
    "MeiliSearchRuntimeError",
    "MeiliSearchTimeoutError",
    "MeiliSearchUpdateFailedError",
]
