"""Endpoint handlers and wire models."""

from .documents import DocumentHandler
from .indexes import IndexesHandler
from .instance import InstanceHandler
from .models import (
    ApiErrorPayload,
    Dump,
    DumpStatus,
    Index,
    IndexStats,
    SearchRequest,
    SearchResponse,
    Stats,
    Update,
    UpdateStatus,
)

__all__ = [
    "DocumentHandler",
    "IndexesHandler",
    "InstanceHandler",
    "ApiErrorPayload",
    "Dump",
    "DumpStatus",
    "Index",
    "IndexStats",
    "SearchRequest",
    "SearchResponse",
    "Stats",
    "Update",
    "UpdateStatus",
]
