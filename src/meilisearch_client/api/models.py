"""Pydantic models for the Meilisearch wire format.

Field names are snake_case in Python and camelCase on the wire; models accept
either when constructed.
"""

from __future__ import annotations

from datetime import datetime
from enum import Enum
from typing import Any, Dict, Generic, List, Optional, TypeVar

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

T = TypeVar("T")


class MeiliModel(BaseModel):
    """Base model mapping snake_case fields to camelCase JSON keys."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class UpdateStatus(str, Enum):
    ENQUEUED = "enqueued"
    PROCESSING = "processing"
    PROCESSED = "processed"
    FAILED = "failed"


class Update(MeiliModel):
    """Server-side record of an asynchronous write.

    Write endpoints answer with only ``updateId``; polling
    ``/indexes/{uid}/updates/{id}`` fills in the rest.
    """

    update_id: int
    status: Optional[UpdateStatus] = None
    type: Optional[Dict[str, Any]] = None
    duration: Optional[float] = None
    enqueued_at: Optional[datetime] = None
    processed_at: Optional[datetime] = None
    error: Optional[str] = None
    error_type: Optional[str] = None
    error_code: Optional[str] = None
    error_link: Optional[str] = None

    @property
    def is_processed(self) -> bool:
        return self.status == UpdateStatus.PROCESSED

    @property
    def is_failed(self) -> bool:
        return self.status == UpdateStatus.FAILED


class SearchRequest(MeiliModel):
    """Body of ``POST /indexes/{uid}/search``. Unset fields are not sent."""

    q: Optional[str] = None
    offset: Optional[int] = None
    limit: Optional[int] = None
    attributes_to_retrieve: Optional[List[str]] = None
    attributes_to_crop: Optional[List[str]] = None
    crop_length: Optional[int] = None
    attributes_to_highlight: Optional[List[str]] = None
    filters: Optional[str] = None
    facet_filters: Optional[List[Any]] = None
    facets_distribution: Optional[List[str]] = None
    matches: Optional[bool] = None


class SearchResponse(MeiliModel, Generic[T]):
    """Search result page; `hits` are decoded into the index's document type."""

    hits: List[T] = []
    offset: int = 0
    limit: int = 20
    nb_hits: int = 0
    exhaustive_nb_hits: bool = False
    facets_distribution: Optional[Dict[str, Dict[str, int]]] = None
    exhaustive_facets_count: Optional[bool] = None
    processing_time_ms: int = 0
    query: str = ""


class Index(MeiliModel):
    uid: str
    name: Optional[str] = None
    primary_key: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class IndexStats(MeiliModel):
    number_of_documents: int = 0
    is_indexing: bool = False
    fields_distribution: Dict[str, int] = {}


class Stats(MeiliModel):
    database_size: int = 0
    last_update: Optional[datetime] = None
    indexes: Dict[str, IndexStats] = {}


class DumpStatus(str, Enum):
    IN_PROGRESS = "in_progress"
    DONE = "done"
    FAILED = "failed"


class Dump(MeiliModel):
    uid: str
    status: Optional[DumpStatus] = None
    started_at: Optional[datetime] = None
    finished_at: Optional[datetime] = None


class ApiErrorPayload(MeiliModel):
    """Error body returned by the server with non-2xx statuses."""

    message: str
    error_code: Optional[str] = None
    error_type: Optional[str] = None
    error_link: Optional[str] = None
