"""Document operations on a single index.

A `DocumentHandler` is bound to one index uid and one document type; search
hits and fetched documents are decoded into that type.
"""

from __future__ import annotations

import threading
import time
from typing import TYPE_CHECKING, Any, Callable, Generic, List, Optional, Sequence, TypeVar, Union

from meilisearch_client.api.models import SearchRequest, SearchResponse, Update, UpdateStatus
from meilisearch_client.exceptions import MeiliSearchTimeoutError, MeiliSearchUpdateFailedError
from meilisearch_client.http.request import HttpMethod, build_path
from meilisearch_client.json.types import GenericOf, Scalar, SequenceOf

if TYPE_CHECKING:
    from meilisearch_client.http.factory import RequestFactory
    from meilisearch_client.service_template import ServiceTemplate

T = TypeVar("T")

_UPDATE = Scalar(Update)
_UPDATES = SequenceOf(Update)

Documents = Union[str, bytes, Sequence[Any]]


class DocumentHandler(Generic[T]):
    """Documents, search and update tracking for one index.

    Parameters
    ----------
    service_template:
        Template executing the requests.
    index_uid:
        Uid of the index.
    index_model:
        Document type, e.g. a pydantic model or dataclass. ``dict`` keeps
        documents schemaless.
    request_factory:
        Factory building the requests; defaults to the template's.

    Every method raises `MeiliSearchRuntimeError` when the call fails.
    """

    def __init__(
        self,
        service_template: "ServiceTemplate",
        index_uid: str,
        index_model: Any = dict,
        *,
        request_factory: Optional["RequestFactory"] = None,
    ) -> None:
        self._template = service_template
        self._factory = request_factory or service_template.request_factory
        self.index_uid = index_uid
        self.index_model = index_model

    def _path(self, *parts: Any) -> str:
        return build_path("indexes", self.index_uid, "documents", *parts)

    def _write(self, method: HttpMethod, path: str, data: Any, params: Optional[dict] = None) -> Update:
        return self._template.execute(self._factory.create(method, path, params, data), _UPDATE)

    def get_document(self, identifier: Union[str, int]) -> T:
        request = self._factory.create(HttpMethod.GET, self._path(identifier))
        return self._template.execute(request, self.index_model)

    def get_documents(
        self,
        limit: int = 20,
        *,
        offset: Optional[int] = None,
        attributes_to_retrieve: Optional[Sequence[str]] = None,
    ) -> List[T]:
        """Return up to `limit` documents from the index."""
        params = {
            "limit": limit,
            "offset": offset,
            "attributesToRetrieve": attributes_to_retrieve,
        }
        request = self._factory.create(HttpMethod.GET, self._path(), params)
        return self._template.execute(request, list, self.index_model)

    def add_documents(self, data: Documents, *, primary_key: Optional[str] = None) -> Update:
        """Add documents, replacing existing ones with the same id.

        `data` is either already serialized JSON or a sequence of documents.
        """
        return self._write(HttpMethod.POST, self._path(), data, {"primaryKey": primary_key})

    def replace_documents(self, data: Documents, *, primary_key: Optional[str] = None) -> Update:
        return self.add_documents(data, primary_key=primary_key)

    def update_documents(self, data: Documents, *, primary_key: Optional[str] = None) -> Update:
        """Add documents, merging fields into existing ones with the same id."""
        return self._write(HttpMethod.PUT, self._path(), data, {"primaryKey": primary_key})

    def delete_document(self, identifier: Union[str, int]) -> Update:
        return self._write(HttpMethod.DELETE, self._path(identifier), None)

    def delete_all_documents(self) -> Update:
        return self._write(HttpMethod.DELETE, self._path(), None)

    def delete_documents(self, identifiers: Sequence[Union[str, int]]) -> Update:
        """Delete a batch of documents by id."""
        return self._write(HttpMethod.DELETE, self._path("delete-batch"), list(identifiers))

    def delete_documents_by(self, documents: Sequence[T], uid_resolver: Callable[[T], Union[str, int]]) -> Update:
        """Delete `documents`, taking each id from `uid_resolver(document)`."""
        return self.delete_documents([uid_resolver(d) for d in documents])

    def search(self, query: Union[str, SearchRequest, None] = None, **options: Any) -> SearchResponse[T]:
        """Search the index.

        `query` is a query string or a full `SearchRequest`; keyword options
        (``limit``, ``filters``, ``attributes_to_retrieve``...) build or
        override a request.
        """
        if isinstance(query, SearchRequest):
            sr = query.model_copy(update=options) if options else query
        else:
            sr = SearchRequest(q=query, **options)
        request = self._factory.create(HttpMethod.POST, build_path("indexes", self.index_uid, "search"), body=sr)
        return self._template.execute(request, GenericOf(SearchResponse, (self.index_model,)))

    def get_update(self, update_id: int) -> Update:
        request = self._factory.create(HttpMethod.GET, build_path("indexes", self.index_uid, "updates", update_id))
        return self._template.execute(request, _UPDATE)

    def get_updates(self) -> List[Update]:
        request = self._factory.create(HttpMethod.GET, build_path("indexes", self.index_uid, "updates"))
        return self._template.execute(request, _UPDATES)

    def wait_for_pending_update(
        self,
        update_id: int,
        timeout_in_ms: int = 5000,
        interval_in_ms: int = 50,
        *,
        cancel: Optional[threading.Event] = None,
    ) -> Update:
        """Block until the update is processed and return its final state.

        Parameters
        ----------
        update_id: int
            Id returned by a write operation.
        timeout_in_ms: int
            Deadline, checked before each poll.
        interval_in_ms: int
            Pause between polls.
        cancel: threading.Event | None
            Setting this event from another thread ends the wait.

        Raises
        ------
        MeiliSearchTimeoutError
            The deadline passed or the wait was cancelled.
        MeiliSearchUpdateFailedError
            The server reported the update as failed.
        """
        interval = interval_in_ms / 1000.0
        start = time.monotonic()
        elapsed_ms = 0.0
        while True:
            if elapsed_ms >= timeout_in_ms:
                raise MeiliSearchTimeoutError(
                    f"Update {update_id} not processed after {timeout_in_ms}ms"
                )
            update = self.get_update(update_id)
            if update.status == UpdateStatus.PROCESSED:
                return update
            if update.status == UpdateStatus.FAILED:
                raise MeiliSearchUpdateFailedError(update)
            if cancel is not None:
                if cancel.wait(interval):
                    raise MeiliSearchTimeoutError(f"Waiting for update {update_id} was cancelled")
            else:
                time.sleep(interval)
            elapsed_ms = (time.monotonic() - start) * 1000.0
