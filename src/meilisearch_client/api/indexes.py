"""Index management: list, fetch, create, update and delete indexes."""

from __future__ import annotations

from typing import TYPE_CHECKING, List, Optional

from meilisearch_client.api.models import Index
from meilisearch_client.http.request import HttpMethod, build_path
from meilisearch_client.json.types import Scalar, SequenceOf

if TYPE_CHECKING:
    from meilisearch_client.http.factory import RequestFactory
    from meilisearch_client.service_template import ServiceTemplate

_INDEX = Scalar(Index)


class IndexesHandler:
    def __init__(
        self,
        service_template: "ServiceTemplate",
        *,
        request_factory: Optional["RequestFactory"] = None,
    ) -> None:
        self._template = service_template
        self._factory = request_factory or service_template.request_factory

    def get_index(self, uid: str) -> Index:
        request = self._factory.create(HttpMethod.GET, build_path("indexes", uid))
        return self._template.execute(request, _INDEX)

    def get_indexes(self) -> List[Index]:
        request = self._factory.create(HttpMethod.GET, "/indexes")
        return self._template.execute(request, SequenceOf(Index))

    def create_index(self, uid: str, primary_key: Optional[str] = None) -> Index:
        """Create an index; `primary_key` is inferred by the server when omitted."""
        body = {"uid": uid, "primaryKey": primary_key} if primary_key else {"uid": uid}
        request = self._factory.create(HttpMethod.POST, "/indexes", body=body)
        return self._template.execute(request, _INDEX)

    def update_index(self, uid: str, primary_key: str) -> Index:
        """Set the primary key of an index that has no documents yet."""
        request = self._factory.create(HttpMethod.PUT, build_path("indexes", uid), body={"primaryKey": primary_key})
        return self._template.execute(request, _INDEX)

    def delete_index(self, uid: str) -> None:
        request = self._factory.create(HttpMethod.DELETE, build_path("indexes", uid))
        self._template.execute(request)
