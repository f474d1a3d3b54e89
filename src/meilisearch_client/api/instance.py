"""Instance-wide endpoints: health, version, stats and dumps."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Dict, Optional

from meilisearch_client.api.models import Dump, IndexStats, Stats
from meilisearch_client.exceptions import MeiliSearchError
from meilisearch_client.http.request import HttpMethod, build_path
from meilisearch_client.json.types import MappingOf, Scalar

if TYPE_CHECKING:
    from meilisearch_client.http.factory import RequestFactory
    from meilisearch_client.service_template import ServiceTemplate

_DUMP = Scalar(Dump)


class InstanceHandler:
    def __init__(
        self,
        service_template: "ServiceTemplate",
        *,
        request_factory: Optional["RequestFactory"] = None,
    ) -> None:
        self._template = service_template
        self._factory = request_factory or service_template.request_factory

    def health(self) -> Dict[str, Any]:
        """Return the health payload, e.g. ``{"status": "available"}``.

        Servers answering ``204 No Content`` yield an empty dict.
        """
        request = self._factory.create(HttpMethod.GET, "/health")
        payload = self._template.execute(request, dict, allow_empty=True)
        return payload if payload is not None else {}

    def is_healthy(self) -> bool:
        """Return False instead of raising when the server is unreachable or unhealthy."""
        try:
            self.health()
        except MeiliSearchError:
            return False
        return True

    def get_version(self) -> Dict[str, str]:
        """Return ``commitSha``, ``buildDate`` and ``pkgVersion`` of the server."""
        request = self._factory.create(HttpMethod.GET, "/version")
        return self._template.execute(request, MappingOf(str, str))

    def get_stats(self) -> Stats:
        request = self._factory.create(HttpMethod.GET, "/stats")
        return self._template.execute(request, Stats)

    def get_index_stats(self, uid: str) -> IndexStats:
        request = self._factory.create(HttpMethod.GET, build_path("indexes", uid, "stats"))
        return self._template.execute(request, IndexStats)

    def create_dump(self) -> Dump:
        request = self._factory.create(HttpMethod.POST, "/dumps")
        return self._template.execute(request, _DUMP)

    def get_dump_status(self, uid: str) -> Dump:
        request = self._factory.create(HttpMethod.GET, build_path("dumps", uid, "status"))
        return self._template.execute(request, _DUMP)
