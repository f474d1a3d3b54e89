import json
from typing import Any, List

import pytest
from pydantic import BaseModel

from meilisearch_client.api.documents import DocumentHandler
from meilisearch_client.exceptions import ErrorKind, MeiliSearchRuntimeError
from meilisearch_client.http.factory import BasicRequestFactory, RequestFactory
from meilisearch_client.http.request import HttpMethod, HttpRequest, build_path
from meilisearch_client.json import StdlibJsonHandler


class Movie(BaseModel):
    id: int
    title: str


class RecordingTemplate:
    """Stands in for a service template and keeps every request it is given."""

    def __init__(self, factory: RequestFactory) -> None:
        self.request_factory = factory
        self.requests: List[HttpRequest] = []

    def execute(self, request: HttpRequest, target: Any = None, *params: Any, **options: Any) -> Any:
        self.requests.append(request)
        return None


@pytest.fixture
def factory() -> BasicRequestFactory:
    return BasicRequestFactory(StdlibJsonHandler())


def test_empty_params_are_omitted(factory: BasicRequestFactory) -> None:
    req = factory.create(
        HttpMethod.GET,
        "/indexes/foo/documents",
        {"limit": 20, "offset": None, "attributesToRetrieve": "", "fields": []},
    )
    assert req.target == "/indexes/foo/documents?limit=20"
    assert req.params == (("limit", "20"),)


def test_params_keep_order_and_stringify(factory: BasicRequestFactory) -> None:
    req = factory.create(
        HttpMethod.GET,
        "/indexes/foo/documents",
        {"offset": 0, "limit": 5, "attributesToRetrieve": ["id", "title"], "flag": False},
    )
    assert req.target == "/indexes/foo/documents?offset=0&limit=5&attributesToRetrieve=id,title&flag=false"


def test_no_params_leaves_path_untouched(factory: BasicRequestFactory) -> None:
    req = factory.create(HttpMethod.GET, "/health")
    assert req.target == "/health"
    assert req.body is None


def test_preserialized_body_is_passed_through(factory: BasicRequestFactory) -> None:
    raw = '[{"id":1,"title":"Carol"}]'
    assert factory.create(HttpMethod.POST, "/x", body=raw).body == raw
    assert factory.create(HttpMethod.POST, "/x", body=raw.encode("utf-8")).body == raw


def test_typed_body_is_encoded(factory: BasicRequestFactory) -> None:
    req = factory.create(HttpMethod.POST, "/x", body=[Movie(id=1, title="Carol")])
    assert json.loads(req.body or "") == [{"id": 1, "title": "Carol"}]


def test_unserializable_body_raises_normalized_error(factory: BasicRequestFactory) -> None:
    with pytest.raises(MeiliSearchRuntimeError) as exc:
        factory.create(HttpMethod.POST, "/x", body=object())
    assert exc.value.kind is ErrorKind.CODEC
    assert exc.value.cause is not None


def test_method_accepts_plain_string(factory: BasicRequestFactory) -> None:
    assert factory.create("PUT", "/x").method is HttpMethod.PUT  # type: ignore[arg-type]


def test_request_is_immutable(factory: BasicRequestFactory) -> None:
    req = factory.create(HttpMethod.GET, "/x")
    with pytest.raises(AttributeError):
        req.path = "/y"  # type: ignore[misc]


# ---------- Paths built by the document handler ----------


def test_default_documents_listing_path(factory: BasicRequestFactory) -> None:
    template = RecordingTemplate(factory)
    handler = DocumentHandler(template, "foo", Movie)  # type: ignore[arg-type]
    handler.get_documents()
    assert template.requests[0].method is HttpMethod.GET
    assert template.requests[0].target == "/indexes/foo/documents?limit=20"


def test_document_write_paths(factory: BasicRequestFactory) -> None:
    template = RecordingTemplate(factory)
    handler = DocumentHandler(template, "foo", Movie)  # type: ignore[arg-type]
    handler.add_documents([Movie(id=1, title="Carol")], primary_key="id")
    handler.update_documents('[{"id":1}]')
    handler.delete_document(1)
    handler.delete_documents([1, 2])
    handler.delete_all_documents()
    got = [(r.method.value, r.target) for r in template.requests]
    assert got == [
        ("POST", "/indexes/foo/documents?primaryKey=id"),
        ("PUT", "/indexes/foo/documents"),
        ("DELETE", "/indexes/foo/documents/1"),
        ("DELETE", "/indexes/foo/documents/delete-batch"),
        ("DELETE", "/indexes/foo/documents"),
    ]
    assert template.requests[3].body == "[1,2]"


def test_build_path_encodes_each_segment() -> None:
    assert build_path("indexes", "movies", "documents", 7) == "/indexes/movies/documents/7"
    assert build_path("indexes", "a b", "documents", "x/y?z#") == "/indexes/a%20b/documents/x%2Fy%3Fz%23"
    assert build_path("dumps", "20210106-é", "status") == "/dumps/20210106-%C3%A9/status"
