"""JSON handler using orjson for parsing and serialization."""

from __future__ import annotations

from typing import Any

from meilisearch_client.exceptions import CodecError
from meilisearch_client.json.base_handler import JsonHandler, to_jsonable
from meilisearch_client.json.types import TypeRef


class OrjsonJsonHandler(JsonHandler):
    """orjson does the byte work, pydantic validates the parsed data."""

    name = "orjson"

    def __init__(self) -> None:
        import orjson

        self._orjson = orjson

    def encode(self, value: Any) -> str:
        data = to_jsonable(value)
        try:
            return self._orjson.dumps(data).decode("utf-8")
        except TypeError as e:
            raise CodecError(f"Unable to serialize value of type {type(value).__name__}", cause=e) from e

    def decode(self, text: str, type_ref: TypeRef) -> Any:
        try:
            data = self._orjson.loads(text)
        except self._orjson.JSONDecodeError as e:
            raise CodecError(f"Malformed JSON payload: {e}", cause=e) from e
        return self._validate(data, type_ref)
