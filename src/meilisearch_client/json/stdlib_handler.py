"""JSON handler on the standard library ``json`` module."""

from __future__ import annotations

import json
from typing import Any

from meilisearch_client.exceptions import CodecError
from meilisearch_client.json.base_handler import JsonHandler, to_jsonable
from meilisearch_client.json.types import TypeRef


class StdlibJsonHandler(JsonHandler):
    name = "json"

    def encode(self, value: Any) -> str:
        data = to_jsonable(value)
        try:
            return json.dumps(data, separators=(",", ":"), ensure_ascii=False)
        except (TypeError, ValueError) as e:
            raise CodecError(f"Unable to serialize value of type {type(value).__name__}", cause=e) from e

    def decode(self, text: str, type_ref: TypeRef) -> Any:
        try:
            data = json.loads(text)
        except json.JSONDecodeError as e:
            raise CodecError(f"Malformed JSON payload: {e}", cause=e) from e
        return self._validate(data, type_ref)
