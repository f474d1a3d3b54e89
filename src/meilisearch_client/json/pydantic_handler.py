"""JSON handler backed entirely by pydantic-core."""

from __future__ import annotations

from typing import Any

from pydantic import ValidationError
from pydantic_core import PydanticSerializationError, to_json

from meilisearch_client.exceptions import CodecError
from meilisearch_client.json.base_handler import JsonHandler, type_adapter
from meilisearch_client.json.types import TypeRef


class PydanticJsonHandler(JsonHandler):
    """Parses and validates in one pass with ``TypeAdapter.validate_json``."""

    name = "pydantic"

    def encode(self, value: Any) -> str:
        try:
            return to_json(value, by_alias=True, exclude_none=True).decode("utf-8")
        except PydanticSerializationError as e:
            raise CodecError(f"Unable to serialize value of type {type(value).__name__}", cause=e) from e

    def decode(self, text: str, type_ref: TypeRef) -> Any:
        try:
            return type_adapter(type_ref).validate_json(text)
        except ValidationError as e:
            # validate_json reports malformed JSON as a validation error too
            raise CodecError(
                f"Payload does not match {type_ref.annotation()!r}: {e.error_count()} error(s)",
                cause=e,
            ) from e
