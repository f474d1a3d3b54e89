"""Abstract base for JSON handlers.

A handler turns Python values into JSON text and JSON text back into values
of a caller-described shape (see `meilisearch_client.json.types`). Concrete
handlers differ in the JSON library doing the parsing and serializing; all of
them validate decoded data against the target annotation with pydantic so
any type pydantic understands (models, dataclasses, TypedDicts, builtins)
can serve as a document type.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from functools import lru_cache
from typing import Any

from pydantic import TypeAdapter, ValidationError
from pydantic_core import PydanticSerializationError, to_jsonable_python

from meilisearch_client.exceptions import CodecError
from meilisearch_client.json.types import TypeRef


@lru_cache(maxsize=256)
def type_adapter(type_ref: TypeRef) -> TypeAdapter[Any]:
    """Return a cached pydantic adapter for the descriptor's annotation."""
    return TypeAdapter(type_ref.annotation())


def to_jsonable(value: Any) -> Any:
    """Convert models/dataclasses to plain JSON data using wire aliases.

    ``None`` fields are dropped so unset optional parameters never reach the
    server.
    """
    try:
        return to_jsonable_python(value, by_alias=True, exclude_none=True)
    except PydanticSerializationError as e:
        raise CodecError(f"Unable to serialize value of type {type(value).__name__}", cause=e) from e


class JsonHandler(ABC):
    """Abstract JSON handler interface."""

    name: str = "abstract"

    @abstractmethod
    def encode(self, value: Any) -> str:
        """Serialize `value` to JSON text.

        Implementations should raise `CodecError` for unserializable values.
        """

    @abstractmethod
    def decode(self, text: str, type_ref: TypeRef) -> Any:
        """Parse `text` into a value of the shape described by `type_ref`.

        Implementations should raise `CodecError` on malformed JSON or when the
        payload does not match the target shape.
        """
        raise NotImplementedError

    def _validate(self, data: Any, type_ref: TypeRef) -> Any:
        try:
            return type_adapter(type_ref).validate_python(data)
        except ValidationError as e:
            raise CodecError(
                f"Payload does not match {type_ref.annotation()!r}: {e.error_count()} error(s)",
                cause=e,
            ) from e
