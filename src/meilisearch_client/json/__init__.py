"""JSON handlers and target type descriptors.

`OrjsonJsonHandler` is not imported here; it needs the optional orjson
dependency and is loaded by `meilisearch_client.providers` on demand.
"""

from .base_handler import JsonHandler
from .pydantic_handler import PydanticJsonHandler
from .stdlib_handler import StdlibJsonHandler
from .types import GenericOf, MappingOf, Scalar, SequenceOf, TypeRef

__all__ = [
    "JsonHandler",
    "PydanticJsonHandler",
    "StdlibJsonHandler",
    "TypeRef",
    "Scalar",
    "SequenceOf",
    "MappingOf",
    "GenericOf",
]
