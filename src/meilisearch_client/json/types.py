"""Target type descriptors for typed JSON decoding.

Generic parameters are not recoverable from a value or a bare class at the
call boundary (``list`` says nothing about its elements), so every call site
states the expected shape explicitly with a `TypeRef`.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, List, Mapping, Sequence, Tuple


class TypeRef:
    """Base class of the descriptor variants."""

    def annotation(self) -> Any:
        """Return the Python type annotation this descriptor stands for."""
        raise NotImplementedError

    @staticmethod
    def of(target: Any, *params: Any) -> "TypeRef":
        """Build a descriptor from call-site arguments.

        ``of(Movie)`` is a plain record, ``of(list, Movie)`` a list of records,
        ``of(dict, str, str)`` a mapping and ``of(SearchResponse, Movie)`` a
        generic container parameterized by the document type. A `TypeRef`
        is returned unchanged.
        """
        if isinstance(target, TypeRef):
            if params:
                raise TypeError("A TypeRef cannot take additional type parameters")
            return target
        if not params:
            return Scalar(target)
        if target in (list, List, Sequence):
            if len(params) != 1:
                raise TypeError(f"A sequence takes exactly one element type, got {len(params)}")
            return SequenceOf(params[0])
        if target in (dict, Dict, Mapping):
            if len(params) == 1:
                return MappingOf(str, params[0])
            if len(params) != 2:
                raise TypeError(f"A mapping takes a key and a value type, got {len(params)}")
            return MappingOf(params[0], params[1])
        return GenericOf(target, tuple(params))


@dataclass(frozen=True)
class Scalar(TypeRef):
    type: Any

    def annotation(self) -> Any:
        return self.type


@dataclass(frozen=True)
class SequenceOf(TypeRef):
    element: Any

    def annotation(self) -> Any:
        return List[_annotation(self.element)]  # type: ignore[misc]


@dataclass(frozen=True)
class MappingOf(TypeRef):
    key: Any
    value: Any

    def annotation(self) -> Any:
        return Dict[_annotation(self.key), _annotation(self.value)]  # type: ignore[misc]


@dataclass(frozen=True)
class GenericOf(TypeRef):
    container: Any
    arguments: Tuple[Any, ...]

    def annotation(self) -> Any:
        args = tuple(_annotation(a) for a in self.arguments)
        return self.container[args if len(args) > 1 else args[0]]


def _annotation(value: Any) -> Any:
    # Nested descriptors, e.g. SequenceOf(SequenceOf(int))
    if isinstance(value, TypeRef):
        return value.annotation()
    return value
