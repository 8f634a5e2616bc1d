"""Depth-first type inference over a decoded JSON document."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from .arrays import unify_array
from .descriptors import FieldDescriptor, Kind, Schema
from .values import ValueKind, classify_number, value_kind

SchemaSink = Callable[[Schema], None]


class SchemaInferrer:
    """Walks JSON objects and hands each completed schema to ``sink``.

    Nested objects are inferred (and sunk) before the object containing
    them, so a parent is only ever rendered after all of its children.
    Inference is local to each object: the same key may get different
    kinds in different objects, and a repeated nested name is simply sunk
    again.
    """

    def __init__(self, sink: SchemaSink, nested_list_suffix: str = "List") -> None:
        self.sink = sink
        self.nested_list_suffix = nested_list_suffix

    def infer(self, name: str, obj: dict[str, Any]) -> Schema:
        schema = Schema(name)
        for key, value in obj.items():
            descriptor = self.describe(key, value)
            # null samples carry no type information; the key is dropped
            if descriptor is not None:
                schema.add(descriptor)
        self.sink(schema)
        return schema

    def describe(self, key: str, value: Any) -> FieldDescriptor | None:
        tag = value_kind(value)
        if tag is ValueKind.OBJECT:
            self.infer(key, value)
            return FieldDescriptor(name=key, kind=Kind.OBJECT, ref=key)
        if tag is ValueKind.ARRAY:
            return unify_array(key, value, self.infer, self.nested_list_suffix)
        if tag is ValueKind.NULL:
            return None
        if tag is ValueKind.NUMBER:
            return FieldDescriptor(name=key, kind=classify_number(value))
        if tag is ValueKind.TEXT:
            return FieldDescriptor(name=key, kind=Kind.TEXT)
        return FieldDescriptor(name=key, kind=Kind.BOOLEAN)
