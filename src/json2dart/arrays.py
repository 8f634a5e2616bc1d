"""Reduce a JSON array's elements to a single element descriptor."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass, field
from typing import Any

from .descriptors import FieldDescriptor, Kind
from .values import ValueKind, classify_number, value_kind

ObjectHandler = Callable[[str, dict[str, Any]], Any]


@dataclass
class ElementConsensus:
    """Scalar kinds seen while scanning one array."""

    key: str
    seen: set[Kind] = field(default_factory=set)
    last: FieldDescriptor | None = None

    def record(self, kind: Kind) -> None:
        self.seen.add(kind)
        self.last = FieldDescriptor(name=self.key, kind=kind, is_list=True)

    def resolve(self) -> FieldDescriptor:
        if len(self.seen) == 1 and self.last is not None:
            return self.last
        return FieldDescriptor(name=self.key, kind=Kind.DYNAMIC, is_list=True)


def unify_array(
    key: str,
    elements: Sequence[Any],
    on_object: ObjectHandler,
    nested_suffix: str = "List",
) -> FieldDescriptor:
    """Infer the element descriptor for the array stored under ``key``.

    The first object element is handed to ``on_object`` under ``key`` and
    ends the scan. The first nested array is unified under
    ``key + nested_suffix`` and also ends the scan. Otherwise scalar kinds
    are pooled: one distinct kind wins, zero or several give ``DYNAMIC``.
    Null elements are ignored.
    """
    consensus = ElementConsensus(key)
    for element in elements:
        tag = value_kind(element)
        if tag is ValueKind.OBJECT:
            on_object(key, element)
            return FieldDescriptor(name=key, kind=Kind.OBJECT, is_list=True, ref=key)
        if tag is ValueKind.ARRAY:
            inner = unify_array(key + nested_suffix, element, on_object, nested_suffix)
            return FieldDescriptor(
                name=key,
                kind=inner.kind,
                is_list=True,
                depth=inner.depth + 1,
                ref=inner.ref,
            )
        if tag is ValueKind.NUMBER:
            consensus.record(classify_number(element))
        elif tag is ValueKind.TEXT:
            consensus.record(Kind.TEXT)
        elif tag is ValueKind.BOOLEAN:
            consensus.record(Kind.BOOLEAN)
    return consensus.resolve()
