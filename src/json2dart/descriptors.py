"""Field descriptors and schemas produced by type inference."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field
from enum import Enum


class Kind(str, Enum):
    """Semantic category assigned to a JSON value."""

    INTEGER = "Integer"
    DOUBLE = "Double"
    TEXT = "Text"
    BOOLEAN = "Boolean"
    OBJECT = "Object"
    DYNAMIC = "DynamicMixed"

    @property
    def dart_type(self) -> str | None:
        """Dart spelling of a scalar kind; ``None`` for ``OBJECT``."""
        return _DART_SCALARS.get(self)


_DART_SCALARS = {
    Kind.INTEGER: "int",
    Kind.DOUBLE: "double",
    Kind.TEXT: "String",
    Kind.BOOLEAN: "bool",
    Kind.DYNAMIC: "dynamic",
}


@dataclass(frozen=True)
class FieldDescriptor:
    """Inferred kind and list-ness of one field.

    ``depth`` counts list levels beyond the first, so ``[[1]]`` is
    ``is_list=True, depth=1``. ``ref`` names the nested schema and is set
    exactly when ``kind`` is ``OBJECT``.
    """

    name: str
    kind: Kind
    is_list: bool = False
    depth: int = 0
    ref: str | None = None

    def __post_init__(self) -> None:
        if (self.kind is Kind.OBJECT) != (self.ref is not None):
            msg = f"field {self.name!r}: ref must be set iff kind is Object"
            raise ValueError(msg)
        if self.depth and not self.is_list:
            raise ValueError(f"field {self.name!r}: depth requires is_list")
        if self.depth < 0:
            raise ValueError(f"field {self.name!r}: depth must be >= 0")

    @property
    def is_object(self) -> bool:
        return self.kind is Kind.OBJECT

    def as_list(self, depth: int = 0) -> FieldDescriptor:
        """Return a copy marked as a list at the given extra depth."""
        return FieldDescriptor(
            name=self.name, kind=self.kind, is_list=True, depth=depth, ref=self.ref
        )

    def describe(self) -> str:
        """Human-readable type, e.g. ``List<List<Text>>``."""
        label = self.ref if self.is_object else self.kind.value
        if self.is_list:
            for _ in range(self.depth + 1):
                label = f"List<{label}>"
        return label


@dataclass
class Schema:
    """A named, ordered mapping from field key to descriptor."""

    name: str
    fields: dict[str, FieldDescriptor] = field(default_factory=dict)

    def __iter__(self) -> Iterator[FieldDescriptor]:
        return iter(self.fields.values())

    def __len__(self) -> int:
        return len(self.fields)

    def __getitem__(self, key: str) -> FieldDescriptor:
        return self.fields[key]

    def __contains__(self, key: object) -> bool:
        return key in self.fields

    def add(self, descriptor: FieldDescriptor) -> None:
        self.fields[descriptor.name] = descriptor

    def ordered(self, order: str = "document") -> list[FieldDescriptor]:
        """Fields in rendering order: ``document`` (insertion) or ``sorted``."""
        if order == "sorted":
            return [self.fields[key] for key in sorted(self.fields)]
        return list(self.fields.values())

    def references(self) -> list[str]:
        """Distinct nested schema names referenced by this schema, in field order."""
        refs = [desc.ref for desc in self if desc.ref is not None]
        return list(dict.fromkeys(refs))
