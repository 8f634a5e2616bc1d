"""Render inferred schemas into Dart model classes.

Each field contributes coordinated fragments to five lists (imports,
attributes, constructor parameters, serializer entries, deserializer
entries, plus the temporaries the two methods need). The lists are
assembled by a single Jinja2 template so identical schemas always render
to identical text.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from pathlib import Path

from jinja2 import Environment, PackageLoader, StrictUndefined

from .config import GeneratorConfig
from .descriptors import FieldDescriptor, Schema
from .naming import artifact_file_name, model_type_name, to_camel_case

ArtifactSink = Callable[[str, str], Path | None]

TEMPLATE_NAME = "model.dart.jinja2"
JSON_MAP = "Map<String, dynamic>"


def dart_string(value: str) -> str:
    """Quote ``value`` as a Dart string literal without interpolation."""
    escaped = (
        value.replace("\\", "\\\\")
        .replace('"', '\\"')
        .replace("$", "\\$")
        .replace("\n", "\\n")
        .replace("\r", "\\r")
    )
    return f'"{escaped}"'


def _lambda_var(level: int) -> str:
    return "i" if level == 0 else f"i{level}"


def _wrap_list(inner: str, levels: int) -> str:
    for _ in range(levels):
        inner = f"List<{inner}>"
    return inner


@dataclass
class ModelFragments:
    """Per-schema fragment lists fed to the artifact template."""

    imports: list[str] = field(default_factory=list)
    attributes: list[str] = field(default_factory=list)
    constructor: list[str] = field(default_factory=list)
    pre_to_json: list[str] = field(default_factory=list)
    to_json: list[str] = field(default_factory=list)
    pre_from_json: list[str] = field(default_factory=list)
    from_json: list[str] = field(default_factory=list)


class DartModelGenerator:
    """Turns a ``Schema`` into artifact text and hands it to ``sink``."""

    def __init__(
        self,
        sink: ArtifactSink | None = None,
        config: GeneratorConfig | None = None,
    ) -> None:
        self.sink = sink
        self.config = config or GeneratorConfig()
        self.env = Environment(
            loader=PackageLoader("json2dart", "templates"),
            trim_blocks=True,
            lstrip_blocks=True,
            keep_trailing_newline=True,
            undefined=StrictUndefined,
            autoescape=False,  # noqa: S701 - renders Dart source, not HTML
        )

    def __call__(self, schema: Schema) -> None:
        self.generate(schema)

    def generate(self, schema: Schema) -> str:
        """Render ``schema`` and pass the text to the sink, if any."""
        text = self.render(schema)
        if self.sink is not None:
            self.sink(text, schema.name)
        return text

    def model_name(self, schema_name: str) -> str:
        return model_type_name(schema_name, self.config.model_suffix)

    def fragments(self, schema: Schema) -> ModelFragments:
        parts = ModelFragments()
        for descriptor in schema.ordered(self.config.field_order):
            self._add_field(parts, descriptor)
        parts.imports = list(dict.fromkeys(parts.imports))
        return parts

    def render(self, schema: Schema) -> str:
        parts = self.fragments(schema)
        model = self.model_name(schema.name)
        template = self.env.get_template(TEMPLATE_NAME)
        text = template.render(
            model=model,
            instance=to_camel_case(model),
            imports=parts.imports,
            attributes=parts.attributes,
            constructor=parts.constructor,
            pre_to_json=parts.pre_to_json,
            to_json=parts.to_json,
            pre_from_json=parts.pre_from_json,
            from_json=parts.from_json,
        )
        return "\n".join(line.rstrip() for line in text.splitlines()) + "\n"

    def dart_type(self, descriptor: FieldDescriptor) -> str:
        """Declared Dart type of a field, e.g. ``List<AddressModel>``."""
        if descriptor.is_object:
            element = self.model_name(descriptor.ref)
        else:
            element = descriptor.kind.dart_type
        if not descriptor.is_list:
            return element
        return _wrap_list(element, descriptor.depth + 1)

    def _add_field(self, parts: ModelFragments, descriptor: FieldDescriptor) -> None:
        attr = to_camel_case(descriptor.name)
        key = dart_string(descriptor.name)
        declared = self.dart_type(descriptor)

        parts.attributes.append(f"{declared} {attr};")
        parts.constructor.append(f"required this.{attr},")

        if descriptor.is_object:
            target = dart_string(self._artifact_name(descriptor.ref))
            parts.imports.append(f"import {target};")
            model = self.model_name(descriptor.ref)
            if descriptor.is_list:
                json_type = _wrap_list(JSON_MAP, descriptor.depth + 1)
                encoded = self._encode_list(f"this.{attr}", 0, descriptor.depth)
                decoded = self._decode_list(
                    f"data[{key}]", 0, descriptor.depth, lambda v: f"{model}.fromJson({v})"
                )
            else:
                json_type = JSON_MAP
                encoded = f"this.{attr}.toJson()"
                decoded = f"{model}.fromJson(data[{key}])"
            parts.pre_to_json.append(f"{json_type} {attr}Json = {encoded};")
            parts.to_json.append(f"{key}: {attr}Json,")
            parts.pre_from_json.append(f"{declared} {attr}Tmp = {decoded};")
            parts.from_json.append(f"{attr}: {attr}Tmp,")
            return

        parts.to_json.append(f"{key}: this.{attr},")
        if descriptor.is_list:
            element = descriptor.kind.dart_type
            decoded = self._decode_list(f"data[{key}]", 0, descriptor.depth, None, element)
            parts.pre_from_json.append(f"{declared} {attr}Tmp = {decoded};")
            parts.from_json.append(f"{attr}: {attr}Tmp,")
        else:
            parts.from_json.append(f"{attr}: data[{key}],")

    def _artifact_name(self, schema_name: str) -> str:
        return artifact_file_name(schema_name, self.config.file_suffix, self.config.extension)

    def _encode_list(self, expr: str, level: int, depth: int) -> str:
        var = _lambda_var(level)
        if level == depth:
            inner = f"{var}.toJson()"
        else:
            inner = self._encode_list(var, level + 1, depth)
        return f"{expr}.map(({var}) => {inner}).toList()"

    def _decode_list(
        self,
        expr: str,
        level: int,
        depth: int,
        leaf: Callable[[str], str] | None,
        element: str | None = None,
    ) -> str:
        raw = f"({expr} as List)"
        var = _lambda_var(level)
        if level == depth:
            if leaf is None:
                return f"{raw}.cast<{element}>()"
            return f"{raw}.map(({var}) => {leaf(var)}).toList()"
        inner = self._decode_list(var, level + 1, depth, leaf, element)
        return f"{raw}.map(({var}) => {inner}).toList()"
