"""Identifier casing for generated types, fields and artifact files."""

from __future__ import annotations

import re
from pathlib import Path

_BOUNDARY = re.compile(r"(^[A-Za-z])|_([A-Za-z])")


def to_camel_case(key: str) -> str:
    """Lower-camel-case a source key: ``user_name`` -> ``userName``.

    Letters following an underscore are upper-cased and the underscore is
    removed, then the first character is lower-cased. Other characters
    pass through untouched.
    """
    if not key:
        return key
    joined = _BOUNDARY.sub(lambda m: (m.group(1) or m.group(2)).upper(), key)
    return joined[0].lower() + joined[1:]


def capitalize_first(name: str) -> str:
    return name[:1].upper() + name[1:]


def model_type_name(schema_name: str, suffix: str = "Model") -> str:
    """``address`` -> ``AddressModel``."""
    return capitalize_first(schema_name) + suffix


def artifact_file_name(schema_name: str, file_suffix: str = "_model", extension: str = ".dart") -> str:
    """``address`` -> ``address_model.dart``."""
    return f"{schema_name}{file_suffix}{extension}"


def file_stem(path: str | Path) -> str:
    """File name without its final extension, used as the root schema name."""
    return Path(path).stem
