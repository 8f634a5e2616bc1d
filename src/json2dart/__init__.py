"""
json2dart
=========

Infer a typed schema from a sample JSON document and generate Dart model
classes with ``toJson``/``fromJson`` round-trip methods.
"""

from importlib.metadata import PackageNotFoundError, version


def get_version() -> str:
    """Return the installed package version or '0.0.0' when unavailable."""
    try:
        return version("json2dart")
    except PackageNotFoundError:
        return "0.0.0"


__all__ = ["get_version"]
