"""Error taxonomy for a generation run. Every error is fatal to the run."""

from __future__ import annotations


class Json2DartError(Exception):
    """Base class for all errors surfaced to the operator."""


class InputMissing(Json2DartError):
    """No input document path was supplied."""


class FileOpenError(Json2DartError):
    """The input path does not exist or cannot be opened."""


class FileReadError(Json2DartError):
    """The input file was opened but could not be read."""


class ParseError(Json2DartError):
    """The input is not valid JSON or its top level is not an object."""


class ArtifactWriteError(Json2DartError):
    """A generated artifact could not be created or written."""


class ConfigError(Json2DartError):
    """A generator configuration file is unreadable or invalid."""


__all__ = [
    "Json2DartError",
    "InputMissing",
    "FileOpenError",
    "FileReadError",
    "ParseError",
    "ArtifactWriteError",
    "ConfigError",
]
