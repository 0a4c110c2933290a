"""Exceptions raised while documenting ConfigMap manifests."""

from pathlib import Path
from typing import Union

Source = Union[str, Path]


class ConfigMapDocError(Exception):
    """Base class for errors tied to a single input manifest.

    Attributes:
        source: Path (or label) of the manifest that failed.
        message: Human-readable description of the failure.
    """

    def __init__(self, source: Source, message: str):
        self.source = source
        self.message = message
        super().__init__(f"{source}: {message}")


class ReadError(ConfigMapDocError):
    """The manifest file could not be read."""


class ParseError(ConfigMapDocError):
    """The manifest or its embedded example is not valid YAML of the expected shape."""


class MalformedInputError(ConfigMapDocError):
    """The manifest decodes but its content cannot be turned into documentation."""
