"""Generate Markdown documentation for Kubernetes ConfigMaps.

This package reads ConfigMap manifests whose `data._example` holds an example
YAML document, and documents every key of that example together with the
comment block written above it.
"""

from .errors import ConfigMapDocError, MalformedInputError, ParseError, ReadError
from .example_parser import ExampleEntry, ExampleParser
from .manifest_parser import Manifest, ManifestParser
from .writer import ConfigMapDocWriter

__all__ = [
    "ConfigMapDocWriter",
    "ConfigMapDocError",
    "ExampleEntry",
    "ExampleParser",
    "MalformedInputError",
    "Manifest",
    "ManifestParser",
    "ParseError",
    "ReadError",
]
