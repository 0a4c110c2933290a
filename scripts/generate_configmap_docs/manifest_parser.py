"""Parser for the outer Kubernetes ConfigMap manifest.

Only the fields needed for documentation are decoded. Unknown fields are
ignored and missing ones fall back to empty strings; the manifest is not
validated against the Kubernetes schema.
"""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict

import yaml

from .constants import EXAMPLE_FIELD
from .errors import ParseError, ReadError, Source

logger = logging.getLogger(__name__)

NULL_TAG = "tag:yaml.org,2002:null"


class _ManifestLoader(yaml.SafeLoader):
    """SafeLoader that keeps plain scalars as their source text.

    Only null is still resolved implicitly, so unquoted values such as `on`,
    `0123` or `1.10` come back exactly as written.
    """


_ManifestLoader.yaml_implicit_resolvers = {
    first: [(tag, regexp) for tag, regexp in resolvers if tag == NULL_TAG]
    for first, resolvers in yaml.SafeLoader.yaml_implicit_resolvers.items()
}


@dataclass(frozen=True)
class Manifest:
    """The parts of a ConfigMap manifest used to render its documentation."""

    api_version: str = ""
    kind: str = ""
    name: str = ""
    namespace: str = ""
    example_raw: str = ""


def _as_mapping(value: Any, field: str, source: Source) -> Dict[Any, Any]:
    """Return *value* as a mapping, treating a missing field as empty.

    Raises:
        ParseError: If the field is present but not a mapping.
    """
    if value is None:
        return {}
    if not isinstance(value, dict):
        raise ParseError(source, f"failed to parse YAML: `{field}` must be a mapping, got {type(value).__name__}")
    return value


def _as_string(value: Any, field: str, source: Source) -> str:
    """Return a scalar field as a string, treating a missing field as empty.

    Raises:
        ParseError: If the field is a collection.
    """
    if value is None:
        return ""
    if isinstance(value, (dict, list)):
        raise ParseError(source, f"failed to parse YAML: `{field}` must be a scalar, got {type(value).__name__}")
    return str(value)


def parse_manifest(content: str, source: Source) -> Manifest:
    """Decode a ConfigMap manifest from YAML text.

    Args:
        content: The manifest text.
        source: Path or label used to identify the manifest in errors.

    Returns:
        Manifest: The decoded manifest.

    Raises:
        ParseError: If the text is not valid YAML or its root is not a mapping.
    """
    try:
        doc = yaml.load(content, Loader=_ManifestLoader)
    except yaml.YAMLError as e:
        raise ParseError(source, f"failed to parse YAML: {e}") from e

    if not isinstance(doc, dict):
        kind = "empty document" if doc is None else type(doc).__name__
        raise ParseError(source, f"failed to parse YAML: root must be a mapping, got {kind}")

    metadata = _as_mapping(doc.get("metadata"), "metadata", source)
    data = _as_mapping(doc.get("data"), "data", source)

    example_raw = data.get(EXAMPLE_FIELD)
    if example_raw is not None and not isinstance(example_raw, str):
        raise ParseError(
            source,
            f"failed to parse YAML: `data.{EXAMPLE_FIELD}` must be a string, got {type(example_raw).__name__}",
        )

    return Manifest(
        api_version=_as_string(doc.get("apiVersion"), "apiVersion", source),
        kind=_as_string(doc.get("kind"), "kind", source),
        name=_as_string(metadata.get("name"), "metadata.name", source),
        namespace=_as_string(metadata.get("namespace"), "metadata.namespace", source),
        example_raw=example_raw or "",
    )


class ManifestParser:
    """Reads and decodes a ConfigMap manifest file."""

    def __init__(self, file_path: Path):
        """Initialize the parser with a file path.

        Args:
            file_path: Path to the manifest YAML file.
        """
        self.file_path = file_path

    def _read(self) -> str:
        """Read the manifest file as UTF-8 text.

        Raises:
            ReadError: If the file cannot be read.
            ParseError: If the file is not valid UTF-8.
        """
        try:
            with open(self.file_path, "r", encoding="utf-8") as f:
                return f.read()
        except UnicodeDecodeError as e:
            raise ParseError(self.file_path, f"failed to parse YAML: file is not valid UTF-8: {e}") from e
        except OSError as e:
            raise ReadError(self.file_path, f"failed to read file: {e}") from e

    def parse(self) -> Manifest:
        """Read and decode the manifest.

        Returns:
            Manifest: The decoded manifest.
        """
        content = self._read()
        manifest = parse_manifest(content, self.file_path)
        logger.debug(f"Parsed {manifest.kind or 'manifest'} '{manifest.name}' from {self.file_path}")
        return manifest
