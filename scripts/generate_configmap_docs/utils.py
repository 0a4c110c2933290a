"""Formatting helpers shared by the ConfigMap documentation generator."""

from typing import List

import yaml

from .constants import DATA_INDENT, NESTED_INDENT
from .errors import MalformedInputError, Source
from .example_parser import ExampleValue, ScalarValue

DOCUMENT_END_MARKER = "...\n"


class _DocDumper(yaml.SafeDumper):
    """SafeDumper that writes multi-line strings as literal blocks."""


def _represent_str(dumper: yaml.SafeDumper, data: str) -> yaml.ScalarNode:
    if "\n" in data:
        return dumper.represent_scalar("tag:yaml.org,2002:str", data, style="|")
    return dumper.represent_str(data)


_DocDumper.add_representer(str, _represent_str)


def capitalize_first(text: str) -> str:
    """Upper-case the first character of *text*, leaving the rest untouched."""
    return text[:1].upper() + text[1:]


def derive_title(name: str, source: Source) -> str:
    """Derive the document title from a ConfigMap name.

    Everything up to and including the first ``-`` is dropped and the first
    character of the remainder is upper-cased, e.g. ``config-autoscaler``
    becomes ``Autoscaler``.

    Args:
        name: The ConfigMap's ``metadata.name``.
        source: Path or label of the manifest, used in errors.

    Returns:
        The title.

    Raises:
        MalformedInputError: If the name has no ``-`` followed by a suffix.
    """
    _, separator, remainder = name.partition("-")
    if not separator or not remainder:
        raise MalformedInputError(
            source, f"metadata.name '{name}' must have a '-' separated suffix to derive a title from"
        )
    return capitalize_first(remainder)


def format_key_title(key: str) -> str:
    """Format a dash-separated key as a heading, e.g. ``max-scale`` -> ``Max Scale``."""
    return " ".join(capitalize_first(word) for word in key.split("-"))


def comment_lines(head_comment: str) -> List[str]:
    """Strip the ``#`` marker and surrounding whitespace from each comment line.

    An empty comment still yields a single empty line.
    """
    lines = []
    for line in head_comment.split("\n"):
        line = line.strip()
        if line.startswith("#"):
            line = line[1:]
        lines.append(line.strip())
    return lines


def serialize_value(value: ExampleValue) -> str:
    """Re-serialize an example value to YAML text.

    Collections are written in block style in their original order. The
    result has no document end marker and no trailing newline.
    """
    text = yaml.dump(
        value.data,
        Dumper=_DocDumper,
        default_flow_style=False,
        sort_keys=False,
        allow_unicode=True,
    )
    if text.endswith("\n" + DOCUMENT_END_MARKER):
        text = text[: -len(DOCUMENT_END_MARKER)]
    return text.rstrip("\n")


def format_data_entry(key: str, value: ExampleValue) -> str:
    """Format one entry of a ConfigMap's ``data:`` section.

    Scalars and empty collections start on the key line; block collections
    start on the next line. Continuation lines are indented below the key.
    """
    lines = serialize_value(value).split("\n")
    if isinstance(value, ScalarValue) or not value.data:
        formatted = [f"{DATA_INDENT}{key}: {lines[0]}"]
        lines = lines[1:]
    else:
        formatted = [f"{DATA_INDENT}{key}:"]
    formatted.extend(f"{NESTED_INDENT}{line}" if line else line for line in lines)
    return "\n".join(formatted)
