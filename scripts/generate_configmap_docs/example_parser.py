"""Parser for the example document embedded in a ConfigMap.

The example is composed into a PyYAML node tree instead of being loaded into
a dict so that the documentation can follow the authored key order and pick
up the comment block written above each key.
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Union

import yaml

from .constants import EXAMPLE_FIELD
from .errors import MalformedInputError, ParseError, Source

logger = logging.getLogger(__name__)


@dataclass
class ScalarValue:
    """A single scalar (string, number, boolean or null)."""

    value: Any

    @property
    def data(self) -> Any:
        return self.value


@dataclass
class SequenceValue:
    """A YAML sequence."""

    items: List[Any] = field(default_factory=list)

    @property
    def data(self) -> List[Any]:
        return self.items


@dataclass
class MappingValue:
    """A YAML mapping, in document order."""

    items: Dict[Any, Any] = field(default_factory=dict)

    @property
    def data(self) -> Dict[Any, Any]:
        return self.items


ExampleValue = Union[ScalarValue, SequenceValue, MappingValue]


@dataclass
class ExampleEntry:
    """One documented key of the example.

    Attributes:
        key: The key as written in the example.
        value: The example (default) value.
        head_comment: Comment lines written directly above the key, joined by
            newlines, each starting with ``#``. Empty when there is none.
    """

    key: str
    value: ExampleValue
    head_comment: str = ""


def _wrap_value(node: yaml.Node, data: Any) -> ExampleValue:
    """Wrap constructed data in the variant matching its node kind."""
    if isinstance(node, yaml.MappingNode):
        return MappingValue(data)
    if isinstance(node, yaml.SequenceNode):
        return SequenceValue(data)
    return ScalarValue(data)


def _is_comment(line: str) -> bool:
    return line.lstrip().startswith("#")


def _indent_of(line: str) -> int:
    return len(line) - len(line.lstrip())


class ExampleParser:
    """Extracts the ordered, commented entries of an example document."""

    def __init__(self, example_raw: str, source: Source):
        """Initialize the parser.

        Args:
            example_raw: Text of the example YAML document.
            source: Path or label of the manifest, used in errors.
        """
        self.example_raw = example_raw
        self.source = source
        self._lines = example_raw.splitlines()

    def _head_comment(self, key_node: yaml.Node) -> str:
        """Collect the comment block written directly above *key_node*.

        The block ends at the first blank or non-comment line. Comment lines
        indented deeper than the key belong to the preceding value.
        """
        column = key_node.start_mark.column
        comments: List[str] = []
        index = key_node.start_mark.line - 1
        while index >= 0:
            line = self._lines[index]
            if not _is_comment(line) or _indent_of(line) > column:
                break
            comments.append(line.strip())
            index -= 1
        comments.reverse()
        return "\n".join(comments)

    def _compose(self, loader: yaml.SafeLoader) -> Optional[yaml.Node]:
        """Compose the first document; any following documents are ignored."""
        try:
            if not loader.check_node():
                return None
            return loader.get_node()
        except yaml.YAMLError as e:
            raise ParseError(self.source, f"failed to parse {EXAMPLE_FIELD} YAML: {e}") from e

    def parse(self) -> List[ExampleEntry]:
        """Parse the example into entries, in document order.

        Returns:
            List of entries; empty when the example mapping has no keys.

        Raises:
            ParseError: If the example is not valid YAML.
            MalformedInputError: If the example is empty or not a mapping.
        """
        loader = yaml.SafeLoader(self.example_raw)
        try:
            root = self._compose(loader)
            if root is None:
                raise MalformedInputError(self.source, f"`data.{EXAMPLE_FIELD}` is missing or empty")
            if not isinstance(root, yaml.MappingNode):
                raise MalformedInputError(
                    self.source, f"`data.{EXAMPLE_FIELD}` must contain a mapping, got a {root.id}"
                )

            entries = []
            for key_node, value_node in root.value:
                try:
                    data = loader.construct_object(value_node, deep=True)
                except yaml.YAMLError as e:
                    raise ParseError(self.source, f"failed to parse {EXAMPLE_FIELD} YAML: {e}") from e
                entries.append(
                    ExampleEntry(
                        key=str(key_node.value),
                        value=_wrap_value(value_node, data),
                        head_comment=self._head_comment(key_node),
                    )
                )
        finally:
            loader.dispose()

        logger.debug(f"Found {len(entries)} example entries in {self.source}")
        return entries
