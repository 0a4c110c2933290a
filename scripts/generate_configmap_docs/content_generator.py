"""Markdown content generator for ConfigMap manifests."""

import logging
from pathlib import Path
from typing import Any, Dict, List, Optional

from jinja2 import Environment, FileSystemLoader

from .constants import CONFIGMAP_DOC_TEMPLATE, RAW_END, RAW_START
from .errors import Source
from .example_parser import ExampleEntry
from .manifest_parser import Manifest
from .utils import comment_lines, derive_title, format_data_entry, format_key_title, serialize_value

logger = logging.getLogger(__name__)


class ConfigMapDocGenerator:
    """Generates Markdown documentation for the keys of a ConfigMap."""

    def __init__(self, manifest: Manifest, entries: List[ExampleEntry], source: Optional[Source] = None):
        """Initialize the generator.

        Args:
            manifest: The parsed ConfigMap manifest.
            entries: The example entries, in document order.
            source: Path or label of the manifest, used in errors. Defaults to the ConfigMap name.
        """
        self.manifest = manifest
        self.entries = entries
        self.source = source if source is not None else manifest.name

        # Set up Jinja2 environment
        template_dir = Path(__file__).parent / "templates"
        self.env = Environment(
            loader=FileSystemLoader(template_dir),
            trim_blocks=True,
            lstrip_blocks=True,
            keep_trailing_newline=True,
        )
        self.template = self.env.get_template(CONFIGMAP_DOC_TEMPLATE)

    def _prepare_property(self, entry: ExampleEntry) -> Dict[str, Any]:
        """Prepare the template data for one documented key.

        Args:
            entry: The example entry to document.

        Returns:
            Dictionary with the heading, description lines, default and example block.
        """
        return {
            "key": entry.key,
            "title": format_key_title(entry.key),
            "description": comment_lines(entry.head_comment),
            "default": serialize_value(entry.value),
            "data_block": format_data_entry(entry.key, entry.value),
        }

    def _prepare_template_context(self) -> Dict[str, Any]:
        """Prepare the context data for the Jinja2 template.

        Returns:
            Dictionary containing all variables needed by the template.
        """
        return {
            "title": derive_title(self.manifest.name, self.source),
            "manifest": self.manifest,
            "properties": [self._prepare_property(entry) for entry in self.entries],
            "raw_start": RAW_START,
            "raw_end": RAW_END,
        }

    def generate(self) -> str:
        """Generate the complete Markdown document.

        Returns:
            The Markdown document as a string.

        Raises:
            MalformedInputError: If no title can be derived from the ConfigMap name.
        """
        context = self._prepare_template_context()
        content = self.template.render(**context)
        logger.debug(f"Rendered {len(context['properties'])} properties for {self.manifest.name}")
        return content
