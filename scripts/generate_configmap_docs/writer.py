"""Documentation writer for ConfigMap manifests."""

import logging
import sys
from pathlib import Path
from typing import Optional, TextIO

from .content_generator import ConfigMapDocGenerator
from .example_parser import ExampleParser
from .manifest_parser import ManifestParser

logger = logging.getLogger(__name__)


class ConfigMapDocWriter:
    """Writes Markdown documentation for a single ConfigMap manifest."""

    def __init__(self, manifest_file: Path, stream: Optional[TextIO] = None):
        """Initialize the writer.

        Args:
            manifest_file: Path to the ConfigMap manifest.
            stream: Stream the documentation is written to. Defaults to standard output.
        """
        self.manifest_file = manifest_file
        self.stream = stream
        self.parser = ManifestParser(manifest_file)

    def generate(self) -> str:
        """Generate the documentation and write it to the output stream.

        Returns:
            The generated Markdown.

        Raises:
            ConfigMapDocError: If the manifest cannot be read, parsed or documented.
        """
        logger.debug(f"Analyzing file: {self.manifest_file}")
        manifest = self.parser.parse()

        entries = ExampleParser(manifest.example_raw, self.manifest_file).parse()

        content = ConfigMapDocGenerator(manifest, entries, self.manifest_file).generate()
        logger.debug(f"Documentation content length: {len(content)} characters")

        stream = self.stream if self.stream is not None else sys.stdout
        stream.write(content)
        return content
