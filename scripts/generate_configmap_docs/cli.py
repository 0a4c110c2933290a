"""Command-line interface for the generate_configmap_docs package."""

import argparse
import logging
import sys
from pathlib import Path

from .constants import EXIT_ERROR, EXIT_SUCCESS
from .errors import ConfigMapDocError
from .writer import ConfigMapDocWriter

logger = logging.getLogger(__name__)


def parse_arguments():
    """Parse command-line arguments.

    Returns:
        argparse.Namespace: Parsed arguments.
    """
    parser = argparse.ArgumentParser(
        description="Generate Markdown documentation for Kubernetes ConfigMaps with an embedded _example",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Each manifest is documented in order and printed to standard output.
Processing stops at the first manifest that cannot be read or parsed.

Examples:
  # Document a single ConfigMap:
  python -m scripts.generate_configmap_docs config/core/configmaps/autoscaler.yaml

  # Document several ConfigMaps into one file:
  python -m scripts.generate_configmap_docs config/core/configmaps/*.yaml > configmaps.md
        """,
    )
    parser.add_argument(
        "files",
        nargs="+",
        type=Path,
        metavar="FILE",
        help="Path to a ConfigMap manifest (must contain data._example)",
    )

    parser.add_argument("-v", "--verbose", action="store_true", help="Enable verbose output")

    return parser.parse_args()


def main():
    """Main entry point for the CLI."""
    args = parse_arguments()

    # Configure logging at application entry point; stdout carries the Markdown
    log_level = logging.DEBUG if args.verbose else logging.INFO
    logging.basicConfig(level=log_level, format="%(levelname)s: %(message)s", stream=sys.stderr)

    for manifest_file in args.files:
        try:
            ConfigMapDocWriter(manifest_file).generate()
        except ConfigMapDocError as e:
            logger.error(str(e))
            sys.exit(EXIT_ERROR)

    logger.debug(f"Documented {len(args.files)} ConfigMap(s).")
    sys.exit(EXIT_SUCCESS)
