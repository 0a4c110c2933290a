"""Shared pytest fixtures for generate_configmap_docs tests."""

import tempfile
import textwrap
from pathlib import Path

import pytest

RESOURCES_DIR = Path(__file__).parent / "resources"


def build_manifest(
    example: str,
    name: str = "config-demo",
    namespace: str = "demo",
    api_version: str = "v1",
    kind: str = "ConfigMap",
) -> str:
    """Helper to build ConfigMap manifest text around an example document.

    Args:
        example: Content of `data._example`.
        name: The ConfigMap name.
        namespace: The ConfigMap namespace.
        api_version: The manifest apiVersion.
        kind: The manifest kind.

    Returns:
        The manifest as YAML text.
    """
    indented = textwrap.indent(textwrap.dedent(example).strip("\n"), "    ")
    return (
        f"apiVersion: {api_version}\n"
        f"kind: {kind}\n"
        "metadata:\n"
        f"  name: {name}\n"
        f"  namespace: {namespace}\n"
        "data:\n"
        "  _example: |\n"
        f"{indented}\n"
    )


def write_manifest(parent_dir: Path, filename: str, content: str) -> Path:
    """Helper to write a manifest file.

    Args:
        parent_dir: Directory to write the manifest in.
        filename: Name of the manifest file.
        content: Manifest text.

    Returns:
        Path to the written manifest.
    """
    manifest_file = parent_dir / filename
    manifest_file.write_text(content, encoding="utf-8")
    return manifest_file


@pytest.fixture
def temp_dir():
    """Create a temporary directory for testing."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def autoscaler_manifest_file():
    """Knative-style autoscaler ConfigMap with commented example keys."""
    return RESOURCES_DIR / "config-autoscaler.yaml"


@pytest.fixture
def features_manifest_file():
    """ConfigMap whose example holds nested mappings and sequences."""
    return RESOURCES_DIR / "config-features.yaml"


@pytest.fixture
def empty_manifest_file():
    """ConfigMap whose example is an empty mapping."""
    return RESOURCES_DIR / "config-empty.yaml"


@pytest.fixture
def replicas_example():
    """Example document with a commented `replicas` key and an uncommented `mode` key."""
    return """\
# number of replicas
replicas: 3
mode: "auto"
"""


@pytest.fixture
def replicas_manifest_file(temp_dir, replicas_example):
    """Manifest file built around the replicas example."""
    return write_manifest(temp_dir, "config-demo.yaml", build_manifest(replicas_example))
