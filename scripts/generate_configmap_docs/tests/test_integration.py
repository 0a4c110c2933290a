"""Integration tests for the ConfigMap documentation generator.

These tests run the generator as a module on the manifests in resources/
and check the exit code and the document written to standard output.
"""

import subprocess
import sys
from pathlib import Path

import pytest

RESOURCES_DIR = Path(__file__).parent / "resources"

# Repository root, so that `-m scripts.generate_configmap_docs` resolves
REPO_ROOT = Path(__file__).parent.parent.parent.parent


def run_generator(*args: str) -> subprocess.CompletedProcess:
    return subprocess.run(
        [sys.executable, "-m", "scripts.generate_configmap_docs", *args],
        capture_output=True,
        text=True,
        cwd=REPO_ROOT,
    )


@pytest.mark.parametrize(
    "manifest,title",
    [
        ("config-autoscaler.yaml", "Autoscaler"),
        ("config-features.yaml", "Features"),
        ("config-empty.yaml", "Empty"),
    ],
)
def test_generate_module_run(manifest, title):
    """Test running the generator as a module on a single manifest."""
    result = run_generator(str(RESOURCES_DIR / manifest))

    assert result.returncode == 0, f"Generator failed for {manifest}!\n\nStderr:\n{result.stderr}"
    assert result.stdout.startswith(f"# Configuring the {title} ConfigMap\n")
    assert "## Properties\n" in result.stdout


def test_generate_module_run_error():
    """Test that a failing manifest exits non-zero and reports the path on stderr."""
    missing = RESOURCES_DIR / "does-not-exist.yaml"

    result = run_generator(str(RESOURCES_DIR / "config-empty.yaml"), str(missing))

    assert result.returncode == 1
    assert "# Configuring the Empty ConfigMap" in result.stdout
    assert "ERROR:" in result.stderr
    assert str(missing) in result.stderr
