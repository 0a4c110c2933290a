"""Entry point for running generate_configmap_docs as a module.

Usage:
    python -m scripts.generate_configmap_docs path/to/configmap.yaml [more.yaml ...]
"""

from .cli import main

if __name__ == "__main__":
    main()
