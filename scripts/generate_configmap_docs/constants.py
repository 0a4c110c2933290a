"""Constants and shared configuration for the generate_configmap_docs package."""

# ConfigMap documentation template
CONFIGMAP_DOC_TEMPLATE = "CONFIGMAP.md.j2"

# Field under `data` holding the embedded example document
EXAMPLE_FIELD = "_example"

# Jekyll/Liquid markers wrapped around comment text so it is rendered verbatim
RAW_START = "{% raw %}"
RAW_END = "{% endraw %}"

# Indentation used for entries under `data:` and for nested values
DATA_INDENT = "  "
NESTED_INDENT = "    "

# Exit codes
EXIT_SUCCESS = 0  # Every manifest was documented
EXIT_ERROR = 1  # A manifest could not be read, parsed or documented
