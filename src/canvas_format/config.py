"""Configuration constants for canvas-format."""

import os

# File suffix used by the canvas application.
CANVAS_SUFFIX: str = ".canvas"

# Indentation used when saving, matching what the canvas application writes.
JSON_INDENT: str = "\t"

# Width of ids produced by RandomIdGenerator.
RANDOM_ID_BITS: int = 64

# Environment variable that turns on strict id checks in the CLI.
STRICT_ENV_VAR: str = "CANVAS_FORMAT_STRICT"

_TRUTHY = {"1", "true", "yes", "on"}


def resolve_strict_default() -> bool:
    """Return True if strict checking was requested through the environment."""
    return os.environ.get(STRICT_ENV_VAR, "").strip().lower() in _TRUTHY
