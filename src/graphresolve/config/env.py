"""Environment variable loaders for configuration."""

from __future__ import annotations

import os


def env_value(name: str, default: str) -> str:
    """Return an environment variable, falling back to ``default`` when unset or blank."""

    value = os.getenv(name)
    if value is None or not value.strip():
        return default
    return value.strip()
