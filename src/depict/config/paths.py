"""Centralized path management for Depict.

All state lives under a single base directory, overridable with the
DEPICT_HOME environment variable.

Default locations:
- Linux/macOS: ~/.depict
- Windows: %USERPROFILE%\\.depict
"""

import os
from functools import lru_cache
from pathlib import Path

ENV_VAR = "DEPICT_HOME"


@lru_cache(maxsize=1)
def get_depict_home() -> Path:
    """Get the base directory for all Depict data.

    Resolution order:
    1. DEPICT_HOME environment variable (if set)
    2. Platform default (~/.depict)
    """
    if env_home := os.environ.get(ENV_VAR):
        return Path(env_home).expanduser().resolve()

    return Path.home() / ".depict"


def get_config_path() -> Path:
    """Get the default config file path."""
    return get_depict_home() / "config.toml"


def get_storage_path() -> Path:
    """Get the key/value store file path (holds the API key)."""
    return get_depict_home() / "storage.json"


def get_all_paths() -> dict[str, Path]:
    """Get all standard paths for display."""
    return {
        "home": get_depict_home(),
        "config": get_config_path(),
        "storage": get_storage_path(),
    }
