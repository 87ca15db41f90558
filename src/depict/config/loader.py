"""Configuration loading from TOML files."""

import logging
import tomllib
from pathlib import Path

from depict.config.models import DepictConfig
from depict.config.paths import get_config_path

logger = logging.getLogger(__name__)


def _get_default_config_paths() -> list[Path]:
    """Get ordered list of default config file locations."""
    return [
        Path("depict.toml"),  # Current directory
        get_config_path(),  # ~/.depict/config.toml (or DEPICT_HOME)
    ]


def find_config_path(path: Path | None = None) -> Path | None:
    """Resolve the config file to load.

    Raises:
        FileNotFoundError: If an explicit path does not exist.
    """
    if path is not None:
        config_path = Path(path).expanduser()
        if not config_path.exists():
            raise FileNotFoundError(f"Config file not found: {config_path}")
        return config_path

    for default_path in _get_default_config_paths():
        expanded = default_path.expanduser()
        if expanded.exists():
            return expanded
    return None


def load_config(path: Path | None = None) -> DepictConfig:
    """Load configuration from a TOML file.

    Unlike an explicit path, the default locations are optional: when none
    of them exists the built-in defaults are used.

    Args:
        path: Explicit path to config file. If None, searches default locations.

    Returns:
        Validated DepictConfig instance.

    Raises:
        FileNotFoundError: If an explicit config file is missing.
        tomllib.TOMLDecodeError: If the file is not valid TOML.
        pydantic.ValidationError: If the file does not match the schema.
    """
    config_path = find_config_path(path)
    if config_path is None:
        logger.debug("No config file found, using defaults")
        return DepictConfig()

    with config_path.open("rb") as f:
        raw_config = tomllib.load(f)

    logger.debug("Loaded config from %s", config_path)
    return DepictConfig.model_validate(raw_config)
