"""Configuration module."""

from depict.config.loader import find_config_path, load_config
from depict.config.models import (
    DepictConfig,
    GeminiConfig,
    StorageConfig,
    UploadConfig,
)
from depict.config.paths import (
    get_config_path,
    get_depict_home,
    get_storage_path,
)

__all__ = [
    "DepictConfig",
    "GeminiConfig",
    "StorageConfig",
    "UploadConfig",
    "find_config_path",
    "get_config_path",
    "get_depict_home",
    "get_storage_path",
    "load_config",
]
