"""CLI command modules."""

from depict.cli.commands import config, describe, key

__all__ = [
    "config",
    "describe",
    "key",
]
