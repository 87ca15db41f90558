"""Persistent storage for the Google AI Studio API key."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Protocol

from filelock import FileLock

from depict.config.paths import get_storage_path

logger = logging.getLogger(__name__)

DEFAULT_CREDENTIAL_KEY = "google-ai-api-key"


class KeyValueStore(Protocol):
    """String key/value storage that survives restarts."""

    def get(self, key: str) -> str | None: ...

    def set(self, key: str, value: str) -> None: ...

    def delete(self, key: str) -> bool: ...


class JSONFileStore:
    """Read/write string values from a single JSON file.

    Uses file locking for safe concurrent access. File permissions
    are set to 0o600 (owner-only read/write).
    """

    def __init__(self, path: Path | None = None) -> None:
        self._path = path or get_storage_path()
        self._lock = FileLock(str(self._path) + ".lock")

    @property
    def path(self) -> Path:
        return self._path

    def _read_all(self) -> dict[str, str]:
        if not self._path.exists():
            return {}
        try:
            data = json.loads(self._path.read_text())
        except (json.JSONDecodeError, OSError) as e:
            logger.warning("Failed to read %s: %s", self._path.name, e)
            return {}
        if not isinstance(data, dict):
            logger.warning("Ignoring malformed %s", self._path.name)
            return {}
        return {k: v for k, v in data.items() if isinstance(v, str)}

    def _write_all(self, data: dict[str, str]) -> None:
        self._path.write_text(json.dumps(data, indent=2) + "\n")
        self._path.chmod(0o600)

    def get(self, key: str) -> str | None:
        if not self._path.exists():
            return None
        with self._lock:
            data = self._read_all()
        return data.get(key)

    def set(self, key: str, value: str) -> None:
        self._path.parent.mkdir(parents=True, exist_ok=True)
        with self._lock:
            data = self._read_all()
            data[key] = value
            self._write_all(data)

    def delete(self, key: str) -> bool:
        """Remove a key.

        Returns:
            True if the key was removed, False if it was not present.
        """
        if not self._path.exists():
            return False
        with self._lock:
            data = self._read_all()
            if key not in data:
                return False
            del data[key]
            self._write_all(data)
        return True


class CredentialStore:
    """The single API key, kept under one well-known key.

    Every call goes straight to the backing store; nothing is cached.
    Callers reject blank keys before calling :meth:`set`.
    """

    def __init__(
        self,
        store: KeyValueStore | None = None,
        key: str = DEFAULT_CREDENTIAL_KEY,
    ) -> None:
        self._store = store if store is not None else JSONFileStore()
        self._key = key

    @property
    def key(self) -> str:
        return self._key

    def get(self) -> str | None:
        return self._store.get(self._key) or None

    def set(self, value: str) -> None:
        self._store.set(self._key, value)
        logger.debug("Stored API key under %s", self._key)

    def clear(self) -> None:
        if self._store.delete(self._key):
            logger.debug("Removed API key under %s", self._key)


def mask_credential(value: str) -> str:
    """Mask a key for display, keeping the first and last 4 characters."""
    if len(value) < 12:
        return "***"
    return f"{value[:4]}...{value[-4:]}"
