"""Local key-value storage for saved assessment sessions.

Mirrors a browser's localStorage: string keys mapped to string (JSON) values.
Backends: in-memory (tests/dev) and one-JSON-file-per-key on disk.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Dict, List, Optional

from . import config


logger = logging.getLogger(__name__)


class KeyValueStore:
    """Abstract key-value store."""

    def get_item(self, key: str) -> Optional[str]:
        raise NotImplementedError

    def set_item(self, key: str, value: str) -> bool:
        raise NotImplementedError

    def remove_item(self, key: str) -> bool:
        raise NotImplementedError

    def keys(self) -> List[str]:
        raise NotImplementedError


class MemoryKeyValueStore(KeyValueStore):
    """In-memory store (tests and development)."""

    def __init__(self):
        self._storage: Dict[str, str] = {}

    def get_item(self, key: str) -> Optional[str]:
        return self._storage.get(key)

    def set_item(self, key: str, value: str) -> bool:
        self._storage[key] = value
        return True

    def remove_item(self, key: str) -> bool:
        self._storage.pop(key, None)
        return True

    def keys(self) -> List[str]:
        return list(self._storage.keys())


class FileKeyValueStore(KeyValueStore):
    """File-backed store, one ``<key>.json`` file per key."""

    def __init__(self, storage_dir: str = "entropy_data"):
        self.storage_dir = Path(storage_dir)
        self.storage_dir.mkdir(parents=True, exist_ok=True)

    def _get_file_path(self, key: str) -> Path:
        return self.storage_dir / f"{key}.json"

    def get_item(self, key: str) -> Optional[str]:
        file_path = self._get_file_path(key)
        if not file_path.exists():
            return None
        try:
            return file_path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            logger.error("Failed to read %s: %s", file_path, e)
            return None

    def set_item(self, key: str, value: str) -> bool:
        file_path = self._get_file_path(key)
        try:
            file_path.write_text(value, encoding="utf-8")
            return True
        except OSError as e:
            logger.error("Failed to write %s: %s", file_path, e)
            return False

    def remove_item(self, key: str) -> bool:
        file_path = self._get_file_path(key)
        try:
            if file_path.exists():
                file_path.unlink()
            return True
        except OSError as e:
            logger.error("Failed to delete %s: %s", file_path, e)
            return False

    def keys(self) -> List[str]:
        return sorted(f.stem for f in self.storage_dir.glob("*.json"))


_default_storage: Optional[KeyValueStore] = None


def get_default_storage() -> KeyValueStore:
    """Return the process-wide store, created from configuration on first use."""
    global _default_storage

    if _default_storage is None:
        if config.STORAGE_TYPE == "memory":
            _default_storage = MemoryKeyValueStore()
        else:
            _default_storage = FileKeyValueStore(config.STORAGE_DIR)
        logger.info("Using %s storage", type(_default_storage).__name__)

    return _default_storage


def set_default_storage(storage: Optional[KeyValueStore]) -> None:
    global _default_storage
    _default_storage = storage


__all__ = [
    "KeyValueStore",
    "MemoryKeyValueStore",
    "FileKeyValueStore",
    "get_default_storage",
    "set_default_storage",
]
