"""Small key-value stores used to persist dashboard preferences."""

from __future__ import annotations

import hashlib
import logging
from pathlib import Path
from typing import Dict, Optional, Protocol

LOGGER = logging.getLogger(__name__)


class KeyValueStorage(Protocol):
    """Synchronous get/set of a single string value per key."""

    def get(self, key: str) -> Optional[str]:
        ...

    def set(self, key: str, value: str) -> None:
        ...


class FileStorage:
    """Persist string values to disk, one file per key."""

    def __init__(self, root: Path) -> None:
        self.root = root
        self.root.mkdir(parents=True, exist_ok=True)

    def _hash_key(self, key: str) -> Path:
        digest = hashlib.sha256(key.encode("utf-8")).hexdigest()
        return self.root / digest

    def get_path(self, key: str) -> Path:
        """Return the path where the value for ``key`` lives."""
        return self._hash_key(key).with_suffix(".json")

    def get(self, key: str) -> Optional[str]:
        path = self.get_path(key)
        if not path.exists():
            return None
        return path.read_text(encoding="utf-8")

    def set(self, key: str, value: str) -> None:
        path = self.get_path(key)
        path.parent.mkdir(parents=True, exist_ok=True)
        # Replace atomically.
        tmp = path.with_suffix(".tmp")
        tmp.write_text(value, encoding="utf-8")
        tmp.replace(path)
        LOGGER.debug("Stored %d bytes under %s", len(value), key)


class MemoryStorage:
    """Dict-backed storage for tests and throwaway sessions."""

    def __init__(self, initial: Optional[Dict[str, str]] = None) -> None:
        self.values: Dict[str, str] = dict(initial or {})

    def get(self, key: str) -> Optional[str]:
        return self.values.get(key)

    def set(self, key: str, value: str) -> None:
        self.values[key] = value
