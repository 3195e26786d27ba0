"""Saved cities, most recently added first."""

from __future__ import annotations

import json
import logging
from typing import Iterator, List

from ..utils.config import FAVORITES_KEY
from ..utils.storage import KeyValueStorage

LOGGER = logging.getLogger(__name__)

MAX_FAVORITES = 10


class FavoritesStore:
    """Deduplicated, capped list of place names backed by key-value storage.

    The list is read once at construction. Each mutation rewrites the full
    snapshot; storage failures are logged and otherwise ignored so the
    in-memory list always reflects what the user did.
    """

    def __init__(
        self,
        storage: KeyValueStorage,
        key: str = FAVORITES_KEY,
        limit: int = MAX_FAVORITES,
    ) -> None:
        self.storage = storage
        self.key = key
        self.limit = limit
        self._names: List[str] = self.load()

    def load(self) -> List[str]:
        try:
            raw = self.storage.get(self.key)
        except (OSError, ValueError) as exc:
            LOGGER.warning("Could not read favorites: %s", exc)
            return []
        if not raw:
            return []
        try:
            names = json.loads(raw)
        except ValueError:
            LOGGER.warning("Ignoring corrupt favorites data under %s", self.key)
            return []
        if not isinstance(names, list) or not all(isinstance(name, str) for name in names):
            LOGGER.warning("Ignoring unexpected favorites payload under %s", self.key)
            return []
        unique = list(dict.fromkeys(names))[: self.limit]
        if len(unique) != len(names):
            LOGGER.warning(
                "Trimmed stored favorites from %d to %d entries", len(names), len(unique)
            )
        return unique

    def _save(self) -> None:
        try:
            self.storage.set(self.key, json.dumps(self._names))
        except (OSError, TypeError, ValueError) as exc:
            LOGGER.warning("Could not persist favorites: %s", exc)

    @property
    def favorites(self) -> List[str]:
        return list(self._names)

    def contains(self, name: str) -> bool:
        return name in self._names

    def toggle(self, name: str) -> List[str]:
        """Remove ``name`` if saved, otherwise put it first and apply the cap."""
        if not name:
            return self.favorites
        if name in self._names:
            self._names = [saved for saved in self._names if saved != name]
        else:
            self._names = [name, *self._names][: self.limit]
        self._save()
        return self.favorites

    def remove(self, name: str) -> List[str]:
        self._names = [saved for saved in self._names if saved != name]
        self._save()
        return self.favorites

    def __contains__(self, name: object) -> bool:
        return name in self._names

    def __iter__(self) -> Iterator[str]:
        return iter(list(self._names))

    def __len__(self) -> int:
        return len(self._names)
