"""Storage backends that load and save a flat string-to-string map."""

from __future__ import annotations

import json
import os
from abc import ABC, abstractmethod
from pathlib import Path


class StorageBackend(ABC):
    """Something that can load and persist a string-to-string map."""

    @abstractmethod
    def load(self) -> dict[str, str]:
        """Return the stored map."""

    @abstractmethod
    def save(self, store: dict[str, str]) -> None:
        """Persist the given map."""


class FileStorage(StorageBackend):
    """Keeps the map as a JSON object in a single file."""

    def __init__(self, path: str | os.PathLike[str]) -> None:
        self.path = Path(path)

    def load(self) -> dict[str, str]:
        """Read the map from disk; a missing or unreadable file gives an empty map."""
        try:
            with self.path.open(encoding="utf-8") as fh:
                data = json.load(fh)
        except (OSError, ValueError):
            return {}
        if not isinstance(data, dict) or not all(
            isinstance(value, str) for value in data.values()
        ):
            return {}
        return data

    def save(self, store: dict[str, str]) -> None:
        """Write the map atomically through a temporary file beside the target."""
        tmp_path = self.path.with_suffix(".tmp")
        with tmp_path.open("w", encoding="utf-8") as fh:
            json.dump(store, fh, separators=(",", ":"))
        os.replace(tmp_path, self.path)


class InMemoryStorage(StorageBackend):
    """Holds an optional initial map and never persists anything."""

    def __init__(self, initial: dict[str, str] | None = None) -> None:
        self._store = initial

    def load(self) -> dict[str, str]:
        """Return a copy of the initial map, or an empty map if there was none."""
        return dict(self._store) if self._store is not None else {}

    def save(self, store: dict[str, str]) -> None:
        """Do nothing; memory storage is not persisted."""


class HybridStorage(StorageBackend):
    """Uses a file when the path already exists and memory otherwise."""

    def __init__(self, path: str | os.PathLike[str]) -> None:
        self.backend: FileStorage | InMemoryStorage
        if Path(path).exists():
            self.backend = FileStorage(path)
        else:
            self.backend = InMemoryStorage(None)

    def load(self) -> dict[str, str]:
        """Load from whichever backend was chosen."""
        return self.backend.load()

    def save(self, store: dict[str, str]) -> None:
        """Save through the file backend; a no-op for memory."""
        self.backend.save(store)