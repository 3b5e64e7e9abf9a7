"""Key-value store backends for scores and suggestions.

This module provides the minimal get/set store the frame persists into,
with an in-memory backend for tests and single-process use and a JSON
file backend that several processes can share.
"""

import copy
import logging
import threading
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any

from ..exceptions.storage_exceptions import StoreError, StoreReadError, StoreWriteError
from .filesystem import FilesystemStorage

# Configure logger
logger = logging.getLogger(__name__)


class KeyValueStore(ABC):
    """Abstract get/set store keyed by strings."""

    @abstractmethod
    def get(self, key: str) -> Any | None:
        """Return the value stored under ``key``, or None if absent.

        Raises
        ------
            StoreReadError: If the backend cannot be read
        """

    @abstractmethod
    def set(self, key: str, value: Any) -> None:
        """Store ``value`` under ``key``, replacing any previous value.

        Raises
        ------
            StoreWriteError: If the backend cannot be written
        """


class InMemoryKeyValueStore(KeyValueStore):
    """Process-local store backed by a dictionary."""

    def __init__(self, initial: dict[str, Any] | None = None) -> None:
        self._data: dict[str, Any] = copy.deepcopy(initial) if initial else {}
        self.lock = threading.RLock()

    def get(self, key: str) -> Any | None:
        with self.lock:
            return copy.deepcopy(self._data.get(key))

    def set(self, key: str, value: Any) -> None:
        with self.lock:
            self._data[key] = copy.deepcopy(value)

    def keys(self) -> list[str]:
        with self.lock:
            return list(self._data)


class JsonFileKeyValueStore(KeyValueStore):
    """Store persisted as a single JSON object on disk.

    The file is re-read on every access so separate processes see each
    other's writes. Concurrent writers are last-write-wins.
    """

    def __init__(self, path: str | Path = ".frame_store.json") -> None:
        """Initialize the file-backed store.

        Args:
            path: Location of the JSON document; created on first write

        Raises
        ------
            StoreError: If the parent directory cannot be created
        """
        self.path = Path(path)
        self.storage = FilesystemStorage()
        self.lock = threading.RLock()

        self.storage.ensure_directory(self.path.parent)

    def _load(self) -> dict[str, Any]:
        if not self.storage.file_exists(self.path):
            return {}

        try:
            data = self.storage.read_json(self.path)
        except StoreError as e:
            raise StoreReadError(f"Failed to load store {self.path}: {e}") from e

        if not isinstance(data, dict):
            raise StoreReadError(
                f"Store file {self.path} does not hold a JSON object"
            )
        return data

    def get(self, key: str) -> Any | None:
        with self.lock:
            return self._load().get(key)

    def set(self, key: str, value: Any) -> None:
        with self.lock:
            data = self._load()
            data[key] = value
            try:
                self.storage.write_json(self.path, data)
            except StoreError as e:
                raise StoreWriteError(f"Failed to persist value: {e}", key=key) from e

        logger.debug(f"Stored key {key} in {self.path}")
