"""Storage modules for the speaker frame infrastructure layer."""

from .filesystem import FilesystemStorage
from .kv_store import InMemoryKeyValueStore, JsonFileKeyValueStore, KeyValueStore
from .score_store import ScoreStore

__all__ = [
    "FilesystemStorage",
    "InMemoryKeyValueStore",
    "JsonFileKeyValueStore",
    "KeyValueStore",
    "ScoreStore",
]
