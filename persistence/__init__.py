from __future__ import annotations

from .errors import DecodeError, KeyNotFoundError, PersistenceIOError, StartupError, StoreError
from .file_store import FileStore, new_file_store
from .interfaces import KeyValueStore
from .memory_store import MemoryStore, new_memory_store
from .repositories import AsyncKeyValueRepository, AsyncStoreRepository

__all__ = [
    "KeyValueStore",
    "MemoryStore",
    "FileStore",
    "new_memory_store",
    "new_file_store",
    "AsyncKeyValueRepository",
    "AsyncStoreRepository",
    "StoreError",
    "KeyNotFoundError",
    "PersistenceIOError",
    "DecodeError",
    "StartupError",
]
