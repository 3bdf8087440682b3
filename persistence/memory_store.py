from __future__ import annotations

import threading
from typing import Mapping

from .errors import KeyNotFoundError
from .interfaces import KeyValueStore


class MemoryStore(KeyValueStore):
    """
    In-memory map of string keys to string values. Nothing is persisted.
    """

    def __init__(self, initial: Mapping[str, str] | None = None) -> None:
        self._lock = threading.Lock()
        self._data: dict[str, str] = dict(initial or {})

    def get(self, key: str) -> str:
        with self._lock:
            try:
                return self._data[key]
            except KeyError:
                raise KeyNotFoundError(key) from None

    def set(self, key: str, value: str) -> None:
        with self._lock:
            self._data[key] = value

    def snapshot(self) -> dict[str, str]:
        with self._lock:
            return dict(self._data)

    def close(self) -> None:
        return None

    def __len__(self) -> int:
        with self._lock:
            return len(self._data)

    def __contains__(self, key: object) -> bool:
        with self._lock:
            return key in self._data


def new_memory_store() -> KeyValueStore:
    return MemoryStore()
