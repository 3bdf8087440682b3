from __future__ import annotations

import asyncio
from typing import Protocol

from .interfaces import KeyValueStore


class AsyncKeyValueRepository(Protocol):
    async def get(self, key: str) -> str: ...
    async def set(self, key: str, value: str) -> None: ...
    async def close(self) -> None: ...


class AsyncStoreRepository(AsyncKeyValueRepository):
    """
    Async wrapper around a blocking KeyValueStore.
    Uses asyncio.to_thread to avoid blocking the event loop on file I/O.
    """

    def __init__(self, store: KeyValueStore) -> None:
        self._store = store

    @property
    def store(self) -> KeyValueStore:
        return self._store

    async def get(self, key: str) -> str:
        return await asyncio.to_thread(self._store.get, key)

    async def set(self, key: str, value: str) -> None:
        await asyncio.to_thread(self._store.set, key, value)

    async def close(self) -> None:
        await asyncio.to_thread(self._store.close)
