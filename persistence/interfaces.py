from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class KeyValueStore(Protocol):
    """
    Minimal store interface: string keys mapped to string values.
    """

    def get(self, key: str) -> str:
        """Return the value for key, or raise KeyNotFoundError."""
        ...

    def set(self, key: str, value: str) -> None:
        """Insert or overwrite key. May raise PersistenceIOError for durable stores."""
        ...

    def close(self) -> None:
        """Release anything the store holds open. Safe to call twice."""
        ...
