from __future__ import annotations

import os
import threading
from pathlib import Path


class PathLockRegistry:
    """
    Hands out one lock per resolved file path, so every store writing the same
    backing file serializes its writes on the same lock.
    """

    def __init__(self) -> None:
        self._guard = threading.Lock()
        self._locks: dict[str, threading.Lock] = {}

    def lock_for(self, path: str | os.PathLike[str]) -> threading.Lock:
        key = os.fspath(Path(path).resolve())
        with self._guard:
            return self._locks.setdefault(key, threading.Lock())


GLOBAL_PATH_LOCKS = PathLockRegistry()
