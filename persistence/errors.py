from __future__ import annotations

import os
from typing import Any

# Text used when a FileStore write step fails, keyed by step name.
STEP_MESSAGES = {
    "truncate": "unable to truncate file",
    "seek": "unable to get the beginning of file",
    "write": "unable to encode data into the file",
    "replace": "unable to replace file",
}


class StoreError(Exception):
    """Base class for every storage-layer error."""


class KeyNotFoundError(StoreError, KeyError):
    def __init__(self, key: str):
        super().__init__(f"key not found: {key}")
        self.key = key

    def __str__(self) -> str:
        # KeyError would otherwise repr() the message.
        return str(self.args[0])


class PersistenceIOError(StoreError):
    """
    Raised when rewriting the backing file fails during set().

    The in-memory map has already been updated when this is raised.
    """

    def __init__(self, step: str, path: str | os.PathLike[str], cause: Any):
        prefix = STEP_MESSAGES.get(step, f"unable to {step} file")
        super().__init__(f"{prefix} {os.fspath(path)}: {cause}")
        self.step = step
        self.path = os.fspath(path)


class DecodeError(StoreError):
    def __init__(self, path: str | os.PathLike[str], detail: Any):
        super().__init__(f"unable to decode contents of file {os.fspath(path)}: {detail}")
        self.path = os.fspath(path)


class StartupError(StoreError):
    """Backing file (or its directory) cannot be opened or created."""
