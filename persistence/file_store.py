from __future__ import annotations

import os
from pathlib import Path
from typing import IO

from pydantic import ValidationError

from json_store import decode_document, encode_document

from .errors import DecodeError, PersistenceIOError, StartupError
from .interfaces import KeyValueStore
from .locks import GLOBAL_PATH_LOCKS
from .memory_store import MemoryStore

OPEN_FLAGS = os.O_RDWR | os.O_CREAT | os.O_APPEND
TEMP_FLAGS = os.O_WRONLY | os.O_CREAT | os.O_TRUNC


class FileStore(KeyValueStore):
    """
    Key-value store backed by a single JSON object on disk.

    - Lookups are served from an in-memory MemoryStore; reads never touch the file.
    - Every set() rewrites the whole map. After a successful set() the file holds
      exactly the JSON encoding of the in-memory map.
    - atomic=True (default): write a sibling ``<name>.tmp`` and os.replace() it over
      the target. atomic=False: keep the file open and truncate/seek/write in place.
    - A failed write step raises PersistenceIOError; the in-memory update is kept.
    """

    def __init__(self, path: str | os.PathLike[str], *, atomic: bool = True, file_mode: int = 0o666):
        self._path = Path(path)
        self._atomic = atomic
        self._file_mode = file_mode
        self._lock = GLOBAL_PATH_LOCKS.lock_for(self._path)
        self._file: IO[str] | None = None
        self._closed = False

        file = self._open()
        try:
            data = self._load(file)
        except BaseException:
            file.close()
            raise
        self._memory = MemoryStore(data)

        if atomic:
            file.close()
        else:
            self._file = file

    def _open(self) -> IO[str]:
        try:
            fd = os.open(self._path, OPEN_FLAGS, self._file_mode)
        except OSError as e:
            raise StartupError(f"unable to open file {self._path}: {e}") from e
        return os.fdopen(fd, "a+", encoding="utf-8")

    def _load(self, file: IO[str]) -> dict[str, str]:
        try:
            file.seek(0)
            raw = file.read()
        except (OSError, UnicodeDecodeError) as e:
            raise DecodeError(self._path, e) from e
        try:
            return decode_document(raw)
        except ValidationError as e:
            detail = "; ".join(err["msg"] for err in e.errors())
            raise DecodeError(self._path, detail) from e

    def get(self, key: str) -> str:
        return self._memory.get(key)

    def set(self, key: str, value: str) -> None:
        with self._lock:
            self._memory.set(key, value)
            if self._closed:
                raise PersistenceIOError("write", self._path, "store is closed")
            if self._atomic:
                self._replace()
            else:
                self._rewrite()

    def _rewrite(self) -> None:
        file = self._file
        assert file is not None
        try:
            file.truncate(0)
        except OSError as e:
            raise PersistenceIOError("truncate", self._path, e) from e
        try:
            file.seek(0)
        except OSError as e:
            raise PersistenceIOError("seek", self._path, e) from e
        try:
            file.write(encode_document(self._memory.snapshot()))
            file.flush()
        except (OSError, TypeError, ValueError) as e:
            raise PersistenceIOError("write", self._path, e) from e

    def _replace(self) -> None:
        tmp_path = self._path.with_name(self._path.name + ".tmp")
        try:
            fd = os.open(tmp_path, TEMP_FLAGS, self._file_mode)
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                f.write(encode_document(self._memory.snapshot()))
        except (OSError, TypeError, ValueError) as e:
            raise PersistenceIOError("write", self._path, e) from e
        try:
            os.replace(tmp_path, self._path)
        except OSError as e:
            raise PersistenceIOError("replace", self._path, e) from e

    def snapshot(self) -> dict[str, str]:
        return self._memory.snapshot()

    def close(self) -> None:
        with self._lock:
            self._closed = True
            if self._file is not None:
                self._file.close()
                self._file = None

    def __enter__(self) -> "FileStore":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def __len__(self) -> int:
        return len(self._memory)

    def __contains__(self, key: object) -> bool:
        return key in self._memory


def new_file_store(
    path: str | os.PathLike[str], *, atomic: bool = True, file_mode: int = 0o666
) -> KeyValueStore:
    return FileStore(path, atomic=atomic, file_mode=file_mode)
