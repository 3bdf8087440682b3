from __future__ import annotations

import os
from dataclasses import dataclass


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in ("1", "true", "yes", "on")


def _env_int(name: str, default: int, *, base: int = 10) -> int:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    return int(raw.strip(), base)


@dataclass(frozen=True)
class Settings:
    # Storage
    data_file: str
    atomic_writes: bool
    file_mode: int

    # HTTP
    host: str
    port: int
    not_found_status: int

    # Logging
    log_level: str
    debug_log_requests: bool


def get_settings() -> Settings:
    data_file = os.getenv("KV_DATA_FILE", "somefile.json")

    # Atomic temp-file-and-rename writes; set false for in-place truncate/rewrite.
    atomic_writes = _env_bool("KV_ATOMIC_WRITES", True)

    # Octal, e.g. "666" or "0o644". Applied when the backing file is created.
    file_mode = _env_int("KV_FILE_MODE", 0o666, base=8)

    host = os.getenv("HOST", "0.0.0.0")
    port = _env_int("PORT", 8080)

    # Missing keys are reported as 500 unless overridden (e.g. 404).
    not_found_status = _env_int("KV_NOT_FOUND_STATUS", 500)

    log_level = os.getenv("LOG_LEVEL", "INFO").strip().upper() or "INFO"
    debug_log_requests = _env_bool("DEBUG_LOG_REQUESTS", False)

    return Settings(
        data_file=data_file,
        atomic_writes=atomic_writes,
        file_mode=file_mode,
        host=host,
        port=port,
        not_found_status=not_found_status,
        log_level=log_level,
        debug_log_requests=debug_log_requests,
    )
