from __future__ import annotations

import os
from pathlib import Path

from .errors import StartupError


def ensure_dir(path: Path) -> Path:
    path.mkdir(parents=True, exist_ok=True)
    return path


def resolve_data_file(raw: str | os.PathLike[str]) -> Path:
    # Relative paths stay relative to the working directory.
    path = Path(raw).expanduser()
    try:
        ensure_dir(path.parent)
    except OSError as e:
        raise StartupError(f"unable to create directory {path.parent}: {e}") from e
    return path
