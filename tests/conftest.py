from __future__ import annotations

from pathlib import Path
import sys


import pytest


# Ensure the repository root (parent of ./tests) is importable during pytest collection.
# This avoids ModuleNotFoundError for imports like `import persistence...` under pytest import modes
# that don't automatically prepend the cwd/rootdir to sys.path.
REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))


SETTINGS_ENV = (
    "KV_DATA_FILE",
    "KV_ATOMIC_WRITES",
    "KV_FILE_MODE",
    "KV_NOT_FOUND_STATUS",
    "HOST",
    "PORT",
    "LOG_LEVEL",
    "DEBUG_LOG_REQUESTS",
)


@pytest.fixture
def sandbox_project(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> Path:
    """
    Run from a temp directory with a clean environment so tests never touch a real
    ./somefile.json or ./local.env.
    """
    for name in SETTINGS_ENV:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("KV_DATA_FILE", str(tmp_path / "data" / "store.json"))
    return tmp_path


@pytest.fixture
def data_file(sandbox_project: Path) -> Path:
    return sandbox_project / "data" / "store.json"
