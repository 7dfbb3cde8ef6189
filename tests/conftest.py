from __future__ import annotations

from pathlib import Path

import pytest

from filestore.storage.file_data_store import FileDataStore


@pytest.fixture
def root(tmp_path: Path) -> Path:
    return tmp_path / "dragonfly"


@pytest.fixture
def store(root: Path) -> FileDataStore:
    return FileDataStore(root_path=str(root))
