from __future__ import annotations

from pathlib import Path
from typing import Callable

import pytest


@pytest.fixture
def make_pipeline_root(tmp_path: Path) -> Callable[..., Path]:
    """Build a root directory with files/starter.txt holding the given content."""

    def _make(content="hello", name: str = "root") -> Path:
        root = tmp_path / name
        files_dir = root / "files"
        files_dir.mkdir(parents=True)
        starter = files_dir / "starter.txt"
        if isinstance(content, bytes):
            starter.write_bytes(content)
        elif content is not None:
            starter.write_bytes(content.encode("utf-8"))
        return root

    return _make


@pytest.fixture
def pipeline_root(make_pipeline_root) -> Path:
    return make_pipeline_root("hello")
