from __future__ import annotations

import os
from pathlib import Path
from unittest.mock import patch

import pytest

from fileops.config import APPEND_SUFFIX, PIPELINE, PipelineConfig, load_env_file_lenient


@pytest.mark.unit
def test_pipeline_defaults() -> None:
    cfg = PipelineConfig()
    assert cfg.FILES_SUBDIR == PIPELINE.FILES_SUBDIR
    assert APPEND_SUFFIX == "\n\nappending to this file"
    assert cfg.ENCODING == "utf-8"


@pytest.mark.unit
def test_load_env_file_lenient_sets_missing_keys_only(tmp_path: Path) -> None:
    env = tmp_path / ".env"
    env.write_text(
        "# comment\n"
        "export FILEOPS_TEST_A='alpha'\n"
        "FILEOPS_TEST_B=\"beta\"\n"
        "not a pair\n"
        "1BAD=x\n",
        encoding="utf-8",
    )

    with patch.dict(os.environ, {"FILEOPS_TEST_B": "kept"}, clear=False):
        load_env_file_lenient(env)
        assert os.environ["FILEOPS_TEST_A"] == "alpha"
        assert os.environ["FILEOPS_TEST_B"] == "kept"
        assert "1BAD" not in os.environ


@pytest.mark.unit
def test_load_env_file_lenient_ignores_missing_file(tmp_path: Path) -> None:
    load_env_file_lenient(tmp_path / "absent.env")
